import pytest
from datetime import datetime, timezone

from zfsquery.core.entities.file_system import FileSystem
from zfsquery.core.exceptions.zfs_exceptions import (
    CommandFailedError,
    DuplicateFileSystemError,
    FileSystemException,
    FileSystemNotFoundError,
    LineFormatError,
    ParseError,
    SnapshotException,
)
from zfsquery.core.interfaces.command_port import ListType
from zfsquery.core.result import Result
from zfsquery.services.file_system_service import FILE_SYSTEM_COLUMNS
from tests.fixtures.fake_pools import T1


class TestFileSystemService:
    """Test suite for FileSystemService."""

    def test_list_file_systems(self, tank):
        result = tank.file_systems()

        assert result.is_success
        assert [fs.full_name for fs in result.value] == ["tank", "tank/a", "tank/b"]
        assert [fs.name for fs in result.value] == ["tank", "a", "b"]
        assert [fs.is_root for fs in result.value] == [True, False, False]
        assert [fs.guid for fs in result.value] == [10, 20, 30]

    def test_file_systems_reference_their_pool(self, tank):
        for fs in tank.file_systems().value:
            assert fs.pool is tank
            assert fs.creation == datetime.fromtimestamp(T1, tz=timezone.utc)

    def test_list_requests_recursive_file_system_listing(self, tank_session, tank):
        calls = []

        def capture(target, recursive, list_type, columns):
            calls.append((target, recursive, list_type, columns))
            return Result.success("tank\t1\t1\n")

        tank_session.command.zfs.set_list_override(capture)
        tank.file_systems()

        assert calls == [("tank", True, ListType.FILESYSTEM, FILE_SYSTEM_COLUMNS)]

    def test_nested_names_keep_their_path(self, tank_session, tank):
        output = "tank\t1\t1\ntank/a\t2\t1\ntank/a/deep\t3\t1\n"
        tank_session.command.zfs.set_list_override(lambda *args: Result.success(output))

        result = tank.file_systems()

        assert [fs.name for fs in result.value] == ["tank", "a", "a/deep"]

    def test_child_named_like_the_pool(self, tank_session, tank):
        output = "tank\t1\t1\ntank/tank\t2\t1\n"
        tank_session.command.zfs.set_list_override(lambda *args: Result.success(output))

        result = tank.file_systems()

        assert result.is_success
        assert [(fs.name, fs.is_root) for fs in result.value] == [("tank", True), ("tank", False)]
        assert [fs.full_name for fs in result.value] == ["tank", "tank/tank"]

    def test_duplicate_names_fail(self, tank_session, tank):
        output = "tank\t1\t1\ntank/a\t2\t1\ntank/a\t3\t1\n"
        tank_session.command.zfs.set_list_override(lambda *args: Result.success(output))

        result = tank.file_systems()

        assert result.is_failure
        assert isinstance(result.error, DuplicateFileSystemError)
        assert result.error.details["names"] == ["tank/a"]

    def test_missing_root_fails(self, tank_session, tank):
        tank_session.command.zfs.set_list_override(lambda *args: Result.success("tank/a\t2\t1\n"))

        result = tank.file_systems()

        assert result.is_failure
        assert isinstance(result.error, DuplicateFileSystemError)

    def test_wrong_column_count(self, tank_session, tank):
        tank_session.command.zfs.set_list_override(lambda *args: Result.success("tank\t1\n"))

        result = tank.file_systems()

        assert isinstance(result.error, LineFormatError)

    @pytest.mark.parametrize("line,description", [
        ("tank\tx\t1", "file system info guid"),
        ("tank\t1\tnever", "file system info creation"),
    ])
    def test_parse_errors(self, tank_session, tank, line, description):
        tank_session.command.zfs.set_list_override(lambda *args: Result.success(line + "\n"))

        result = tank.file_systems()

        assert isinstance(result.error, ParseError)
        assert result.error.description == description

    def test_command_failure(self, tank_session, tank):
        failure = CommandFailedError("zfs", ["list"], reason="exit status 1", returncode=1)
        tank_session.command.zfs.set_list_override(lambda *args: Result.failure(failure))

        result = tank.file_systems()

        assert isinstance(result.error, FileSystemException)
        assert str(result.error).startswith("failed to list file systems of Pool(tank), reason:")

    def test_get_file_system(self, tank_session, tank):
        result = tank_session.file_system_service.get_file_system(tank, "tank/b")

        assert result.is_success
        assert result.value.guid == 30

    def test_get_file_system_not_found(self, tank_session, tank):
        result = tank_session.file_system_service.get_file_system(tank, "tank/zzz")

        assert isinstance(result.error, FileSystemNotFoundError)

    def test_get_prop(self, tank):
        root = tank.file_systems().value[0]

        assert root.get_prop("guid").value == "10"
        assert root.get_prop("nosuchprop").value == "-"

    def test_get_prop_failure(self, tank_session, tank):
        child = tank.file_systems().value[1]
        failure = CommandFailedError("zfs", ["get"], reason="exit status 1", returncode=1)
        tank_session.command.zfs.set_get_override(lambda *args: Result.failure(failure))

        result = child.get_prop("compression")

        assert isinstance(result.error, FileSystemException)
        assert not isinstance(result.error, SnapshotException)
        assert "'tank/a'" in str(result.error)

    def test_entity_strings(self, tank):
        child = tank.file_systems().value[1]

        assert str(child) == "FileSystem(tank/a)"
        assert "Name: 'a'" in child.verbose_string()
        assert child.to_dict()["full_name"] == "tank/a"
        assert isinstance(child, FileSystem)
