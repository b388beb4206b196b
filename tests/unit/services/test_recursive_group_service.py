import pytest
from datetime import datetime, timezone

from zfsquery.core.entities.snapshot import RecursiveSnapshotGroup
from zfsquery.core.exceptions.zfs_exceptions import (
    CommandFailedError,
    FileSystemException,
    InconsistentHoldGroupError,
    InconsistentSnapshotGroupError,
    RecursiveSnapshotGroupNotFoundError,
    SnapshotException,
)
from zfsquery.core.interfaces.command_port import ListType
from zfsquery.core.result import Result
from zfsquery.infrastructure.fake_command import FakeHold, FakeZfsCommand
from tests.fixtures.fake_pools import HOLD_TIME_1, HOLD_TIME_2, T1, T2, recursive_pool, snapshot


def load_tank(make_session, model):
    session = make_session({"tank": model})
    return session, session.get_pool("tank").unwrap()


class TestRecursiveSnapshotGroups:
    """Reconciliation of same-named snapshots across a pool."""

    def test_complete_groups_newest_first(self, tank):
        result = tank.recursive_snapshot_groups()

        assert result.is_success
        assert [group.name for group in result.value] == ["s2", "s1"]
        assert [group.creation for group in result.value] == [
            datetime.fromtimestamp(T2, tz=timezone.utc),
            datetime.fromtimestamp(T1, tz=timezone.utc),
        ]

    def test_group_members(self, tank):
        s1 = tank.recursive_snapshot_groups().value[1]

        assert isinstance(s1, RecursiveSnapshotGroup)
        assert s1.pool is tank
        assert sorted(snap.full_name for snap in s1.snapshots) == ["tank/a@s1", "tank/b@s1", "tank@s1"]
        assert {snap.file_system.full_name for snap in s1.snapshots} == {"tank", "tank/a", "tank/b"}

    def test_partial_name_is_not_a_group(self, tank):
        names = [group.name for group in tank.recursive_snapshot_groups().value]

        assert "partial" not in names

    def test_missing_member_drops_group(self, make_session):
        model = recursive_pool()
        del model.file_systems["b"].snapshots["s1"]
        _, pool = load_tank(make_session, model)

        result = pool.recursive_snapshot_groups()

        assert [group.name for group in result.value] == ["s2"]

    def test_single_file_system_pool(self, session):
        pool = session.get_pool("TestPool1").unwrap()

        assert pool.recursive_snapshot_groups().value == []

    def test_creation_mismatch_fails(self, make_session):
        model = recursive_pool()
        model.file_systems["b"].snapshots["s1"].props["creation"] = str(T1 + 1)
        _, pool = load_tank(make_session, model)

        result = pool.recursive_snapshot_groups()

        assert result.is_failure
        assert isinstance(result.error, InconsistentSnapshotGroupError)
        assert "tank/b@s1" in str(result.error)
        assert str(result.error).startswith(
            "snapshot with the same name has different timestamps across file systems")

    def test_mismatch_in_partial_name_is_ignored(self, make_session):
        model = recursive_pool()
        model.file_systems["a"].snapshots["partial"] = snapshot(203, T1)
        _, pool = load_tank(make_session, model)

        result = pool.recursive_snapshot_groups()

        assert result.is_success
        assert [group.name for group in result.value] == ["s2", "s1"]

    def test_equal_creation_keeps_listing_order(self, make_session):
        model = recursive_pool()
        for fs in [model.root, *model.file_systems.values()]:
            fs.snapshots["s2"].props["creation"] = str(T1)
        _, pool = load_tank(make_session, model)

        result = pool.recursive_snapshot_groups()

        assert [group.name for group in result.value] == ["s1", "s2"]

    def test_file_system_failure_propagates(self, tank_session, tank):
        failure = CommandFailedError("zfs", ["list"], reason="exit status 1", returncode=1)
        tank_session.command.zfs.set_list_override(lambda *args: Result.failure(failure))

        result = tank.recursive_snapshot_groups()

        assert isinstance(result.error, FileSystemException)

    def test_snapshot_failure_propagates(self, tank_session, tank):
        delegate = FakeZfsCommand(tank_session.command.zfs.store)

        def fail_snapshots(target, recursive, list_type, columns):
            if list_type is ListType.SNAPSHOT and target == "tank/a":
                return Result.failure(CommandFailedError("zfs", ["list"], reason="exit status 1", returncode=1))
            return delegate.list(target, recursive, list_type, columns)

        tank_session.command.zfs.set_list_override(fail_snapshots)

        result = tank.recursive_snapshot_groups()

        assert result.is_failure
        assert isinstance(result.error, SnapshotException)

    def test_get_group(self, tank_session, tank):
        result = tank_session.recursive_group_service.get_recursive_snapshot_group(tank, "s1")

        assert result.value.name == "s1"

    def test_get_group_not_found(self, tank_session, tank):
        result = tank_session.recursive_group_service.get_recursive_snapshot_group(tank, "partial")

        assert isinstance(result.error, RecursiveSnapshotGroupNotFoundError)

    def test_to_dict(self, tank):
        group = tank.recursive_snapshot_groups().value[0]

        data = group.to_dict()
        assert data["name"] == "s2"
        assert data["pool"] == "tank"
        assert sorted(data["snapshots"]) == ["tank/a@s2", "tank/b@s2", "tank@s2"]


class TestRecursiveHoldGroups:
    """Reconciliation of same-tagged holds across a recursive snapshot group."""

    def s1_group(self, pool):
        return [group for group in pool.recursive_snapshot_groups().value if group.name == "s1"][0]

    def test_hold_groups_newest_first(self, make_session):
        _, pool = load_tank(make_session, recursive_pool(holds={"keep": HOLD_TIME_1, "backup": HOLD_TIME_2}))
        group = self.s1_group(pool)

        result = group.holds()

        assert result.is_success
        assert [hold_group.tag for hold_group in result.value] == ["backup", "keep"]
        assert [hold_group.creation for hold_group in result.value] == [HOLD_TIME_2, HOLD_TIME_1]
        assert all(hold_group.recursive_snapshot_group is group for hold_group in result.value)

    def test_no_holds(self, tank):
        group = self.s1_group(tank)

        assert group.holds().value == []

    def test_tag_on_some_members_is_not_a_group(self, make_session):
        model = recursive_pool(holds={"keep": HOLD_TIME_1})
        model.root.snapshots["s1"].holds["only-root"] = FakeHold(creation=HOLD_TIME_2)
        _, pool = load_tank(make_session, model)

        result = self.s1_group(pool).holds()

        assert [hold_group.tag for hold_group in result.value] == ["keep"]

    def test_timestamp_mismatch_fails(self, make_session):
        model = recursive_pool(holds={"keep": HOLD_TIME_1})
        model.file_systems["b"].snapshots["s1"].holds["keep"] = FakeHold(creation=HOLD_TIME_2)
        _, pool = load_tank(make_session, model)

        result = self.s1_group(pool).holds()

        assert result.is_failure
        assert isinstance(result.error, InconsistentHoldGroupError)
        assert "keep" in str(result.error)

    def test_hold_failure_propagates(self, make_session):
        session, pool = load_tank(make_session, recursive_pool(holds={"keep": HOLD_TIME_1}))
        group = self.s1_group(pool)
        failure = CommandFailedError("zfs", ["holds"], reason="exit status 1", returncode=1)
        session.command.zfs.set_holds_override(lambda snapshot: Result.failure(failure))

        result = group.holds()

        assert result.is_failure

    def test_to_dict(self, make_session):
        _, pool = load_tank(make_session, recursive_pool(holds={"keep": HOLD_TIME_1}))

        hold_group = self.s1_group(pool).holds().value[0]

        assert hold_group.to_dict() == {
            "tag": "keep",
            "creation": HOLD_TIME_1.astimezone().isoformat(),
            "recursive_snapshot_group": "s1",
            "pool": "tank",
        }


@pytest.mark.parametrize("tag", ["keep", "backup"])
def test_hold_group_creation_comes_from_members(make_session, tag):
    _, pool = load_tank(make_session, recursive_pool(holds={"keep": HOLD_TIME_1, "backup": HOLD_TIME_2}))
    group = [g for g in pool.recursive_snapshot_groups().value if g.name == "s1"][0]

    hold_groups = {hold_group.tag: hold_group for hold_group in group.holds().value}
    members = [snap.holds().value for snap in group.snapshots]

    expected = {hold.creation for holds in members for hold in holds if hold.tag == tag}
    assert {hold_groups[tag].creation} == expected
