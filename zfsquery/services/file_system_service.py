from typing import List, TYPE_CHECKING

from ..core.entities.file_system import FileSystem
from ..core.entities.pool import Pool
from ..core.exceptions.zfs_exceptions import (
    ZFSException,
    FileSystemException,
    FileSystemNotFoundError,
    DuplicateFileSystemError,
    SnapshotException,
)
from ..core.interfaces.command_port import ListType
from ..core.parsing import (
    split_lines,
    split_columns,
    parse_uint64,
    parse_epoch_seconds,
    parse_only_line,
)
from ..core.result import Result

if TYPE_CHECKING:
    from ..session import Session


FILE_SYSTEM_COLUMNS = ["name", "guid", "creation"]


class FileSystemService:
    """Loads the file systems of a pool and fetches zfs properties."""

    def __init__(self, session: 'Session'):
        self._session = session
        self._logger = session.logger

    def list_file_systems(self, pool: Pool) -> Result[List[FileSystem], ZFSException]:
        self._logger.debug(f"Listing file systems of pool {pool.name}", {"pool_name": pool.name})

        output = self._session.command.zfs.list(pool.name, True, ListType.FILESYSTEM, FILE_SYSTEM_COLUMNS)
        if output.is_failure:
            self._logger.warning(f"zfs list failed for pool {pool.name}: {output.error}")
            return Result.failure(FileSystemException(
                f"failed to list file systems of {pool}, reason: {output.error}",
                error_code="FILE_SYSTEM_LIST_FAILED",
                details={"pool_name": pool.name, "cause": output.error.to_dict()}
            ))

        try:
            file_systems = [self.parse_file_system_info(pool, line) for line in split_lines(output.value)]
            self._validate_listing(pool, file_systems)
        except ZFSException as e:
            self._logger.error(f"Failed to parse file system listing of pool {pool.name}: {e}",
                               {"pool_name": pool.name, "error_code": e.error_code})
            return Result.failure(e)

        self._logger.info(f"Successfully listed {len(file_systems)} file systems of pool {pool.name}",
                          {"pool_name": pool.name})
        return Result.success(file_systems)

    def get_file_system(self, pool: Pool, full_name: str) -> Result[FileSystem, ZFSException]:
        """Look up one file system of ``pool`` by its full name."""
        def find(file_systems: List[FileSystem]) -> Result[FileSystem, ZFSException]:
            for file_system in file_systems:
                if file_system.full_name == full_name:
                    return Result.success(file_system)
            return Result.failure(FileSystemNotFoundError(full_name))

        return self.list_file_systems(pool).flat_map(find)

    def get_property(self, target: str, prop: str) -> Result[str, ZFSException]:
        """Fetch one property of a file system or snapshot (``target`` is its full name)."""
        self._logger.debug(f"Getting property {prop} of {target}", {"target": target})

        output = self._session.command.zfs.get(target, [prop], ["value"])
        if output.is_failure:
            exception_class = SnapshotException if "@" in target else FileSystemException
            return Result.failure(exception_class(
                f"failed to get property {prop!r} of filesystem/snapshot {target!r}, reason: {output.error}",
                error_code="ZFS_GET_FAILED",
                details={"target": target, "property": prop, "cause": output.error.to_dict()}
            ))

        try:
            return Result.success(parse_only_line(output.value, f"property {prop!r} of {target!r}"))
        except ZFSException as e:
            return Result.failure(e)

    def parse_file_system_info(self, pool: Pool, line: str) -> FileSystem:
        cols = split_columns(line, len(FILE_SYSTEM_COLUMNS), "file system info")

        name = cols[0]
        prefix = f"{pool.name}/"
        if name.startswith(prefix):
            relative_name = name[len(prefix):]
        else:
            relative_name = name

        return FileSystem(
            name=relative_name,
            is_root=name == pool.name,
            pool=pool,
            guid=parse_uint64(cols[1], "file system info guid"),
            creation=parse_epoch_seconds(cols[2], "file system info creation"),
        )

    @staticmethod
    def _validate_listing(pool: Pool, file_systems: List[FileSystem]) -> None:
        # Exactly one root, no repeated full names.
        full_names = [file_system.full_name for file_system in file_systems]
        duplicates = sorted({name for name in full_names if full_names.count(name) > 1})
        if duplicates:
            raise DuplicateFileSystemError(pool.name, f"duplicate file system names {duplicates}", duplicates)

        roots = [file_system.full_name for file_system in file_systems if file_system.is_root]
        if len(roots) != 1:
            raise DuplicateFileSystemError(
                pool.name, f"expected exactly one root file system, but found {len(roots)}", roots)
