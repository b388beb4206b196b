from typing import List, TYPE_CHECKING

from ..core.entities.file_system import FileSystem
from ..core.entities.snapshot import Snapshot
from ..core.exceptions.zfs_exceptions import ZFSException, SnapshotException, SnapshotNotFoundError
from ..core.interfaces.command_port import ListType
from ..core.parsing import split_lines, split_columns, parse_uint64, parse_epoch_seconds
from ..core.result import Result

if TYPE_CHECKING:
    from ..session import Session


SNAPSHOT_COLUMNS = ["name", "guid", "creation"]


class SnapshotService:
    """Loads the snapshots of a single file system."""

    def __init__(self, session: 'Session'):
        self._session = session
        self._logger = session.logger

    def list_snapshots(self, file_system: FileSystem) -> Result[List[Snapshot], ZFSException]:
        target = file_system.full_name
        self._logger.debug(f"Listing snapshots of {target}", {"target": target})

        output = self._session.command.zfs.list(target, False, ListType.SNAPSHOT, SNAPSHOT_COLUMNS)
        if output.is_failure:
            self._logger.warning(f"zfs list failed for snapshots of {target}: {output.error}")
            return Result.failure(SnapshotException(
                f"failed to list snapshots of file system {file_system}, reason: {output.error}",
                error_code="SNAPSHOT_LIST_FAILED",
                details={"file_system": target, "cause": output.error.to_dict()}
            ))

        try:
            snapshots = [self.parse_snapshot_info(file_system, line) for line in split_lines(output.value)]
        except ZFSException as e:
            self._logger.error(f"Failed to parse snapshot listing of {target}: {e}",
                               {"target": target, "error_code": e.error_code})
            return Result.failure(e)

        self._logger.debug(f"Listed {len(snapshots)} snapshots of {target}", {"target": target})
        return Result.success(snapshots)

    def get_snapshot(self, file_system: FileSystem, name: str) -> Result[Snapshot, ZFSException]:
        def find(snapshots: List[Snapshot]) -> Result[Snapshot, ZFSException]:
            for snapshot in snapshots:
                if snapshot.name == name:
                    return Result.success(snapshot)
            return Result.failure(SnapshotNotFoundError(f"{file_system.full_name}@{name}"))

        return self.list_snapshots(file_system).flat_map(find)

    def parse_snapshot_info(self, file_system: FileSystem, line: str) -> Snapshot:
        cols = split_columns(line, len(SNAPSHOT_COLUMNS), "snapshot info")

        name = cols[0]
        prefix = f"{file_system.full_name}@"
        if name.startswith(prefix):
            name = name[len(prefix):]

        return Snapshot(
            name=name,
            file_system=file_system,
            guid=parse_uint64(cols[1], "snapshot info guid"),
            creation=parse_epoch_seconds(cols[2], "snapshot info creation"),
        )
