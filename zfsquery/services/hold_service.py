from typing import List, TYPE_CHECKING

from ..core.entities.hold import Hold
from ..core.entities.snapshot import Snapshot
from ..core.exceptions.zfs_exceptions import ZFSException, HoldException
from ..core.parsing import split_lines, split_columns, parse_local_timestamp, HOLD_TIMESTAMP_LAYOUT
from ..core.result import Result

if TYPE_CHECKING:
    from ..session import Session


# `zfs holds -H` prints: <snapshot>\t<tag>\t<timestamp>
HOLD_COLUMN_COUNT = 3


class HoldService:
    """Loads the holds placed on a snapshot."""

    def __init__(self, session: 'Session'):
        self._session = session
        self._logger = session.logger

    def list_holds(self, snapshot: Snapshot) -> Result[List[Hold], ZFSException]:
        target = snapshot.full_name
        self._logger.debug(f"Listing holds of {target}", {"target": target})

        output = self._session.command.zfs.holds(target)
        if output.is_failure:
            self._logger.warning(f"zfs holds failed for {target}: {output.error}")
            return Result.failure(HoldException(
                f"failed to list holds of snapshot {snapshot}, reason: {output.error}",
                error_code="HOLD_LIST_FAILED",
                details={"snapshot": target, "cause": output.error.to_dict()}
            ))

        try:
            holds = [self.parse_hold_info(snapshot, line) for line in split_lines(output.value)]
        except ZFSException as e:
            self._logger.error(f"Failed to parse hold listing of {target}: {e}",
                               {"target": target, "error_code": e.error_code})
            return Result.failure(e)

        return Result.success(holds)

    def parse_hold_info(self, snapshot: Snapshot, line: str) -> Hold:
        cols = split_columns(line, HOLD_COLUMN_COUNT, "hold info")

        return Hold(
            tag=cols[1],
            creation=parse_local_timestamp(cols[2], HOLD_TIMESTAMP_LAYOUT, "hold info creation"),
            snapshot=snapshot,
        )
