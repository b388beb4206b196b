from typing import List, TYPE_CHECKING

from ..core.entities.pool import Pool
from ..core.exceptions.zfs_exceptions import ZFSException, PoolException, PoolNotFoundError
from ..core.parsing import (
    split_lines,
    split_columns,
    parse_uint64,
    parse_uint8,
    parse_only_line,
    require_non_empty,
)
from ..core.result import Result

if TYPE_CHECKING:
    from ..session import Session


POOL_COLUMNS = ["name", "guid", "size", "allocated", "free", "fragmentation", "health", "altroot"]


class PoolService:
    """Loads pools through the zpool capability of a session."""

    def __init__(self, session: 'Session'):
        self._session = session
        self._logger = session.logger

    def list_pools(self) -> Result[List[Pool], ZFSException]:
        """List every pool on the system, in the order the tool reports them."""
        self._logger.debug("Listing pools", {"columns": POOL_COLUMNS})

        output = self._session.command.zpool.list(POOL_COLUMNS)
        if output.is_failure:
            self._logger.warning(f"zpool list failed: {output.error}")
            return Result.failure(PoolException(
                f"failed to list pools, reason: {output.error}",
                error_code="POOL_LIST_FAILED",
                details={"cause": output.error.to_dict()}
            ))

        try:
            pools = [self.parse_pool_info(line) for line in split_lines(output.value)]
        except ZFSException as e:
            self._logger.error(f"Failed to parse pool listing: {e}", {"error_code": e.error_code})
            return Result.failure(e)

        self._logger.info(f"Successfully listed {len(pools)} pools")
        return Result.success(pools)

    def get_pool(self, pool_name: str) -> Result[Pool, ZFSException]:
        """Look up a single pool by name."""
        def find(pools: List[Pool]) -> Result[Pool, ZFSException]:
            for pool in pools:
                if pool.name == pool_name:
                    return Result.success(pool)
            return Result.failure(PoolNotFoundError(pool_name))

        return self.list_pools().flat_map(find)

    def get_property(self, pool: Pool, prop: str) -> Result[str, ZFSException]:
        """Fetch the value of a single pool property."""
        self._logger.debug(f"Getting property {prop} of pool {pool.name}", {"pool_name": pool.name})

        output = self._session.command.zpool.get(pool.name, [prop], ["value"])
        if output.is_failure:
            return Result.failure(PoolException(
                f"failed to get property {prop!r} of pool {pool.name!r}, reason: {output.error}",
                error_code="POOL_GET_FAILED",
                details={"pool_name": pool.name, "property": prop, "cause": output.error.to_dict()}
            ))

        try:
            return Result.success(parse_only_line(output.value, f"property {prop!r} of pool {pool.name!r}"))
        except ZFSException as e:
            return Result.failure(e)

    def parse_pool_info(self, line: str) -> Pool:
        cols = split_columns(line, len(POOL_COLUMNS), "pool info")

        return Pool(
            name=require_non_empty(cols[0], "name", "pool info name"),
            guid=parse_uint64(cols[1], "pool info guid"),
            size=parse_uint64(cols[2], "pool info size"),
            allocated=parse_uint64(cols[3], "pool info allocated"),
            free=parse_uint64(cols[4], "pool info free"),
            fragmentation_percent=parse_uint8(cols[5], "pool info fragmentation"),
            health_status=require_non_empty(cols[6], "health", "pool info health"),
            alt_root=require_non_empty(cols[7], "altroot", "pool info altroot"),
            session=self._session,
        )
