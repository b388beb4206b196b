"""
Pool API router: read-only navigation from pools down to holds.
"""
import logging
from typing import Optional, TypeVar

from fastapi import APIRouter, Depends, HTTPException, Query

from ..dependencies import get_session
from ..models import (
    FileSystemListResponse,
    HoldListResponse,
    PoolListResponse,
    PoolResponse,
    PropertyResponse,
    RecursiveHoldGroupListResponse,
    RecursiveSnapshotGroupListResponse,
    SnapshotListResponse,
)
from ...core.entities.file_system import FileSystem
from ...core.entities.pool import Pool
from ...core.exceptions.zfs_exceptions import (
    ZFSException,
    PoolNotFoundError,
    FileSystemNotFoundError,
    SnapshotNotFoundError,
    RecursiveSnapshotGroupNotFoundError,
)
from ...core.result import Result
from ...session import Session

logger = logging.getLogger(__name__)

T = TypeVar('T')

NOT_FOUND_ERRORS = (
    PoolNotFoundError,
    FileSystemNotFoundError,
    SnapshotNotFoundError,
    RecursiveSnapshotGroupNotFoundError,
)

router = APIRouter(prefix="/api/v1/pools", tags=["pools"])


def _unwrap(result: Result[T, ZFSException]) -> T:
    """Return the value of a successful result or raise the matching HTTP error."""
    if result.is_success:
        return result.value

    error = result.error
    if isinstance(error, NOT_FOUND_ERRORS):
        raise HTTPException(status_code=404, detail=str(error))

    logger.error(f"Query failed: {error}")
    raise HTTPException(status_code=500, detail=str(error))


def _load_pool(session: Session, pool_name: str) -> Pool:
    return _unwrap(session.get_pool(pool_name))


def _load_file_system(session: Session, pool: Pool, full_name: Optional[str]) -> FileSystem:
    """Look up a file system by full name, or the root file system when no name is given."""
    if full_name is None:
        full_name = pool.name
    return _unwrap(session.file_system_service.get_file_system(pool, full_name))


@router.get("/", response_model=PoolListResponse)
def list_pools(session: Session = Depends(get_session)):
    """List all ZFS pools."""
    pools = [pool.to_dict() for pool in _unwrap(session.list_pools())]
    return PoolListResponse(success=True, pools=pools, count=len(pools))


@router.get("/{pool_name}", response_model=PoolResponse)
def get_pool(pool_name: str, session: Session = Depends(get_session)):
    """Get information about a specific pool."""
    pool = _load_pool(session, pool_name)
    return PoolResponse(success=True, pool=pool.to_dict())


@router.get("/{pool_name}/properties/{property_name}", response_model=PropertyResponse)
def get_pool_property(pool_name: str, property_name: str, session: Session = Depends(get_session)):
    """Get a single pool property value."""
    pool = _load_pool(session, pool_name)
    value = _unwrap(pool.get_prop(property_name))
    return PropertyResponse(success=True, pool=pool.name, property=property_name, value=value)


@router.get("/{pool_name}/filesystems", response_model=FileSystemListResponse)
def list_file_systems(pool_name: str, session: Session = Depends(get_session)):
    pool = _load_pool(session, pool_name)
    file_systems = [fs.to_dict() for fs in _unwrap(pool.file_systems())]
    return FileSystemListResponse(success=True, pool=pool.name, file_systems=file_systems,
                                  count=len(file_systems))


@router.get("/{pool_name}/snapshots", response_model=SnapshotListResponse)
def list_snapshots(
    pool_name: str,
    filesystem: Optional[str] = Query(None, description="Full file system name, defaults to the root"),
    session: Session = Depends(get_session)
):
    """List the snapshots of one file system of a pool."""
    pool = _load_pool(session, pool_name)
    file_system = _load_file_system(session, pool, filesystem)
    snapshots = [snapshot.to_dict() for snapshot in _unwrap(file_system.snapshots())]
    return SnapshotListResponse(success=True, file_system=file_system.full_name, snapshots=snapshots,
                                count=len(snapshots))


@router.get("/{pool_name}/holds", response_model=HoldListResponse)
def list_holds(
    pool_name: str,
    snapshot: str = Query(..., description="Snapshot name, without the file system part"),
    filesystem: Optional[str] = Query(None, description="Full file system name, defaults to the root"),
    session: Session = Depends(get_session)
):
    """List the holds of one snapshot."""
    pool = _load_pool(session, pool_name)
    file_system = _load_file_system(session, pool, filesystem)
    target = _unwrap(session.snapshot_service.get_snapshot(file_system, snapshot))
    holds = [hold.to_dict() for hold in _unwrap(target.holds())]
    return HoldListResponse(success=True, snapshot=target.full_name, holds=holds, count=len(holds))


@router.get("/{pool_name}/recursive-snapshots", response_model=RecursiveSnapshotGroupListResponse)
def list_recursive_snapshot_groups(pool_name: str, session: Session = Depends(get_session)):
    """List snapshot groups taken recursively across the whole pool."""
    pool = _load_pool(session, pool_name)
    groups = [group.to_dict() for group in _unwrap(pool.recursive_snapshot_groups())]
    return RecursiveSnapshotGroupListResponse(success=True, pool=pool.name, groups=groups, count=len(groups))


@router.get("/{pool_name}/recursive-snapshots/{group_name}/holds",
            response_model=RecursiveHoldGroupListResponse)
def list_recursive_hold_groups(pool_name: str, group_name: str, session: Session = Depends(get_session)):
    pool = _load_pool(session, pool_name)
    group = _unwrap(session.recursive_group_service.get_recursive_snapshot_group(pool, group_name))
    hold_groups = [hold_group.to_dict() for hold_group in _unwrap(group.holds())]
    return RecursiveHoldGroupListResponse(success=True, pool=pool.name, group=group.name,
                                          hold_groups=hold_groups, count=len(hold_groups))
