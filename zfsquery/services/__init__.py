from .pool_service import PoolService, POOL_COLUMNS
from .file_system_service import FileSystemService, FILE_SYSTEM_COLUMNS
from .snapshot_service import SnapshotService, SNAPSHOT_COLUMNS
from .hold_service import HoldService
from .recursive_group_service import RecursiveGroupService

__all__ = [
    'PoolService',
    'POOL_COLUMNS',
    'FileSystemService',
    'FILE_SYSTEM_COLUMNS',
    'SnapshotService',
    'SNAPSHOT_COLUMNS',
    'HoldService',
    'RecursiveGroupService',
]
