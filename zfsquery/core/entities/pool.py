"""
Pool domain entity.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, TYPE_CHECKING

from ..exceptions.zfs_exceptions import ZFSException
from ..result import Result

if TYPE_CHECKING:
    from ...session import Session
    from .file_system import FileSystem
    from .snapshot import RecursiveSnapshotGroup


@dataclass(frozen=True)
class Pool:
    """A zpool as reported by `zpool list` at load time."""

    name: str
    guid: int
    size: int
    allocated: int
    free: int
    fragmentation_percent: int
    health_status: str
    alt_root: str
    session: Optional['Session'] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if not self.name:
            raise ValueError("Pool name cannot be empty")

    @property
    def has_alt_root(self) -> bool:
        return self.alt_root != "-"

    def file_systems(self) -> Result[List['FileSystem'], ZFSException]:
        """Load the file systems of this pool, root file system first."""
        return attached_session(self).file_system_service.list_file_systems(self)

    def recursive_snapshot_groups(self) -> Result[List['RecursiveSnapshotGroup'], ZFSException]:
        """Load the snapshot groups taken atomically across every file system, newest first."""
        return attached_session(self).recursive_group_service.list_recursive_snapshot_groups(self)

    def get_prop(self, prop: str) -> Result[str, ZFSException]:
        return attached_session(self).pool_service.get_property(self, prop)

    def verbose_string(self) -> str:
        return (f"{{Pool Name: {self.name!r}, GUID: {self.guid}, Size: {self.size}, "
                f"Allocated: {self.allocated}, Free: {self.free}, "
                f"Fragmentation: {self.fragmentation_percent}%, "
                f"HealthStatus: {self.health_status!r}, AltRoot: {self.alt_root!r}}}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert pool to dictionary representation."""
        return {
            'name': self.name,
            'guid': self.guid,
            'size': self.size,
            'allocated': self.allocated,
            'free': self.free,
            'fragmentation_percent': self.fragmentation_percent,
            'health_status': self.health_status,
            'alt_root': self.alt_root,
        }

    def __str__(self) -> str:
        return f"Pool({self.name})"


def attached_session(pool: Pool) -> 'Session':
    """Return the session a pool was loaded through."""
    if pool.session is None:
        raise ValueError(f"{pool} is not attached to a session")
    return pool.session
