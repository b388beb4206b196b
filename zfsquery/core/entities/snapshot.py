"""
Snapshot domain entities: single snapshots and recursive snapshot groups.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import List, Tuple, Dict, Any, TYPE_CHECKING

from ..exceptions.zfs_exceptions import ZFSException
from ..result import Result
from .file_system import FileSystem
from .pool import Pool, attached_session

if TYPE_CHECKING:
    from .hold import Hold, RecursiveHoldGroup


@dataclass(frozen=True)
class Snapshot:
    """A point-in-time snapshot of one file system."""

    name: str
    file_system: FileSystem
    guid: int
    creation: datetime

    @property
    def full_name(self) -> str:
        """``<file system full name>@<name>``"""
        return f"{self.file_system.full_name}@{self.name}"

    @property
    def pool(self) -> Pool:
        return self.file_system.pool

    def holds(self) -> Result[List['Hold'], ZFSException]:
        return attached_session(self.pool).hold_service.list_holds(self)

    def get_prop(self, prop: str) -> Result[str, ZFSException]:
        return attached_session(self.pool).file_system_service.get_property(self.full_name, prop)

    def verbose_string(self) -> str:
        return (f"{{Snapshot Name: {self.name!r}, FileSystem: {self.file_system}, "
                f"GUID: {self.guid}, Creation: {self.creation.isoformat()}}}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'full_name': self.full_name,
            'file_system': self.file_system.full_name,
            'guid': self.guid,
            'creation': self.creation.isoformat(),
        }

    def __str__(self) -> str:
        return f"Snapshot({self.full_name})"


@dataclass(frozen=True)
class RecursiveSnapshotGroup:
    """Snapshots sharing one name and creation time on every file system of a pool."""

    name: str
    creation: datetime
    pool: Pool
    snapshots: Tuple[Snapshot, ...]

    def holds(self) -> Result[List['RecursiveHoldGroup'], ZFSException]:
        """Load the hold tags applied across every snapshot of the group, newest first."""
        return attached_session(self.pool).recursive_group_service.list_recursive_hold_groups(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'creation': self.creation.isoformat(),
            'pool': self.pool.name,
            'snapshots': [snapshot.full_name for snapshot in self.snapshots],
        }

    def __str__(self) -> str:
        return f"RecursiveSnapshotGroup({self.pool.name}@{self.name})"
