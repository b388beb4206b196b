"""
File system domain entity.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import List, Dict, Any, TYPE_CHECKING

from ..exceptions.zfs_exceptions import ZFSException
from ..result import Result
from .pool import Pool, attached_session

if TYPE_CHECKING:
    from .snapshot import Snapshot


@dataclass(frozen=True)
class FileSystem:
    """A file system within a pool.

    ``name`` is relative to the pool. The pool's top-level file system keeps
    the pool name and has ``is_root`` set.
    """

    name: str
    is_root: bool
    pool: Pool
    guid: int
    creation: datetime

    @property
    def full_name(self) -> str:
        """Path of the file system prefixed by the pool name."""
        if self.is_root:
            return self.pool.name
        return f"{self.pool.name}/{self.name}"

    def snapshots(self) -> Result[List['Snapshot'], ZFSException]:
        return attached_session(self.pool).snapshot_service.list_snapshots(self)

    def get_prop(self, prop: str) -> Result[str, ZFSException]:
        return attached_session(self.pool).file_system_service.get_property(self.full_name, prop)

    def verbose_string(self) -> str:
        return (f"{{FileSystem Name: {self.name!r}, IsRoot: {self.is_root}, Pool: {self.pool}, "
                f"GUID: {self.guid}, Creation: {self.creation.isoformat()}}}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'full_name': self.full_name,
            'is_root': self.is_root,
            'pool': self.pool.name,
            'guid': self.guid,
            'creation': self.creation.isoformat(),
        }

    def __str__(self) -> str:
        return f"FileSystem({self.full_name})"
