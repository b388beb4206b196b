"""Core domain entities"""

from .pool import Pool
from .file_system import FileSystem
from .snapshot import Snapshot, RecursiveSnapshotGroup
from .hold import Hold, RecursiveHoldGroup

__all__ = [
    'Pool',
    'FileSystem',
    'Snapshot',
    'RecursiveSnapshotGroup',
    'Hold',
    'RecursiveHoldGroup',
]
