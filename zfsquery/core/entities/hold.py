"""
Hold domain entities.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Any

from .snapshot import Snapshot, RecursiveSnapshotGroup


@dataclass(frozen=True)
class Hold:
    """A named hold preventing destruction of a snapshot."""

    tag: str
    creation: datetime
    snapshot: Snapshot

    def to_dict(self) -> Dict[str, Any]:
        return {
            'tag': self.tag,
            'creation': self.creation.isoformat(),
            'snapshot': self.snapshot.full_name,
        }

    def verbose_string(self) -> str:
        return (f"{{Hold Tag: {self.tag!r}, Creation: {self.creation.isoformat()}, "
                f"Snapshot: {self.snapshot}}}")

    def __str__(self) -> str:
        return f"Hold({self.tag} on {self.snapshot.full_name})"


@dataclass(frozen=True)
class RecursiveHoldGroup:
    """One hold tag applied atomically to every snapshot of a recursive snapshot group."""

    tag: str
    creation: datetime
    recursive_snapshot_group: RecursiveSnapshotGroup

    def to_dict(self) -> Dict[str, Any]:
        return {
            'tag': self.tag,
            'creation': self.creation.isoformat(),
            'recursive_snapshot_group': self.recursive_snapshot_group.name,
            'pool': self.recursive_snapshot_group.pool.name,
        }

    def __str__(self) -> str:
        return f"RecursiveHoldGroup({self.tag} on {self.recursive_snapshot_group})"
