"""
Reconciliation of recursive snapshot and hold groups.

A recursive group is a set of same-named snapshots (or same-tagged holds)
that exists on every file system of a pool and was created in one atomic
operation. Same-named snapshots that only cover part of the pool are
independent snapshots and are not reported as a group.
"""
from typing import Dict, Iterable, List, Set, TYPE_CHECKING

from ..core.entities.hold import Hold, RecursiveHoldGroup
from ..core.entities.pool import Pool
from ..core.entities.snapshot import Snapshot, RecursiveSnapshotGroup
from ..core.exceptions.zfs_exceptions import (
    ZFSException,
    InconsistentSnapshotGroupError,
    InconsistentHoldGroupError,
    RecursiveSnapshotGroupNotFoundError,
)
from ..core.result import Result

if TYPE_CHECKING:
    from ..session import Session


def _covers(member_names: Iterable[str], expected: Set[str]) -> bool:
    """True when the members span exactly the expected file systems, once each."""
    names = list(member_names)
    return len(names) == len(expected) and set(names) == expected


class RecursiveGroupService:
    """Groups snapshots and holds that were taken atomically across a pool."""

    def __init__(self, session: 'Session'):
        self._session = session
        self._logger = session.logger

    def list_recursive_snapshot_groups(self, pool: Pool) -> Result[List[RecursiveSnapshotGroup], ZFSException]:
        """Return the recursive snapshot groups of ``pool``, newest first.

        Fails with InconsistentSnapshotGroupError when a name is present on
        every file system but the creation times disagree.
        """
        self._logger.debug(f"Reconciling recursive snapshot groups of pool {pool.name}", {"pool_name": pool.name})

        fs_result = self._session.file_system_service.list_file_systems(pool)
        if fs_result.is_failure:
            return Result.failure(fs_result.error)

        file_systems = fs_result.value
        pool_fs_names = {file_system.full_name for file_system in file_systems}

        snapshots_by_name: Dict[str, List[Snapshot]] = {}
        for file_system in file_systems:
            snapshots_result = self._session.snapshot_service.list_snapshots(file_system)
            if snapshots_result.is_failure:
                return Result.failure(snapshots_result.error)

            for snapshot in snapshots_result.value:
                snapshots_by_name.setdefault(snapshot.name, []).append(snapshot)

        groups: List[RecursiveSnapshotGroup] = []
        for name, members in snapshots_by_name.items():
            if not _covers((s.file_system.full_name for s in members), pool_fs_names):
                continue

            first = members[0]
            for other in members[1:]:
                if other.creation != first.creation:
                    self._logger.error(
                        f"Snapshot {name} has different timestamps across file systems of pool {pool.name}",
                        {"pool_name": pool.name, "snapshot": name})
                    return Result.failure(InconsistentSnapshotGroupError(first.full_name, other.full_name))

            groups.append(RecursiveSnapshotGroup(
                name=name,
                creation=first.creation,
                pool=pool,
                snapshots=tuple(members),
            ))

        groups.sort(key=lambda group: group.creation, reverse=True)

        self._logger.info(f"Found {len(groups)} recursive snapshot groups in pool {pool.name}",
                          {"pool_name": pool.name, "candidates": len(snapshots_by_name)})
        return Result.success(groups)

    def get_recursive_snapshot_group(self, pool: Pool, name: str) -> Result[RecursiveSnapshotGroup, ZFSException]:
        def find(groups: List[RecursiveSnapshotGroup]) -> Result[RecursiveSnapshotGroup, ZFSException]:
            for group in groups:
                if group.name == name:
                    return Result.success(group)
            return Result.failure(RecursiveSnapshotGroupNotFoundError(pool.name, name))

        return self.list_recursive_snapshot_groups(pool).flat_map(find)

    def list_recursive_hold_groups(
            self, group: RecursiveSnapshotGroup) -> Result[List[RecursiveHoldGroup], ZFSException]:
        """Return the hold tags applied to every snapshot of ``group``, newest first."""
        member_names = {snapshot.file_system.full_name for snapshot in group.snapshots}

        holds_by_tag: Dict[str, List[Hold]] = {}
        for snapshot in group.snapshots:
            holds_result = self._session.hold_service.list_holds(snapshot)
            if holds_result.is_failure:
                return Result.failure(holds_result.error)

            for hold in holds_result.value:
                holds_by_tag.setdefault(hold.tag, []).append(hold)

        hold_groups: List[RecursiveHoldGroup] = []
        for tag, holds in holds_by_tag.items():
            if not _covers((h.snapshot.file_system.full_name for h in holds), member_names):
                continue

            first = holds[0]
            for other in holds[1:]:
                if other.creation != first.creation:
                    return Result.failure(InconsistentHoldGroupError(
                        tag, first.creation.isoformat(), other.creation.isoformat()))

            hold_groups.append(RecursiveHoldGroup(
                tag=tag,
                creation=first.creation,
                recursive_snapshot_group=group,
            ))

        hold_groups.sort(key=lambda hold_group: hold_group.creation, reverse=True)
        return Result.success(hold_groups)
