"""
In-memory command port for development and testing.

The fake renders the same tab-separated output the real tools print, from a
small model of pools, file systems, snapshots and holds. Every command also
accepts an override callable so tests can substitute arbitrary output or
failures.
"""
import copy
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from ..core.exceptions.zfs_exceptions import CommandFailedError
from ..core.interfaces.command_port import CommandPort, IZfsCommand, IZpoolCommand, ListType, validate_columns
from ..core.result import Result

logger = logging.getLogger(__name__)

PropMap = Dict[str, str]

ZpoolListOverride = Callable[[List[str]], Result[str, CommandFailedError]]
ZpoolGetOverride = Callable[[str, List[str], List[str]], Result[str, CommandFailedError]]
ZfsListOverride = Callable[[str, bool, ListType, List[str]], Result[str, CommandFailedError]]
ZfsGetOverride = Callable[[str, List[str], List[str]], Result[str, CommandFailedError]]
ZfsHoldsOverride = Callable[[str], Result[str, CommandFailedError]]


@dataclass
class FakeHold:
    creation: datetime


@dataclass
class FakeSnapshot:
    props: PropMap = field(default_factory=dict)
    holds: Dict[str, FakeHold] = field(default_factory=dict)


@dataclass
class FakeFileSystem:
    props: PropMap = field(default_factory=dict)
    snapshots: Dict[str, FakeSnapshot] = field(default_factory=dict)


@dataclass
class FakePool:
    """A pool with its root file system and children keyed by pool-relative name."""
    props: PropMap = field(default_factory=dict)
    root: FakeFileSystem = field(default_factory=FakeFileSystem)
    file_systems: Dict[str, FakeFileSystem] = field(default_factory=dict)


FakePools = Dict[str, FakePool]


def format_hold_timestamp(value: datetime) -> str:
    """Render a timestamp the way `zfs holds` does, e.g. ``Mon Jan  2 15:04 2006``."""
    local = value.astimezone()
    return f"{local:%a %b} {local.day:2d} {local:%H:%M %Y}"


def _render_rows(rows: Iterable[PropMap], columns: Sequence[str]) -> str:
    return "".join("\t".join(row.get(col, "") for col in columns) + "\n" for row in rows)


def _property_rows(name: str, props: PropMap, properties: Sequence[str]) -> List[PropMap]:
    rows = []
    for prop in properties:
        value = props.get(prop)
        rows.append({
            "name": name,
            "property": prop,
            "value": value if value is not None else "-",
            "source": "local" if value is not None else "-",
        })
    return rows


def _set_name(props: PropMap, name: str) -> None:
    if "name" in props:
        raise ValueError(f"{name!r} includes a property \"name={props['name']}\" that is disallowed")
    props["name"] = name


class FakeBackingStore:
    """Indexes a copy of the fake pool model by full dataset name."""

    def __init__(self, pools: Optional[FakePools] = None):
        self.pools: FakePools = copy.deepcopy(pools) if pools else {}
        self.file_systems: Dict[str, FakeFileSystem] = {}
        self.snapshots: Dict[str, FakeSnapshot] = {}

        for pool_name in sorted(self.pools):
            pool = self.pools[pool_name]
            _set_name(pool.props, pool_name)

            self._add_file_system(pool_name, pool.root)
            for fs_name, file_system in pool.file_systems.items():
                self._add_file_system(f"{pool_name}/{fs_name}", file_system)

    def _add_file_system(self, full_name: str, file_system: FakeFileSystem) -> None:
        _set_name(file_system.props, full_name)
        self.file_systems[full_name] = file_system

        for snap_name, snapshot in file_system.snapshots.items():
            snap_full_name = f"{full_name}@{snap_name}"
            _set_name(snapshot.props, snap_full_name)
            self.snapshots[snap_full_name] = snapshot

    def descendants(self, target: str) -> List[str]:
        prefix = f"{target}/"
        return sorted(name for name in self.file_systems if name.startswith(prefix))


def _not_found(binary: str, args: List[str], message: str) -> Result[str, CommandFailedError]:
    return Result.failure(CommandFailedError(binary, args, reason="exit status 1", stderr=message, returncode=1))


class FakeZpoolCommand(IZpoolCommand):

    def __init__(self, store: FakeBackingStore):
        self.store = store
        self.list_override: Optional[ZpoolListOverride] = None
        self.get_override: Optional[ZpoolGetOverride] = None

    def set_list_override(self, override: Optional[ZpoolListOverride]) -> None:
        self.list_override = override

    def set_get_override(self, override: Optional[ZpoolGetOverride]) -> None:
        self.get_override = override

    def list(self, columns: Sequence[str]) -> Result[str, CommandFailedError]:
        cols = validate_columns(columns, "zpool list")
        if self.list_override is not None:
            return self.list_override(cols)

        rows = [self.store.pools[name].props for name in sorted(self.store.pools)]
        return Result.success(_render_rows(rows, cols))

    def get(self, pool: str, properties: Sequence[str], columns: Sequence[str]) -> Result[str, CommandFailedError]:
        cols = validate_columns(columns, "zpool get")
        if self.get_override is not None:
            return self.get_override(pool, list(properties), cols)

        if pool not in self.store.pools:
            return _not_found("zpool", ["get", pool], f"cannot open '{pool}': no such pool")

        rows = _property_rows(pool, self.store.pools[pool].props, properties)
        return Result.success(_render_rows(rows, cols))


class FakeZfsCommand(IZfsCommand):

    def __init__(self, store: FakeBackingStore):
        self.store = store
        self.list_override: Optional[ZfsListOverride] = None
        self.get_override: Optional[ZfsGetOverride] = None
        self.holds_override: Optional[ZfsHoldsOverride] = None

    def set_list_override(self, override: Optional[ZfsListOverride]) -> None:
        self.list_override = override

    def set_get_override(self, override: Optional[ZfsGetOverride]) -> None:
        self.get_override = override

    def set_holds_override(self, override: Optional[ZfsHoldsOverride]) -> None:
        self.holds_override = override

    def list(self, target: str, recursive: bool, list_type: ListType,
             columns: Sequence[str]) -> Result[str, CommandFailedError]:
        cols = validate_columns(columns, "zfs list")
        if self.list_override is not None:
            return self.list_override(target, recursive, list_type, cols)

        if target not in self.store.file_systems:
            return _not_found("zfs", ["list", target], f"cannot open '{target}': dataset does not exist")

        selected = [target]
        if recursive:
            selected.extend(self.store.descendants(target))

        if list_type is ListType.FILESYSTEM:
            rows = [self.store.file_systems[name].props for name in selected]
        else:
            rows = []
            for name in selected:
                snapshots = self.store.file_systems[name].snapshots
                rows.extend(snapshots[snap_name].props for snap_name in sorted(snapshots))

        return Result.success(_render_rows(rows, cols))

    def get(self, target: str, properties: Sequence[str], columns: Sequence[str]) -> Result[str, CommandFailedError]:
        cols = validate_columns(columns, "zfs get")
        if self.get_override is not None:
            return self.get_override(target, list(properties), cols)

        if "@" in target:
            entity = self.store.snapshots.get(target)
        else:
            entity = self.store.file_systems.get(target)

        if entity is None:
            return _not_found("zfs", ["get", target], f"cannot open '{target}': dataset does not exist")

        rows = _property_rows(target, entity.props, properties)
        return Result.success(_render_rows(rows, cols))

    def holds(self, snapshot: str) -> Result[str, CommandFailedError]:
        if self.holds_override is not None:
            return self.holds_override(snapshot)

        fake_snapshot = self.store.snapshots.get(snapshot)
        if fake_snapshot is None:
            return _not_found("zfs", ["holds", snapshot], f"cannot open '{snapshot}': dataset does not exist")

        lines = [
            f"{snapshot}\t{tag}\t{format_hold_timestamp(fake_snapshot.holds[tag].creation)}\n"
            for tag in sorted(fake_snapshot.holds)
        ]
        return Result.success("".join(lines))


def create_fake_command_port(pools: Optional[FakePools] = None) -> CommandPort:
    """Build a command port answering from an in-memory copy of ``pools``."""
    store = FakeBackingStore(pools)
    logger.debug(f"Created fake command port with {len(store.pools)} pools")
    return CommandPort(zfs=FakeZfsCommand(store), zpool=FakeZpoolCommand(store))
