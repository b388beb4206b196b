"""
zfsquery: a structured, read-only view of ZFS pools, file systems,
snapshots and holds, built on the zpool and zfs command-line tools.
"""

__version__ = "1.0.0"

from .core.result import Result
from .core.entities import (
    Pool,
    FileSystem,
    Snapshot,
    Hold,
    RecursiveSnapshotGroup,
    RecursiveHoldGroup,
)
from .core.exceptions import ZFSException, CommandFailedError, ParameterValidationError
from .infrastructure.fake_command import create_fake_command_port
from .infrastructure.system_command import create_system_command_port
from .session import Session

__all__ = [
    '__version__',
    'Result',
    'Pool',
    'FileSystem',
    'Snapshot',
    'Hold',
    'RecursiveSnapshotGroup',
    'RecursiveHoldGroup',
    'ZFSException',
    'CommandFailedError',
    'ParameterValidationError',
    'create_fake_command_port',
    'create_system_command_port',
    'Session',
]
