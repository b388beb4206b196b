"""Error taxonomy for the query layer"""

from .zfs_exceptions import (
    ZFSException,
    CommandFailedError,
    LineFormatError,
    ParseError,
    UnexpectedOutputError,
    PoolException,
    PoolNotFoundError,
    FileSystemException,
    FileSystemNotFoundError,
    DuplicateFileSystemError,
    SnapshotException,
    SnapshotNotFoundError,
    HoldException,
    RecursiveGroupException,
    RecursiveSnapshotGroupNotFoundError,
    InconsistentSnapshotGroupError,
    InconsistentHoldGroupError,
)
from .validation_exceptions import ValidationException, ParameterValidationError

__all__ = [
    'ZFSException',
    'CommandFailedError',
    'LineFormatError',
    'ParseError',
    'UnexpectedOutputError',
    'PoolException',
    'PoolNotFoundError',
    'FileSystemException',
    'FileSystemNotFoundError',
    'DuplicateFileSystemError',
    'SnapshotException',
    'SnapshotNotFoundError',
    'HoldException',
    'RecursiveGroupException',
    'RecursiveSnapshotGroupNotFoundError',
    'InconsistentSnapshotGroupError',
    'InconsistentHoldGroupError',
    'ValidationException',
    'ParameterValidationError',
]
