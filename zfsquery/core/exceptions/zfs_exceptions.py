from typing import Dict, Any, List, Optional, Sequence


class ZFSException(Exception):
    """Base exception for all ZFS query operations"""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization"""
        return {
            'error_type': self.__class__.__name__,
            'message': str(self),
            'error_code': self.error_code,
            'details': self.details
        }


class CommandFailedError(ZFSException):
    """The external tool could not be run or exited with a non-zero status"""

    def __init__(self, binary: str, args: Sequence[str], reason: str, stderr: str = "", returncode: Optional[int] = None):
        message = f"command failed {binary} {list(args)!r}, reason: {reason}"
        if stderr:
            message += f", stderr: {stderr!r}"
        super().__init__(
            message,
            error_code="COMMAND_FAILED",
            details={
                "binary": binary,
                "args": list(args),
                "reason": reason,
                "stderr": stderr,
                "returncode": returncode
            }
        )
        self.binary = binary
        self.args_list = list(args)
        self.reason = reason
        self.stderr = stderr
        self.returncode = returncode


class LineFormatError(ZFSException):
    """A result line does not split into the expected number of columns"""

    def __init__(self, entity: str, expected: int, actual: int, line: str):
        super().__init__(
            f"expected {expected} columns per line in {entity}, but found {actual}, line: {line!r}",
            error_code="LINE_FORMAT_ERROR",
            details={"entity": entity, "expected": expected, "actual": actual, "line": line}
        )
        self.entity = entity
        self.expected = expected
        self.actual = actual
        self.line = line


class ParseError(ZFSException):
    """A column value could not be converted to its typed form"""

    def __init__(self, description: str, text: str, cause: str):
        super().__init__(
            f"parsing {description!r}, {cause}",
            error_code="PARSE_ERROR",
            details={"description": description, "text": text, "cause": cause}
        )
        self.description = description
        self.text = text
        self.cause = cause


class UnexpectedOutputError(ZFSException):
    """Command output did not have the expected number of lines"""

    def __init__(self, description: str, output: str, line_count: int):
        super().__init__(
            f"{description}: expected exactly one line of output, but found {line_count}, output: {output!r}",
            error_code="UNEXPECTED_OUTPUT",
            details={"description": description, "output": output, "line_count": line_count}
        )
        self.output = output
        self.line_count = line_count


class PoolException(ZFSException):
    """Pool-related exceptions"""
    pass


class PoolNotFoundError(PoolException):

    def __init__(self, pool_name: str):
        super().__init__(
            f"Pool '{pool_name}' not found",
            error_code="POOL_NOT_FOUND",
            details={"pool_name": pool_name}
        )


class FileSystemException(ZFSException):
    """File system related exceptions"""
    pass


class FileSystemNotFoundError(FileSystemException):

    def __init__(self, file_system_name: str):
        super().__init__(
            f"File system '{file_system_name}' not found",
            error_code="FILE_SYSTEM_NOT_FOUND",
            details={"file_system_name": file_system_name}
        )


class DuplicateFileSystemError(FileSystemException):
    """The file system listing of a pool violates name or root uniqueness"""

    def __init__(self, pool_name: str, reason: str, names: Optional[List[str]] = None):
        super().__init__(
            f"invalid file system listing for pool '{pool_name}': {reason}",
            error_code="DUPLICATE_FILE_SYSTEM",
            details={"pool_name": pool_name, "reason": reason, "names": names or []}
        )


class SnapshotException(ZFSException):
    """Snapshot-related exceptions"""
    pass


class SnapshotNotFoundError(SnapshotException):

    def __init__(self, snapshot_name: str):
        super().__init__(
            f"Snapshot '{snapshot_name}' not found",
            error_code="SNAPSHOT_NOT_FOUND",
            details={"snapshot_name": snapshot_name}
        )


class HoldException(ZFSException):
    """Hold-related exceptions"""
    pass


class RecursiveGroupException(ZFSException):
    """Recursive snapshot/hold group reconciliation exceptions"""
    pass


class RecursiveSnapshotGroupNotFoundError(RecursiveGroupException):

    def __init__(self, pool_name: str, group_name: str):
        super().__init__(
            f"Recursive snapshot group '{group_name}' not found in pool '{pool_name}'",
            error_code="RECURSIVE_SNAPSHOT_GROUP_NOT_FOUND",
            details={"pool_name": pool_name, "group_name": group_name}
        )


class InconsistentSnapshotGroupError(RecursiveGroupException):
    """Same-named snapshots on every file system disagree on creation time"""

    def __init__(self, first: str, other: str):
        super().__init__(
            f"snapshot with the same name has different timestamps across file systems - {first} {other}",
            error_code="INCONSISTENT_SNAPSHOT_GROUP",
            details={"first": first, "other": other}
        )


class InconsistentHoldGroupError(RecursiveGroupException):
    """Same-tagged holds across a recursive snapshot group disagree on creation time"""

    def __init__(self, tag: str, first: str, other: str):
        super().__init__(
            f"found same hold tag name {tag!r} but created at different timestamps, {first} {other}",
            error_code="INCONSISTENT_HOLD_GROUP",
            details={"tag": tag, "first": first, "other": other}
        )
