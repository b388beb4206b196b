"""
Capability interfaces consumed by every entity loader.

Implementations return the raw tab-separated output of the tool (one line per
entity, columns in the requested order, no header) or a CommandFailedError.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence

from ..exceptions.zfs_exceptions import CommandFailedError
from ..exceptions.validation_exceptions import ParameterValidationError
from ..result import Result


class ListType(Enum):
    """Entity kind filter for `zfs list -t`."""
    FILESYSTEM = "filesystem"
    SNAPSHOT = "snapshot"


def validate_columns(columns: Sequence[str], command: str) -> List[str]:
    """Reject an empty column selection before anything is invoked."""
    if not columns:
        raise ParameterValidationError(
            f"at least one column must be specified for '{command}'",
            "columns",
            list(columns),
            expected_type="non-empty list of column names"
        )
    return list(columns)


class IZpoolCommand(ABC):
    """Pool level capability (`zpool`)."""

    @abstractmethod
    def list(self, columns: Sequence[str]) -> Result[str, CommandFailedError]:
        pass

    @abstractmethod
    def get(self, pool: str, properties: Sequence[str], columns: Sequence[str]) -> Result[str, CommandFailedError]:
        pass


class IZfsCommand(ABC):
    """File system and snapshot level capability (`zfs`)."""

    @abstractmethod
    def list(self, target: str, recursive: bool, list_type: ListType,
             columns: Sequence[str]) -> Result[str, CommandFailedError]:
        pass

    @abstractmethod
    def get(self, target: str, properties: Sequence[str], columns: Sequence[str]) -> Result[str, CommandFailedError]:
        pass

    @abstractmethod
    def holds(self, snapshot: str) -> Result[str, CommandFailedError]:
        pass


@dataclass(frozen=True)
class CommandPort:
    """The pair of capabilities a session queries through."""
    zfs: IZfsCommand
    zpool: IZpoolCommand
