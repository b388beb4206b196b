from abc import ABC, abstractmethod
from typing import Optional
from dataclasses import dataclass


@dataclass
class CommandResult:
    """Result of a command execution"""
    returncode: int
    stdout: str
    stderr: str
    success: Optional[bool] = None

    def __post_init__(self):
        if self.success is None:
            self.success = self.returncode == 0


class ICommandExecutor(ABC):
    """Interface for running an external binary to completion"""

    @abstractmethod
    def execute(self, binary: str, *args: str) -> CommandResult:
        """Run ``binary`` with ``args`` and capture its output"""
        pass
