"""
Logger interface for structured logging abstraction.
"""
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional


class ILogger(ABC):
    """Interface for structured logging operations."""

    @abstractmethod
    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log a command invocation or other trace detail."""
        pass

    @abstractmethod
    def info(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log the outcome of a completed load."""
        pass

    @abstractmethod
    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log a failed command with optional extra context."""
        pass

    @abstractmethod
    def error(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log output that could not be parsed or reconciled."""
        pass

    @abstractmethod
    def exception(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log exception with traceback."""
        pass
