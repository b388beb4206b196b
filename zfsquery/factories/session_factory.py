"""
Session factory for dependency injection and session creation.
"""
import copy
import threading
from typing import Dict, Optional

from ..config import ZfsQueryConfig
from ..core.interfaces.command_port import CommandPort
from ..core.interfaces.logger_interface import ILogger
from ..infrastructure.logging.structured_logger import StructuredLogger
from ..infrastructure.system_command import create_system_command_port
from ..session import Session


class SessionFactory:
    """Creates sessions that share one command port and per-name loggers."""

    def __init__(self, config: Optional[ZfsQueryConfig] = None, command: Optional[CommandPort] = None):
        self._config = config or ZfsQueryConfig()
        self._logger_instances: Dict[str, ILogger] = {}
        self._lock = threading.Lock()

        self._command: CommandPort = command or create_system_command_port(
            zfs_binary=self._config.command.zfs_binary,
            zpool_binary=self._config.command.zpool_binary,
            timeout=self._config.command.command_timeout,
        )

    def create_session(self, logger_name: Optional[str] = None) -> Session:
        logger = self._get_logger(logger_name or self._config.logging.logger_name)
        return Session(command=self._command, logger=logger, config=self._config)

    def _get_logger(self, name: str) -> ILogger:
        with self._lock:
            if name not in self._logger_instances:
                self._logger_instances[name] = StructuredLogger(
                    name=name,
                    level=self._config.logging.log_level
                )
            return self._logger_instances[name]

    @property
    def config(self) -> ZfsQueryConfig:
        return self._config

    @property
    def command(self) -> CommandPort:
        return self._command


class SessionFactoryBuilder:
    """Builder for creating SessionFactory instances with fluent configuration."""

    def __init__(self, config: Optional[ZfsQueryConfig] = None):
        # Private copy of the caller's config.
        self._config = copy.deepcopy(config) if config is not None else ZfsQueryConfig()
        self._command: Optional[CommandPort] = None

    def with_command_timeout(self, timeout: Optional[float]) -> 'SessionFactoryBuilder':
        self._config.command.command_timeout = timeout
        return self

    def with_log_level(self, level: str) -> 'SessionFactoryBuilder':
        self._config.logging.log_level = level.upper()
        return self

    def with_binaries(self, zfs_binary: str, zpool_binary: str) -> 'SessionFactoryBuilder':
        self._config.command.zfs_binary = zfs_binary
        self._config.command.zpool_binary = zpool_binary
        return self

    def with_command_port(self, command: CommandPort) -> 'SessionFactoryBuilder':
        """Use an alternate command port (for example the in-memory fake)."""
        self._command = command
        return self

    def build(self) -> SessionFactory:
        return SessionFactory(self._config, self._command)


def create_default_session_factory(config: Optional[ZfsQueryConfig] = None) -> SessionFactory:
    """Create a session factory from environment configuration."""
    return SessionFactoryBuilder(config).build()
