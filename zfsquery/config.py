"""
zfsquery configuration module.

Loads settings from environment variables (and a `.env` file when present).
Every key is accepted bare or with the `ZFSQUERY_` prefix, e.g. `LOG_LEVEL`
or `ZFSQUERY_LOG_LEVEL`.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class CommandConfig:
    """How the external tools are invoked"""
    zfs_binary: str = "zfs"
    zpool_binary: str = "zpool"
    # Seconds; None waits for the command to finish.
    command_timeout: Optional[float] = None


@dataclass
class LoggingConfig:
    log_level: str = "INFO"
    logger_name: str = "zfsquery"


@dataclass
class ServerConfig:
    """Settings for the read-only HTTP API"""
    host: str = "127.0.0.1"
    port: int = 8000
    enable_docs: bool = True


class ZfsQueryConfig:
    """
    Configuration settings loaded from environment variables.

    Each instance reads the environment once at construction; nothing is
    refreshed afterwards.
    """

    def __init__(self):
        self.command = CommandConfig()
        self.logging = LoggingConfig()
        self.server = ServerConfig()

        self._load_environment_variables()
        self._validate_configuration()

    def _load_environment_variables(self):
        self.command.zfs_binary = self._get_string("ZFS_BINARY", self.command.zfs_binary)
        self.command.zpool_binary = self._get_string("ZPOOL_BINARY", self.command.zpool_binary)
        self.command.command_timeout = self._get_optional_float("COMMAND_TIMEOUT", self.command.command_timeout)

        self.logging.log_level = self._get_string("LOG_LEVEL", self.logging.log_level).upper()

        self.server.host = self._get_string("HOST", self.server.host)
        self.server.port = self._get_int("PORT", self.server.port)
        self.server.enable_docs = self._get_bool("ENABLE_DOCS", self.server.enable_docs)

    def _get_string(self, key: str, default: str) -> str:
        """Get string value from environment with multiple key attempts"""
        for prefix in ["ZFSQUERY_", ""]:
            value = os.getenv(f"{prefix}{key}")
            if value is not None:
                return value
        return default

    def _get_int(self, key: str, default: int) -> int:
        value = self._get_string(key, str(default))
        try:
            return int(value)
        except ValueError:
            logger.warning(f"Invalid integer value for {key}: {value}, using default: {default}")
            return default

    def _get_optional_float(self, key: str, default: Optional[float]) -> Optional[float]:
        value = self._get_string(key, "")
        if not value:
            return default
        try:
            return float(value)
        except ValueError:
            logger.warning(f"Invalid number for {key}: {value}, using default: {default}")
            return default

    def _get_bool(self, key: str, default: bool) -> bool:
        value = self._get_string(key, str(default)).lower()
        return value in ("true", "1", "yes", "on")

    def _validate_configuration(self):
        if self.logging.log_level not in VALID_LOG_LEVELS:
            logger.warning(f"Invalid log level: {self.logging.log_level}, using INFO")
            self.logging.log_level = "INFO"

        if self.command.command_timeout is not None and self.command.command_timeout <= 0:
            logger.warning(f"Invalid command timeout: {self.command.command_timeout}, disabling timeout")
            self.command.command_timeout = None

        if not (1 <= self.server.port <= 65535):
            logger.warning(f"Invalid port: {self.server.port}, using default: 8000")
            self.server.port = 8000

    def get_summary(self) -> dict:
        return {
            "command": {
                "zfs_binary": self.command.zfs_binary,
                "zpool_binary": self.command.zpool_binary,
                "command_timeout": self.command.command_timeout,
            },
            "logging": {
                "log_level": self.logging.log_level,
                "logger_name": self.logging.logger_name,
            },
            "server": {
                "host": self.server.host,
                "port": self.server.port,
                "enable_docs": self.server.enable_docs,
            },
        }

    @property
    def log_level(self) -> str:
        return self.logging.log_level


def load_dotenv_if_exists(env_file: Optional[Path] = None) -> bool:
    """Load a .env file from the working directory if one exists."""
    env_file = env_file or Path.cwd() / ".env"
    if env_file.exists():
        return load_dotenv(env_file)
    return False


@lru_cache()
def get_config() -> ZfsQueryConfig:
    """Process-wide configuration for the API entry points."""
    load_dotenv_if_exists()
    return ZfsQueryConfig()
