"""
Session: the composition root of the query layer.

A session owns one command port (real or fake), one logger and the loader
services. Every entity loaded through it keeps a reference back to it, so
navigation (pool -> file systems -> snapshots -> holds) always goes through
the same port.
"""
from typing import List, Optional

from .config import ZfsQueryConfig
from .core.entities.pool import Pool
from .core.exceptions.zfs_exceptions import ZFSException
from .core.interfaces.command_port import CommandPort
from .core.interfaces.logger_interface import ILogger
from .core.result import Result
from .infrastructure.logging.structured_logger import StructuredLogger
from .infrastructure.system_command import create_system_command_port
from .services.file_system_service import FileSystemService
from .services.hold_service import HoldService
from .services.pool_service import PoolService
from .services.recursive_group_service import RecursiveGroupService
from .services.snapshot_service import SnapshotService


class Session:

    def __init__(self,
                 command: Optional[CommandPort] = None,
                 logger: Optional[ILogger] = None,
                 config: Optional[ZfsQueryConfig] = None):
        self._config = config or ZfsQueryConfig()

        if command is None:
            command = create_system_command_port(
                zfs_binary=self._config.command.zfs_binary,
                zpool_binary=self._config.command.zpool_binary,
                timeout=self._config.command.command_timeout,
            )
        self._command = command

        self.logger: ILogger = logger or StructuredLogger(
            name=self._config.logging.logger_name,
            level=self._config.logging.log_level,
        )

        self.pool_service = PoolService(self)
        self.file_system_service = FileSystemService(self)
        self.snapshot_service = SnapshotService(self)
        self.hold_service = HoldService(self)
        self.recursive_group_service = RecursiveGroupService(self)

    @property
    def command(self) -> CommandPort:
        return self._command

    @property
    def config(self) -> ZfsQueryConfig:
        return self._config

    def list_pools(self) -> Result[List[Pool], ZFSException]:
        """Scan the system for pools."""
        return self.pool_service.list_pools()

    def get_pool(self, pool_name: str) -> Result[Pool, ZFSException]:
        return self.pool_service.get_pool(pool_name)
