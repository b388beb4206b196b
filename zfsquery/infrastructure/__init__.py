"""Command port implementations and logging"""

from .command_executor import CommandExecutor
from .system_command import SystemZfsCommand, SystemZpoolCommand, create_system_command_port
from .fake_command import (
    FakeBackingStore,
    FakeFileSystem,
    FakeHold,
    FakePool,
    FakeSnapshot,
    FakeZfsCommand,
    FakeZpoolCommand,
    create_fake_command_port,
    format_hold_timestamp,
)

__all__ = [
    'CommandExecutor',
    'SystemZfsCommand',
    'SystemZpoolCommand',
    'create_system_command_port',
    'FakeBackingStore',
    'FakeFileSystem',
    'FakeHold',
    'FakePool',
    'FakeSnapshot',
    'FakeZfsCommand',
    'FakeZpoolCommand',
    'create_fake_command_port',
    'format_hold_timestamp',
]
