from .command_executor import CommandResult, ICommandExecutor
from .command_port import CommandPort, IZfsCommand, IZpoolCommand, ListType, validate_columns
from .logger_interface import ILogger

__all__ = [
    'CommandResult',
    'ICommandExecutor',
    'CommandPort',
    'IZfsCommand',
    'IZpoolCommand',
    'ListType',
    'validate_columns',
    'ILogger',
]
