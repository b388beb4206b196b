"""
Command port backed by the real zpool/zfs binaries.
"""
from typing import List, Optional, Sequence

from ..core.exceptions.zfs_exceptions import CommandFailedError
from ..core.interfaces.command_executor import ICommandExecutor
from ..core.interfaces.command_port import CommandPort, IZfsCommand, IZpoolCommand, ListType, validate_columns
from ..core.result import Result
from .command_executor import CommandExecutor


def _run(executor: ICommandExecutor, binary: str, args: List[str]) -> Result[str, CommandFailedError]:
    result = executor.execute(binary, *args)
    if not result.success:
        return Result.failure(CommandFailedError(
            binary,
            args,
            reason=f"exit status {result.returncode}",
            stderr=result.stderr.strip(),
            returncode=result.returncode
        ))
    return Result.success(result.stdout)


class SystemZpoolCommand(IZpoolCommand):

    def __init__(self, executor: ICommandExecutor, binary: str = "zpool"):
        self._executor = executor
        self._binary = binary

    def list(self, columns: Sequence[str]) -> Result[str, CommandFailedError]:
        cols = validate_columns(columns, "zpool list")
        return _run(self._executor, self._binary, ["list", "-H", "-p", "-o", ",".join(cols)])

    def get(self, pool: str, properties: Sequence[str], columns: Sequence[str]) -> Result[str, CommandFailedError]:
        cols = validate_columns(columns, "zpool get")
        return _run(self._executor, self._binary, ["get", "-H", "-o", ",".join(cols), ",".join(properties), pool])


class SystemZfsCommand(IZfsCommand):

    def __init__(self, executor: ICommandExecutor, binary: str = "zfs"):
        self._executor = executor
        self._binary = binary

    def list(self, target: str, recursive: bool, list_type: ListType,
             columns: Sequence[str]) -> Result[str, CommandFailedError]:
        cols = validate_columns(columns, "zfs list")

        args = ["list", "-H", "-p"]
        if recursive:
            args.append("-r")
        args.extend(["-t", list_type.value, "-o", ",".join(cols), target])

        return _run(self._executor, self._binary, args)

    def get(self, target: str, properties: Sequence[str], columns: Sequence[str]) -> Result[str, CommandFailedError]:
        cols = validate_columns(columns, "zfs get")
        return _run(self._executor, self._binary, ["get", "-H", "-o", ",".join(cols), ",".join(properties), target])

    def holds(self, snapshot: str) -> Result[str, CommandFailedError]:
        return _run(self._executor, self._binary, ["holds", "-H", snapshot])


def create_system_command_port(zfs_binary: str = "zfs", zpool_binary: str = "zpool",
                               timeout: Optional[float] = None) -> CommandPort:
    """Build the command port that invokes the installed tools."""
    executor = CommandExecutor(allowed_binaries=(zfs_binary, zpool_binary), timeout=timeout)
    return CommandPort(
        zfs=SystemZfsCommand(executor, zfs_binary),
        zpool=SystemZpoolCommand(executor, zpool_binary),
    )
