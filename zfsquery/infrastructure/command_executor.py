"""
Concrete implementation of command executor interface.
"""
import logging
import subprocess
from typing import Iterable, Optional

from ..core.interfaces.command_executor import ICommandExecutor, CommandResult


# Subcommands that only read state.
READ_ONLY_SUBCOMMANDS = frozenset({'list', 'get', 'holds'})


class CommandExecutor(ICommandExecutor):
    """Runs zpool/zfs to completion, refusing anything that could modify state."""

    def __init__(self, allowed_binaries: Iterable[str] = ('zfs', 'zpool'), timeout: Optional[float] = None):
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)
        self._allowed_binaries = frozenset(allowed_binaries)

    def execute(self, binary: str, *args: str) -> CommandResult:
        """Execute an allowed read-only command."""
        if binary not in self._allowed_binaries:
            return CommandResult(
                success=False,
                returncode=1,
                stdout="",
                stderr=f"Command '{binary}' not allowed"
            )

        if not args or args[0] not in READ_ONLY_SUBCOMMANDS:
            subcommand = args[0] if args else ""
            return CommandResult(
                success=False,
                returncode=1,
                stdout="",
                stderr=f"Subcommand '{subcommand}' of '{binary}' not allowed"
            )

        return self._execute_command([binary, *args])

    def _execute_command(self, command: list) -> CommandResult:
        """Execute command with proper error handling."""
        self.logger.debug(f"Executing command: {' '.join(command)}")

        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                errors='replace',
                timeout=self.timeout,
                check=False
            )
        except subprocess.TimeoutExpired:
            return CommandResult(
                success=False,
                returncode=124,  # Timeout exit code
                stdout="",
                stderr=f"Command timed out after {self.timeout} seconds"
            )
        except OSError as e:
            self.logger.error(f"Command execution failed: {e}")
            return CommandResult(
                success=False,
                returncode=127,
                stdout="",
                stderr=f"Command execution failed: {e}"
            )

        if completed.returncode != 0:
            self.logger.warning(
                f"Command failed with exit code {completed.returncode}: {completed.stderr.strip()}"
            )

        return CommandResult(
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr
        )
