# wut/execution/engine.py
"""
Engine for running a command once to capture its error output.
"""
import asyncio
import shlex
from typing import List, Tuple

from wut.constants import RULE_TIMEOUT
from wut.corrector.errors import (
    CommandNotExecutableError, CommandNotFoundError, CommandTimeoutError, UnsafeToExecuteError,
)
from wut.utils.command_utils import is_interactive_command, split_command
from wut.utils.logging import get_logger

logger = get_logger(__name__)


class ExecutionEngine:
    """Engine for probing commands under a deadline."""

    def __init__(self):
        """Initialize the execution engine."""
        self._logger = logger

    @staticmethod
    def _split(command: str) -> List[str]:
        try:
            return shlex.split(command)
        except ValueError:
            # Unbalanced quotes; fall back to plain whitespace splitting
            return split_command(command)

    async def run_for_diagnosis(self, command: str, timeout: float = RULE_TIMEOUT) -> Tuple[str, int]:
        """
        Execute a command without a shell and capture its combined output.

        Args:
            command: The command line to run.
            timeout: Seconds to wait before the process is killed.

        Returns:
            A tuple of (combined stdout and stderr, return_code).

        Raises:
            UnsafeToExecuteError: The command is interactive or empty.
            CommandNotFoundError: The executable does not exist.
            CommandNotExecutableError: The OS refused to start the executable.
            CommandTimeoutError: The deadline passed; the process was killed.
        """
        interactive, base_cmd = is_interactive_command(command)
        if interactive:
            raise UnsafeToExecuteError(command, f"'{base_cmd}' is interactive" if base_cmd else "empty command")

        args = self._split(command)
        if not args:
            raise UnsafeToExecuteError(command, "empty command")

        self._logger.info(f"Probing command for diagnosis: {command}")

        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
        except (FileNotFoundError, NotADirectoryError) as e:
            raise CommandNotFoundError(command) from e
        except OSError as e:
            raise CommandNotExecutableError(command, e.strerror or str(e)) from e

        try:
            output_bytes, _ = await asyncio.wait_for(process.communicate(), timeout=timeout)
        except asyncio.TimeoutError:
            self._logger.warning(f"Command timed out after {timeout}s, killing it: {command}")
            raise CommandTimeoutError(command, timeout)
        finally:
            # Kill and reap on every exit path, cancellation included
            if process.returncode is None:
                try:
                    process.kill()
                except ProcessLookupError:
                    pass  # already exited
                await process.wait()

        output = output_bytes.decode("utf-8", errors="replace")
        self._logger.debug(f"Command completed with return code: {process.returncode}")
        self._logger.debug(f"output: {output[:100]}{'...' if len(output) > 100 else ''}")
        return output, process.returncode
