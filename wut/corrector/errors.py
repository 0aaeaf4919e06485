# wut/corrector/errors.py
"""Exceptions raised by the corrector and its execution probe."""


class CorrectorError(Exception):
    """Base class for corrector errors."""
    pass


class CorpusError(CorrectorError, ValueError):
    """A corpus was missing or malformed. Always a caller bug."""
    pass


class ExecutionError(CorrectorError):
    """The diagnosis probe could not produce trustworthy output."""

    def __init__(self, command: str, message: str):
        super().__init__(f"{message}: {command}")
        self.command = command


class CommandNotFoundError(ExecutionError):
    """The executable does not exist."""

    def __init__(self, command: str):
        super().__init__(command, "Executable not found")


class CommandNotExecutableError(ExecutionError):
    """The executable exists but the OS refused to start it."""

    def __init__(self, command: str, reason: str):
        super().__init__(command, f"Cannot execute ({reason})")
        self.reason = reason


class CommandTimeoutError(ExecutionError):
    """The probe exceeded its deadline and was killed."""

    def __init__(self, command: str, timeout: float):
        super().__init__(command, f"Timed out after {timeout:g}s")
        self.timeout = timeout


class UnsafeToExecuteError(ExecutionError):
    """The command must not be probed (interactive or destructive)."""

    def __init__(self, command: str, reason: str):
        super().__init__(command, f"Refusing to execute ({reason})")
        self.reason = reason
