# wut/utils/enhanced_logging.py
import inspect
import logging
from typing import Dict, Any, Optional


class EnhancedLogger:
    """Logger facade that carries structured context between calls."""

    def __init__(self, name: str, context: Optional[Dict[str, Any]] = None):
        self._logger = logging.getLogger(name)
        self._context: Dict[str, Any] = dict(context or {})

    def add_context(self, key: str, value: Any) -> None:
        """Add context information for subsequent log messages."""
        self._context[key] = value

    def remove_context(self, key: str) -> None:
        """Remove context information."""
        self._context.pop(key, None)

    def clear_context(self) -> None:
        """Clear all context information."""
        self._context.clear()

    def with_context(self, **context) -> 'EnhancedLogger':
        """Create a new logger with added context."""
        return EnhancedLogger(self._logger.name, {**self._context, **context})

    @property
    def context(self) -> Dict[str, Any]:
        return dict(self._context)

    def _format_message(self, msg: str, extra: Optional[Dict[str, Any]] = None) -> str:
        """Append caller and context as key=value pairs."""
        frame = inspect.currentframe().f_back.f_back
        caller = f"{frame.f_code.co_filename.split('/')[-1]}:{frame.f_code.co_name}:{frame.f_lineno}"

        context = {**self._context}
        if extra:
            context.update(extra)

        if not context:
            return f"{msg} [{caller}]"

        pairs = " ".join(f"{key}={value!r}" for key, value in sorted(context.items()))
        return f"{msg} | {pairs} [{caller}]"

    def debug(self, msg: str, *args, **kwargs) -> None:
        extra = kwargs.pop("extra", {})
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(self._format_message(msg, extra), *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        extra = kwargs.pop("extra", {})
        self._logger.info(self._format_message(msg, extra), *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        extra = kwargs.pop("extra", {})
        self._logger.warning(self._format_message(msg, extra), *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        extra = kwargs.pop("extra", {})
        self._logger.error(self._format_message(msg, extra), *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs) -> None:
        """Log an error together with the active exception traceback."""
        extra = kwargs.pop("extra", {})
        self._logger.exception(self._format_message(msg, extra), *args, **kwargs)

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def level(self) -> int:
        return self._logger.level

    @level.setter
    def level(self, level: int) -> None:
        self._logger.setLevel(level)
