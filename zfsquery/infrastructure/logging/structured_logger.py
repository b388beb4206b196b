"""
Structured logger implementation for the query layer.
"""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Dict, Any, Optional

from ...core.interfaces.logger_interface import ILogger

_RESERVED_RECORD_KEYS = frozenset({
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename',
    'module', 'lineno', 'funcName', 'created', 'msecs', 'relativeCreated',
    'thread', 'threadName', 'processName', 'process', 'stack_info',
    'exc_info', 'exc_text', 'message', 'timestamp', 'taskName'
})


class StructuredLogger(ILogger):
    """Structured logger implementation with JSON formatting and context support."""

    def __init__(self, name: str = "zfsquery", level: str = "INFO", stream=None):
        self.name = name
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))

        if not self.logger.handlers:
            handler = logging.StreamHandler(stream or sys.stderr)
            handler.setFormatter(StructuredFormatter())
            self.logger.addHandler(handler)

        self.logger.propagate = False

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.DEBUG, message, extra)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.INFO, message, extra)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.WARNING, message, extra)

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.ERROR, message, extra)

    def exception(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log exception with traceback."""
        self._log(logging.ERROR, message, extra, exc_info=True)

    def _log(self, level: int, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False) -> None:
        if not self.logger.isEnabledFor(level):
            return

        record = self.logger.makeRecord(
            name=self.name,
            level=level,
            fn="",
            lno=0,
            msg=message,
            args=(),
            exc_info=sys.exc_info() if exc_info else None
        )

        # Context keys that would clobber LogRecord attributes are prefixed.
        for key, value in (extra or {}).items():
            if key in _RESERVED_RECORD_KEYS:
                key = f"ctx_{key}"
            setattr(record, key, value)

        record.timestamp = datetime.now(timezone.utc).isoformat()

        self.logger.handle(record)


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured JSON logging."""

    _STANDARD_KEYS = _RESERVED_RECORD_KEYS

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": getattr(record, 'timestamp', datetime.now(timezone.utc).isoformat()),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key in self._STANDARD_KEYS:
                continue
            try:
                json.dumps(value)
                log_entry[key] = value
            except (TypeError, ValueError):
                log_entry[key] = str(value)

        return json.dumps(log_entry, ensure_ascii=False, separators=(',', ':'), default=str)
