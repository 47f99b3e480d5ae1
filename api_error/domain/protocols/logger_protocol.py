"""LoggerProtocol definition for structured logging.

This protocol is the boundary between DetailedError and the logging sink.
Implementations MUST ensure logs are structured (key-value context).

Log Levels (five-level hierarchy used by DetailedError):
    - ERROR: Operation failed
    - WARN: Degraded behaviour, caller may recover
    - INFO: Expected failure worth recording
    - DEBUG: Diagnostic detail
    - TRACE: Very verbose diagnostic detail

Severity as data:
    ``log(level, message, **context)`` is the single emission entry point
    used by the diagnostic dispatch. The named-level methods are
    conveniences for application code.

Usage:
    from api_error.core.container import get_logger
    from api_error.domain.protocols.logger_protocol import LoggerProtocol

    logger: LoggerProtocol = get_logger()
    logger.log(Level.WARN, "Cache miss", key="user:42")

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.info("Request started")  # trace_id auto-included
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from api_error.core.enums import Level


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    """

    def log(self, level: Level, message: str, /, **context: Any) -> None:
        """Log a message at ``level``.

        Args:
            level: Severity of the record.
            message: Human-readable message.
            **context: Structured key-value context fields.
        """
        ...

    def trace(self, message: str, /, **context: Any) -> None:
        """Log a trace-level message."""
        ...

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(self, message: str, /, **context: Any) -> None:
        """Log an error-level message."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Bound context is automatically included in all subsequent log calls.
        Original logger instance remains unchanged (immutable pattern).

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
