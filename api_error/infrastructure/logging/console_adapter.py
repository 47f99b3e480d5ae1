"""Console logging adapter.

Outputs structured logs to stdout using structlog.
- Development: human-readable console renderer with colors
- Testing/CI/Production: JSON renderer for machine parsing

Implementation intentionally does NOT inherit from LoggerProtocol (PEP 544
structural subtyping). Any object with the same call signatures is compatible
with LoggerProtocol.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from api_error.core.enums import Level


class ConsoleAdapter:
    """Console logger.

    Args:
        use_json (bool): JSON output when True, human-readable when False.
        min_level (int): Lowest numeric level emitted (TRACE is 5).
    """

    def __init__(self, *, use_json: bool = False, min_level: int = logging.DEBUG) -> None:
        """Initialize the console adapter.

        Args:
            use_json (bool): JSON output when True, human-readable when False.
            min_level (int): Lowest numeric level emitted (TRACE is 5).
        """
        processors: list[structlog.types.Processor] = [
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ]

        if use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=True))

        # Private pipeline: the host application's structlog configuration is
        # never touched. structlog filters on the stdlib scale, which stops at
        # DEBUG; TRACE is gated in log() instead.
        self._logger = structlog.wrap_logger(
            structlog.PrintLogger(file=sys.stdout),
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(
                max(min_level, logging.DEBUG)
            ),
            context_class=dict,
        )
        self._min_level = min_level

    def log(self, level: Level, message: str, /, **context: Any) -> None:
        """Log a message at ``level``.

        The record always carries ``severity`` with the Level name, so TRACE
        records stay distinguishable from DEBUG ones.

        Args:
            level (Level): Severity of the record.
            message (str): Message text.
            **context: Structured key-value context.
        """
        if level.stdlib_level < self._min_level:
            return
        context["severity"] = level.value
        getattr(self._logger, level.method_name)(message, **context)

    def trace(self, message: str, /, **context: Any) -> None:
        """Log a trace message.

        Args:
            message (str): Message text.
            **context: Structured key-value context.
        """
        self.log(Level.TRACE, message, **context)

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug message.

        Args:
            message (str): Message text.
            **context: Structured key-value context.
        """
        self.log(Level.DEBUG, message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info message.

        Args:
            message (str): Message text.
            **context: Structured key-value context.
        """
        self.log(Level.INFO, message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning message.

        Args:
            message (str): Message text.
            **context: Structured key-value context.
        """
        self.log(Level.WARN, message, **context)

    def error(self, message: str, /, **context: Any) -> None:
        """Log an error message.

        Args:
            message (str): Message text.
            **context: Structured key-value context.
        """
        self.log(Level.ERROR, message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return new adapter with bound context.

        Args:
            **context: Context to bind to all subsequent logs.

        Returns:
            ConsoleAdapter: New adapter instance with bound context.
        """
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        bound_adapter._min_level = self._min_level
        return bound_adapter
