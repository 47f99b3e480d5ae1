"""Severity levels for diagnostic records.

A DetailedError is emitted at exactly one of five levels. Each level knows
its numeric value (compatible with the stdlib ``logging`` scale) and the
structlog bound-logger method used to emit it.

Levels (most to least severe):
    - ERROR: Operation failed
    - WARN: Degraded behaviour, caller may recover
    - INFO: Expected failure worth recording
    - DEBUG: Diagnostic detail
    - TRACE: Very verbose diagnostic detail (below DEBUG)

Usage:
    from api_error.core.enums import Level

    Level.parse("warning")  # Level.WARN
    Level.TRACE.stdlib_level  # 5
"""

from enum import Enum
import logging

TRACE_LEVEL: int = 5
"""Numeric value for TRACE (structlog and stdlib stop at DEBUG=10)."""


class Level(str, Enum):
    """Severity of a diagnostic record."""

    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"
    DEBUG = "DEBUG"
    TRACE = "TRACE"

    @property
    def stdlib_level(self) -> int:
        """Numeric level on the stdlib ``logging`` scale."""
        return _STDLIB_LEVELS[self]

    @property
    def method_name(self) -> str:
        """Name of the structlog bound-logger method for this level.

        structlog has no ``trace`` method, so TRACE records go through
        ``debug`` and rely on the ``severity`` key to keep their level.
        """
        return _METHOD_NAMES[self]

    @classmethod
    def parse(cls, value: "str | Level") -> "Level":
        """Parse a level name (case-insensitive).

        Args:
            value: Level member or name. ``WARNING`` is accepted for WARN.

        Returns:
            Level: Matching member.

        Raises:
            ValueError: If the name is not a known level.
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().upper()
        if name == "WARNING":
            return cls.WARN
        try:
            return cls(name)
        except ValueError:
            raise ValueError(
                f"Unknown level: {value!r}. Expected one of "
                f"{', '.join(member.value for member in cls)}"
            ) from None


_STDLIB_LEVELS: dict[Level, int] = {
    Level.ERROR: logging.ERROR,
    Level.WARN: logging.WARNING,
    Level.INFO: logging.INFO,
    Level.DEBUG: logging.DEBUG,
    Level.TRACE: TRACE_LEVEL,
}

_METHOD_NAMES: dict[Level, str] = {
    Level.ERROR: "error",
    Level.WARN: "warning",
    Level.INFO: "info",
    Level.DEBUG: "debug",
    Level.TRACE: "debug",
}
