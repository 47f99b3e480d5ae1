"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from api_error.core.enums import Environment, Level
"""

from api_error.core.enums.environment import Environment
from api_error.core.enums.level import TRACE_LEVEL, Level

__all__ = ["Environment", "Level", "TRACE_LEVEL"]
