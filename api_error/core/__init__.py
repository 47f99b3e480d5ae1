"""Core shared kernel.

This module provides foundational utilities used across all layers:
- Result types for railway-oriented programming
- Severity and environment enums
- Settings and the dependency container

The core module has NO dependencies on other package layers at import time.
"""

from api_error.core.enums import Environment, Level
from api_error.core.result import Failure, Result, Success

__all__ = [
    "Environment",
    "Failure",
    "Level",
    "Result",
    "Success",
]
