"""Result types for railway-oriented programming.

This module implements the Result pattern for callers that prefer to handle
a DetailedError as data instead of catching it.

Usage:
    from api_error import attempt

    result = attempt(read_config, UnexpectedServerError(), "failed to read config")
    match result:
        case Success(value=value):
            print(f"Loaded: {value}")
        case Failure(error=error):
            return error.to_response()
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
