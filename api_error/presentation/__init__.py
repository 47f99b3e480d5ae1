"""Presentation layer - HTTP concerns.

Maps DetailedError to HTTP responses for FastAPI applications. The
presentation layer only ever calls ``to_response()``; the private chain and
metadata never leave the diagnostic channel.

Exports:
    ProblemDetails: RFC 9457 response schema
    ProblemDetailsError: PublicError rendering ProblemDetails
    register_exception_handlers: Register handlers with a FastAPI app
"""

from api_error.presentation.exception_handlers import (
    detailed_error_handler,
    register_exception_handlers,
    unhandled_exception_handler,
)
from api_error.presentation.problem_details import ProblemDetails, ProblemDetailsError

__all__ = [
    "ProblemDetails",
    "ProblemDetailsError",
    "detailed_error_handler",
    "register_exception_handlers",
    "unhandled_exception_handler",
]
