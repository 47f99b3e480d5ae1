"""api_error: propagate errors with a private cause chain and a public response.

Creating an error with one of the helpers:
1. emits one structured log record (structlog) with the full cause chain,
   the call site and any extra fields,
2. optionally wraps the underlying error with context,
3. keeps a public value that maps straight to a sanitized response.

Example:
    from api_error import UnexpectedServerError, e

    def read_file() -> str:
        try:
            with open("random.txt") as f:
                return f.read()
        except OSError as err:
            raise e(err, UnexpectedServerError(), "failed to read my amazing file")

    try:
        read_file()
    except DetailedError as err:
        err.to_response()
        # {"category": "UnexpectedServerError",
        #  "msg": "An unexpected server error occurred, please try again in 5 seconds."}

FastAPI integration lives in ``api_error.presentation`` (not imported here).
"""

from api_error.core.constants import VERSION
from api_error.core.enums import Level
from api_error.core.result import Failure, Result, Success
from api_error.domain.detailed_error import DetailedError
from api_error.domain.protocols import CauseChainProtocol, LoggerProtocol, ToResponse
from api_error.domain.public_error import PublicError, UnexpectedServerError
from api_error.macros import attempt, d, detailed_error, e, i, reraise, t, w

__version__ = VERSION

__all__ = [
    "CauseChainProtocol",
    "DetailedError",
    "Failure",
    "Level",
    "LoggerProtocol",
    "PublicError",
    "Result",
    "Success",
    "ToResponse",
    "UnexpectedServerError",
    "attempt",
    "d",
    "detailed_error",
    "e",
    "i",
    "reraise",
    "t",
    "w",
]
