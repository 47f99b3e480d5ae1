"""Exception handlers mapping errors to HTTP responses.

Handlers:
    detailed_error_handler: DetailedError -> ``to_response()`` as JSON
    unhandled_exception_handler: any other exception -> DetailedError with
        UnexpectedServerError (logged once), then the same response path

Only the public value reaches the client. The private chain, fields and call
site stay in the diagnostic record.

Exports:
    register_exception_handlers: Register both handlers with a FastAPI app
"""

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api_error.core.enums import Level
from api_error.domain.detailed_error import DetailedError
from api_error.domain.metadata import CallSite
from api_error.domain.public_error import UnexpectedServerError


def _content(response: Any) -> Any:
    if isinstance(response, BaseModel):
        return response.model_dump(exclude_none=True)
    return response


async def detailed_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert a DetailedError into a JSON response.

    The status code comes from the public value's ``status_code`` attribute
    when it has one, otherwise 500.

    Args:
        request: FastAPI Request object.
        exc: DetailedError raised by an endpoint or dependency.

    Returns:
        JSONResponse with the public value's response as content.
    """
    # Type narrowing: FastAPI registers this handler only for DetailedError
    assert isinstance(exc, DetailedError)

    status_code = getattr(exc.public, "status_code", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse(status_code=status_code, content=_content(exc.to_response()))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Wrap an unexpected exception in a DetailedError and respond.

    The call site is where the exception was raised; the request method and
    path are attached as fields.

    Args:
        request: FastAPI Request object.
        exc: Unhandled exception.

    Returns:
        JSONResponse with UnexpectedServerError's response (500).
    """
    site = (
        CallSite.from_traceback(exc.__traceback__, innermost=True)
        if exc.__traceback__ is not None
        else CallSite.capture()
    )
    error = DetailedError(
        exc,
        UnexpectedServerError(),
        "unhandled exception while serving request",
        Level.ERROR,
        site.file,
        site.line,
        site.module,
        {"method": request.method, "path": request.url.path},
    )
    return await detailed_error_handler(request, error)


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with a FastAPI application.

    Args:
        app: FastAPI application instance

    Example:
        >>> from fastapi import FastAPI
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(DetailedError, detailed_error_handler)

    # Catch-all for 500 errors
    app.add_exception_handler(Exception, unhandled_exception_handler)
