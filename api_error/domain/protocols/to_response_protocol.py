"""ToResponse protocol (public error boundary).

A public error is the only part of a DetailedError an external caller ever
sees. It decides its own response shape; the container just delegates.

Contract:
    - ``to_response()`` is pure: repeated calls return equal results.
    - ``repr()`` gives a useful debug form (it is logged as ``public_error``).
    - The public value never has access to the private cause chain.

Usage:
    class NotFound:
        def to_response(self) -> dict[str, str]:
            return {"category": "NotFound", "msg": "Resource not found."}

        def __repr__(self) -> str:
            return "NotFound"
"""

from typing import Protocol, TypeVar, runtime_checkable

Response_co = TypeVar("Response_co", covariant=True)


@runtime_checkable
class ToResponse(Protocol[Response_co]):
    """Protocol for values convertible into an externally safe response."""

    def to_response(self) -> Response_co:
        """Build the externally safe response payload.

        Returns:
            Response chosen by the implementation.
        """
        ...
