"""Reference public errors.

PublicError is a ready-made base for values handed to external callers.
Subclasses set a fixed ``message`` (and optionally ``status_code`` for the
serving layer); the response carries the class name as ``category``:

    {"category": "UnexpectedServerError",
     "msg": "An unexpected server error occurred, please try again in 5 seconds."}

Anything with a ``to_response()`` method works as a public error; this base
is a convenience, not a requirement.
"""

from typing import ClassVar


class PublicError:
    """Base public error rendering ``{"category", "msg"}`` responses.

    Attributes:
        message: Text shown to the external caller.
        status_code: HTTP status used by the serving layer.
    """

    message: ClassVar[str] = "An unexpected error occurred."
    status_code: ClassVar[int] = 500

    @property
    def category(self) -> str:
        return type(self).__name__

    def to_response(self) -> dict[str, str]:
        """Build the ``{"category", "msg"}`` response.

        Returns:
            dict[str, str]: Response payload.
        """
        return {"category": self.category, "msg": str(self)}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return self.category

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class UnexpectedServerError(PublicError):
    """Catch-all public error for failures the caller cannot act on."""

    message = "An unexpected server error occurred, please try again in 5 seconds."
