"""RFC 9457 Problem Details public errors.

For services that answer with Problem Details instead of the
``{"category", "msg"}`` shape of PublicError.

Exports:
    ProblemDetails: RFC 9457 response schema
    ProblemDetailsError: PublicError base rendering ProblemDetails
"""

import re
from typing import Any, ClassVar

from pydantic import BaseModel, Field

from api_error.domain.public_error import PublicError

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence

    Examples:
        >>> problem = ProblemDetails(
        ...     type="https://api.example.com/errors/resource-not-found",
        ...     title="Resource Not Found",
        ...     status=404,
        ...     detail="The requested resource does not exist.",
        ... )
    """

    type: str = Field(
        default="about:blank",
        description="URI reference identifying the problem type",
        examples=["https://api.example.com/errors/validation-failed"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Validation Failed"],
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[400],
    )
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["The email address format is invalid"],
    )
    instance: str | None = Field(
        None,
        description="URI reference identifying this occurrence",
    )


class ProblemDetailsError(PublicError):
    """PublicError whose response is an RFC 9457 body.

    Subclasses set ``title``, ``message`` (the ``detail``) and
    ``status_code``. When ``type_base`` is set, ``type`` is
    ``{type_base}/{kebab-case class name}``; otherwise ``about:blank``.

    Example:
        >>> class ResourceNotFound(ProblemDetailsError):
        ...     title = "Resource Not Found"
        ...     message = "The requested resource does not exist."
        ...     status_code = 404
        ...     type_base = "https://api.example.com/errors"
        >>> ResourceNotFound().to_response()["type"]
        'https://api.example.com/errors/resource-not-found'
    """

    title: ClassVar[str] = "Internal Server Error"
    type_base: ClassVar[str | None] = None

    @property
    def slug(self) -> str:
        return _CAMEL_BOUNDARY.sub("-", self.category).lower()

    def to_problem(self) -> ProblemDetails:
        """Build the ProblemDetails model for this error."""
        return ProblemDetails(
            type=f"{self.type_base.rstrip('/')}/{self.slug}" if self.type_base else "about:blank",
            title=self.title,
            status=self.status_code,
            detail=self.message,
        )

    def to_response(self) -> dict[str, Any]:  # type: ignore[override]
        return self.to_problem().model_dump(exclude_none=True)
