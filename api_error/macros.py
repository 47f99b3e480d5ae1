"""Construction helpers that capture the call site.

These are the intended entry points for creating a DetailedError. Each
captures the file, line and module of the line that calls it and forwards
them, unmodified, to the DetailedError constructor.

Arguments:
    private  the original exception (positional)
    public   public error implementing ToResponse (positional)
    context  optional annotation wrapped around ``private`` (positional)
    **fields extra record fields; values are converted with str()

The first three parameters are positional-only, so every keyword, even
``context=`` or ``level=``, is a field.

Usage:
    try:
        open("random.txt")
    except OSError as err:
        raise e(err, UnexpectedServerError(), "failed to read my amazing file", user_id=42)

    # Convert everything raised in a block
    with reraise(UnexpectedServerError(), "failed to load settings"):
        settings = load_settings()

    # Railway style
    result = attempt(load_settings, UnexpectedServerError())
"""

from __future__ import annotations

import functools
import inspect
from types import TracebackType
from typing import Any, Callable, TypeVar

from api_error.core.enums import Level
from api_error.core.result import Failure, Result, Success
from api_error.domain.detailed_error import DetailedError, Pub
from api_error.domain.metadata import CallSite

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])


def _build(
    level: Level | str,
    private: BaseException,
    public: Pub,
    context: object | None,
    fields: dict[str, Any],
    site: CallSite,
) -> DetailedError[Pub]:
    return DetailedError(
        private,
        public,
        context,
        level,
        site.file,
        site.line,
        site.module,
        fields,
    )


def detailed_error(
    level: Level | str,
    private: BaseException,
    public: Pub,
    context: object | None = None,
    /,
    **fields: Any,
) -> DetailedError[Pub]:
    """Create a DetailedError and emit its record at ``level``."""
    return _build(level, private, public, context, fields, CallSite.capture(1))


def e(
    private: BaseException, public: Pub, context: object | None = None, /, **fields: Any
) -> DetailedError[Pub]:
    """Create a DetailedError and emit its record at ERROR.

    Shorthand for ``detailed_error(Level.ERROR, ...)``.
    """
    return _build(Level.ERROR, private, public, context, fields, CallSite.capture(1))


def w(
    private: BaseException, public: Pub, context: object | None = None, /, **fields: Any
) -> DetailedError[Pub]:
    """Create a DetailedError and emit its record at WARN.

    Shorthand for ``detailed_error(Level.WARN, ...)``.
    """
    return _build(Level.WARN, private, public, context, fields, CallSite.capture(1))


def i(
    private: BaseException, public: Pub, context: object | None = None, /, **fields: Any
) -> DetailedError[Pub]:
    """Create a DetailedError and emit its record at INFO."""
    return _build(Level.INFO, private, public, context, fields, CallSite.capture(1))


def d(
    private: BaseException, public: Pub, context: object | None = None, /, **fields: Any
) -> DetailedError[Pub]:
    """Create a DetailedError and emit its record at DEBUG."""
    return _build(Level.DEBUG, private, public, context, fields, CallSite.capture(1))


def t(
    private: BaseException, public: Pub, context: object | None = None, /, **fields: Any
) -> DetailedError[Pub]:
    """Create a DetailedError and emit its record at TRACE."""
    return _build(Level.TRACE, private, public, context, fields, CallSite.capture(1))


class reraise:
    """Convert exceptions raised in a block or function into DetailedError.

    Works as a context manager and as a decorator (on plain and ``async``
    functions). The call site is the
    line inside the block (or decorated function) where the exception
    surfaced. A DetailedError raised inside passes through untouched, as do
    exceptions that are not instances of ``catch``.

    Args:
        public: Public error for the converted exception.
        context: Optional annotation wrapped around the exception.
        level: Severity of the record.
        catch: Exception type(s) to convert.
        **fields: Extra record fields.

    Example:
        >>> with reraise(UnexpectedServerError(), "failed to parse payload", level=Level.WARN):
        ...     payload = json.loads(body)
    """

    def __init__(
        self,
        public: Any,
        context: object | None = None,
        /,
        *,
        level: Level | str = Level.ERROR,
        catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
        **fields: Any,
    ) -> None:
        self._public = public
        self._context = context
        self._level = level
        self._catch = catch
        self._fields = fields

    def __enter__(self) -> reraise:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc is not None and tb is not None:
            self._convert(exc, tb)
        return False

    def __call__(self, func: F) -> F:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    return await func(*args, **kwargs)
                except BaseException as exc:
                    self._convert_raised(exc)
                    raise

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except BaseException as exc:
                self._convert_raised(exc)
                raise

        return wrapper  # type: ignore[return-value]

    def _convert_raised(self, exc: BaseException) -> None:
        tb = exc.__traceback__
        # Skip the wrapper's own frame.
        if tb is not None:
            self._convert(exc, tb.tb_next or tb)

    def _convert(self, exc: BaseException, tb: TracebackType) -> None:
        if isinstance(exc, DetailedError) or not isinstance(exc, self._catch):
            return
        raise _build(
            self._level,
            exc,
            self._public,
            self._context,
            self._fields,
            CallSite.from_traceback(tb),
        )


def attempt(
    func: Callable[[], T],
    public: Pub,
    context: object | None = None,
    /,
    *,
    level: Level | str = Level.ERROR,
    **fields: Any,
) -> Result[T, DetailedError[Pub]]:
    """Call ``func`` and return its outcome as a Result.

    Exceptions (``Exception`` subclasses) become ``Failure`` holding a
    DetailedError whose call site is the caller of ``attempt``. A
    DetailedError raised by ``func`` is returned as-is.

    Args:
        func: Zero-argument callable (use ``functools.partial`` for arguments).
        public: Public error for a failure.
        context: Optional annotation wrapped around the exception.
        level: Severity of the record.
        **fields: Extra record fields.

    Returns:
        Success(value=...) or Failure(error=DetailedError).
    """
    site = CallSite.capture(1)
    try:
        return Success(value=func())
    except DetailedError as err:
        return Failure(error=err)
    except Exception as exc:
        return Failure(error=_build(level, exc, public, context, fields, site))
