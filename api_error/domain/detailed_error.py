"""DetailedError: one error, two representations.

A DetailedError carries:
- ``private``: the cause chain (operators and logs only)
- ``public``: a value implementing ToResponse (external callers only)
- metadata: severity, call site and custom fields (logs only)

Constructing one emits exactly one structured diagnostic record before the
constructor returns. ``log()`` can be called again but never emits twice.

It should only be in rare circumstances that a DetailedError is constructed
directly; the helpers in ``api_error.macros`` (``e``, ``w``,
``detailed_error``) capture the call site for you.

Usage:
    try:
        config = path.read_text()
    except OSError as err:
        raise e(err, UnexpectedServerError(), "failed to read config", path=path)

    # Serving layer
    except DetailedError as err:
        return err.to_response()  # never exposes the private chain
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any, Generic, Mapping, TypeVar

from api_error.core.container import get_cause_chain_factory, get_logger
from api_error.core.enums import Level
from api_error.domain.dispatch import emit_diagnostic
from api_error.domain.metadata import CallSite, Meta
from api_error.domain.protocols.to_response_protocol import ToResponse

if TYPE_CHECKING:
    from api_error.domain.protocols.cause_chain_protocol import CauseChainProtocol
    from api_error.domain.protocols.logger_protocol import LoggerProtocol

Pub = TypeVar("Pub", bound=ToResponse[Any])


class DetailedError(Exception, Generic[Pub]):
    """Error container pairing a private cause chain with a public value.

    Args:
        private: Original failure (any exception).
        public: Public error value implementing ToResponse.
        context: Optional annotation; becomes the outermost chain entry.
        level: Severity of the diagnostic record.
        file: Call site file. Captured from the caller when omitted.
        line: Call site line. Captured from the caller when omitted.
        module: Call site module. Captured from the caller when omitted.
        fields: Extra record fields; keys and values are converted to str.
        logger: Sink for the record. Defaults to the container logger.
        chain_factory: Cause chain class. Defaults to the configured backend.

    Raises:
        TypeError: If ``private`` is not an exception or ``public`` has no
            ``to_response()``.
    """

    def __init__(
        self,
        private: BaseException,
        public: Pub,
        context: object | None = None,
        level: Level | str = Level.ERROR,
        file: str | None = None,
        line: int | None = None,
        module: str | None = None,
        fields: Mapping[Any, Any] | None = None,
        *,
        logger: LoggerProtocol | None = None,
        chain_factory: type[CauseChainProtocol] | None = None,
    ) -> None:
        if not isinstance(public, ToResponse):
            raise TypeError(
                f"Public error must implement to_response(), got {type(public).__name__}"
            )

        factory = chain_factory or get_cause_chain_factory()
        self._private = factory.wrap(private, context)
        self._public = public

        if file is None or line is None or module is None:
            site = CallSite.capture(1)
            file = site.file if file is None else file
            line = site.line if line is None else line
            module = site.module if module is None else module

        self._meta: Meta | None = Meta(
            fields={str(key): str(value) for key, value in (fields or {}).items()},
            file=file,
            line=line,
            module=module,
            level=Level.parse(level),
        )
        self._logger = logger or get_logger()
        self._lock = threading.Lock()

        super().__init__(str(self._private))
        # Python tooling (traceback, logging.exception) walks the private chain.
        self.__cause__ = self._private.error
        self.__suppress_context__ = True

        self.log()

    @property
    def private(self) -> CauseChainProtocol:
        """Private cause chain (never exposed to external callers)."""
        return self._private

    @property
    def public(self) -> Pub:
        """Public error value."""
        return self._public

    @property
    def has_logged(self) -> bool:
        """True once the diagnostic record was emitted."""
        return self._meta is None or self._meta.has_logged

    @property
    def level(self) -> Level | None:
        """Severity of the record, or None after ``into_parts()``."""
        return None if self._meta is None else self._meta.level

    def to_response(self) -> Any:
        """Build the externally safe response.

        Returns:
            Whatever the public value's ``to_response()`` returns.
        """
        return self._public.to_response()

    def into_parts(self) -> tuple[CauseChainProtocol, Pub]:
        """Split into the cause chain and the public value.

        Metadata is dropped; the container can't be split twice.

        Returns:
            Tuple of (cause chain, public value).

        Raises:
            RuntimeError: If called a second time.
        """
        with self._lock:
            if self._meta is None:
                raise RuntimeError("DetailedError was already split into parts")
            self._meta = None
        return self._private, self._public

    def log(self) -> None:
        """Emit the diagnostic record if it hasn't been emitted yet.

        Safe to call from several threads; at most one record is emitted.
        """
        with self._lock:
            meta = self._meta
            if meta is None or meta.has_logged:
                return
            emit_diagnostic(self._logger, self._private, self._public, meta)
            meta.has_logged = True

    def source(self) -> BaseException | None:
        """Return the chain entry directly below the head, if any."""
        return self._private.source()

    def __reduce__(self) -> tuple[Any, ...]:
        # Copies and unpickled instances never emit a record.
        return _restore, (type(self), self.args, self._private, self._public, self._meta)

    def __str__(self) -> str:
        return str(self._private)

    def __repr__(self) -> str:
        return repr(self._private)


def _restore(
    cls: type[DetailedError[Any]],
    args: tuple[Any, ...],
    private: CauseChainProtocol,
    public: Any,
    meta: Meta | None,
) -> DetailedError[Any]:
    """Rebuild a copied or unpickled DetailedError without logging."""
    error = cls.__new__(cls, *args)
    error._private = private
    error._public = public
    error._meta = meta
    error._logger = get_logger()
    error._lock = threading.Lock()
    error.__cause__ = private.error
    error.__suppress_context__ = True
    return error
