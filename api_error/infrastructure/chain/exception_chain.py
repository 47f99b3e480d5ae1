"""Cause chain backed by native exception chaining.

Context is attached by creating a ContextError whose ``__cause__`` is the
wrapped error, exactly what ``raise ContextError(...) from error`` produces.
Walking follows ``__cause__`` first, then ``__context__`` unless the
exception suppresses it, so an error that was itself raised ``from``
another contributes its whole chain. A nested DetailedError contributes
itself followed by the entries below its own head, which it already
renders. The walk happens once, at wrap time; later changes to the
exceptions' links (an error re-raised elsewhere gains a new
``__context__``) do not change the chain.

Example:
    >>> chain = ExceptionChain.wrap(FileNotFoundError("file not found"), "failed to read config")
    >>> list(chain.chain())
    ['failed to read config', 'file not found']
"""

from __future__ import annotations

from itertools import islice
from typing import Iterator

from api_error.domain.detailed_error import DetailedError


class ContextError(Exception):
    """Exception carrying a context annotation for a wrapped error.

    Attributes:
        context: The annotation as supplied by the caller.
    """

    def __init__(self, context: object) -> None:
        super().__init__(str(context))
        self.context = context


def walk_exceptions(head: BaseException) -> Iterator[BaseException]:
    """Yield ``head`` and every exception it chains to, outer to inner.

    Stops when an exception repeats (cyclic ``__context__`` links).

    Args:
        head: Outermost exception.

    Yields:
        BaseException: Each exception in the chain.
    """
    seen: set[int] = set()
    current: BaseException | None = head
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        if isinstance(current, DetailedError):
            # Its head renders the same message as the container itself.
            for inner in islice(current.private, 1, None):
                if id(inner) in seen:
                    return
                seen.add(id(inner))
                yield inner
            return
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None


def attach_context(error: BaseException, context: object | None) -> BaseException:
    """Return the head exception for ``error`` wrapped with ``context``.

    Args:
        error: Original failure.
        context: Optional annotation.

    Returns:
        BaseException: ``error`` itself, or a ContextError caused by it.

    Raises:
        TypeError: If ``error`` is not an exception.
    """
    if not isinstance(error, BaseException):
        raise TypeError(
            f"Private error must be an exception, got {type(error).__name__}"
        )
    if context is None:
        return error
    head = ContextError(context)
    head.__cause__ = error
    head.__suppress_context__ = True
    return head


class ExceptionChain:
    """Immutable cause chain over native exception links.

    Build with :meth:`wrap`; the constructor takes an already-built head and
    snapshots the links below it.
    """

    __slots__ = ("_causes",)

    def __init__(self, head: BaseException) -> None:
        self._causes: tuple[BaseException, ...] = tuple(walk_exceptions(head))

    @classmethod
    def wrap(cls, error: BaseException, context: object | None = None) -> ExceptionChain:
        """Wrap ``error``, optionally annotating it with ``context``."""
        return cls(attach_context(error, context))

    @property
    def error(self) -> BaseException:
        return self._causes[0]

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self._causes)

    def chain(self) -> Iterator[str]:
        return (str(exc) for exc in self._causes)

    def root_cause(self) -> BaseException:
        return self._causes[-1]

    def source(self) -> BaseException | None:
        return self._causes[1] if len(self._causes) > 1 else None

    def __str__(self) -> str:
        return str(self._causes[0])

    def __repr__(self) -> str:
        head, *causes = self.chain()
        if not causes:
            return head
        lines = [head, "", "Caused by:"]
        if len(causes) == 1:
            lines.append(f"    {causes[0]}")
        else:
            lines.extend(f"    {index}: {cause}" for index, cause in enumerate(causes))
        return "\n".join(lines)
