"""CauseChainProtocol definition (private error boundary).

A cause chain holds the original failure plus any context annotation added
when it was wrapped. It is immutable once built.

Order:
    Entries are iterated outer to inner. When context is attached it becomes
    the outermost entry and the original error follows it. A chain always
    holds at least one entry.

Backends:
    - ExceptionChain: native ``__cause__``/``__context__`` chaining
    - TracebackChain: snapshot taken with ``traceback.TracebackException``

The backend is chosen by ``get_cause_chain_factory()``; nothing outside the
container module depends on which one is active.
"""

from __future__ import annotations

from typing import Iterator, Protocol


class CauseChainProtocol(Protocol):
    """Protocol for cause chain implementations."""

    @classmethod
    def wrap(
        cls, error: BaseException, context: object | None = None
    ) -> CauseChainProtocol:
        """Wrap ``error``, optionally annotating it with ``context``.

        Args:
            error: Original failure.
            context: Optional annotation; its ``str()`` becomes the
                outermost entry.

        Returns:
            New chain.

        Raises:
            TypeError: If ``error`` is not an exception.
        """
        ...

    @property
    def error(self) -> BaseException:
        """Head (outermost) exception."""
        ...

    def chain(self) -> Iterator[str]:
        """Yield display strings of every entry, outer to inner."""
        ...

    def root_cause(self) -> BaseException:
        """Return the innermost exception."""
        ...

    def source(self) -> BaseException | None:
        """Return the entry directly below the head, if any."""
        ...

    def __iter__(self) -> Iterator[BaseException]:
        """Yield every exception, outer to inner."""
        ...
