"""Cause chain with a captured traceback report.

Same snapshot as ExceptionChain, plus a ``traceback.TracebackException`` of
the head taken at wrap time, so the debug form carries the formatted
traceback of every entry.
"""

from __future__ import annotations

import traceback

from api_error.infrastructure.chain.exception_chain import ExceptionChain


class TracebackChain(ExceptionChain):
    """Immutable cause chain snapshot with captured tracebacks."""

    __slots__ = ("_report",)

    def __init__(self, head: BaseException) -> None:
        super().__init__(head)
        self._report = traceback.TracebackException.from_exception(head)

    def __repr__(self) -> str:
        return "".join(self._report.format()).rstrip("\n")
