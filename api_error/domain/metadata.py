"""Diagnostic metadata attached to every DetailedError.

Meta holds the log-only attributes of an error instance: severity, call
site, caller-supplied fields and the one-shot ``has_logged`` flag. None of
it is ever part of the public response.

CallSite captures where an error was created, either from the live stack
(``capture``) or from a traceback (``from_traceback``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
import sys
from types import FrameType, TracebackType

from api_error.core.enums import Level

_UNKNOWN_MODULE = "<unknown>"


@dataclass(frozen=True, slots=True, kw_only=True)
class CallSite:
    """Source location of an error's creation.

    Attributes:
        file: Path of the source file.
        line: Line number in ``file``.
        module: Dotted module name (``__name__`` of the frame's globals).
        function: Name of the enclosing function.
    """

    file: str
    line: int
    module: str
    function: str

    @classmethod
    def from_frame(cls, frame: FrameType, line: int | None = None) -> CallSite:
        """Build a call site from a frame.

        Args:
            frame: Frame to read.
            line: Line to report instead of the frame's current line.

        Returns:
            CallSite: Location of ``frame``.
        """
        return cls(
            file=frame.f_code.co_filename,
            line=frame.f_lineno if line is None else line,
            module=frame.f_globals.get("__name__", _UNKNOWN_MODULE),
            function=frame.f_code.co_name,
        )

    @classmethod
    def capture(cls, depth: int = 0) -> CallSite:
        """Capture the location of a caller on the live stack.

        Args:
            depth: 0 is the function calling ``capture``, 1 its caller, etc.

        Returns:
            CallSite: Location of the requested frame.
        """
        return cls.from_frame(sys._getframe(depth + 1))

    @classmethod
    def from_traceback(cls, tb: TracebackType, *, innermost: bool = False) -> CallSite:
        """Capture a location recorded in a traceback.

        Args:
            tb: Traceback to read.
            innermost: Use the frame that raised instead of the outermost
                frame of ``tb``.

        Returns:
            CallSite: Location of the selected traceback entry.
        """
        if innermost:
            while tb.tb_next is not None:
                tb = tb.tb_next
        return cls.from_frame(tb.tb_frame, tb.tb_lineno)


@dataclass(slots=True, kw_only=True)
class Meta:
    """Per-error diagnostic metadata.

    Attributes:
        fields: Caller-supplied string fields (may be empty).
        file: Source file of the call site.
        module: Module of the call site.
        line: Line of the call site.
        level: Severity the record is emitted at.
        has_logged: True once the record was emitted; never reset.
    """

    file: str
    module: str
    line: int
    level: Level
    fields: dict[str, str] = field(default_factory=dict)
    has_logged: bool = False

    @property
    def has_fields(self) -> bool:
        return bool(self.fields)
