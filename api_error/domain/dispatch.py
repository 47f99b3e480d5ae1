"""Diagnostic logging dispatch.

Turns a cause chain, a public value and their Meta into exactly one
structured record:

    message             head of the chain (context if one was attached)
    errors              every other chain entry, outer to inner
    public_error        repr() of the public value
    additional_context  the caller's fields, only when there are any
    file, line, module  call site

Severity is passed to ``LoggerProtocol.log`` as data; the adapter adds it to
the record as ``severity``. Sink failures are not caught here.
"""

from typing import Any

from api_error.domain.metadata import Meta
from api_error.domain.protocols.cause_chain_protocol import CauseChainProtocol
from api_error.domain.protocols.logger_protocol import LoggerProtocol


def build_record(
    chain: CauseChainProtocol,
    public: object,
    meta: Meta,
) -> tuple[str, dict[str, Any]]:
    """Build the message and context of a diagnostic record.

    Args:
        chain: Private cause chain.
        public: Public error value.
        meta: Diagnostic metadata.

    Returns:
        Tuple of (message, context).
    """
    message, *errors = chain.chain()

    context: dict[str, Any] = {
        "errors": errors,
        "public_error": repr(public),
    }
    if meta.has_fields:
        context["additional_context"] = dict(meta.fields)
    context["file"] = meta.file
    context["line"] = int(meta.line)
    context["module"] = meta.module

    return message, context


def emit_diagnostic(
    logger: LoggerProtocol,
    chain: CauseChainProtocol,
    public: object,
    meta: Meta,
) -> None:
    """Emit one diagnostic record at ``meta.level``.

    Does not check or set ``meta.has_logged``; that is the caller's job.
    """
    message, context = build_record(chain, public, meta)
    logger.log(meta.level, message, **context)
