"""Cause chain backends implementing CauseChainProtocol.

    from api_error.infrastructure.chain import ExceptionChain, TracebackChain
"""

from api_error.infrastructure.chain.exception_chain import ContextError, ExceptionChain
from api_error.infrastructure.chain.traceback_chain import TracebackChain

__all__ = [
    "ContextError",
    "ExceptionChain",
    "TracebackChain",
]
