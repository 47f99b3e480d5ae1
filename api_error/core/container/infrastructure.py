"""Infrastructure dependency factories.

Application-scoped singletons for the collaborators a DetailedError needs:
- Logging (structlog console adapter)
- Cause chain backend (native exception chaining or traceback snapshot)

Both are selected from Settings here (composition root) so the error
container never depends on which concrete implementation is in use.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from api_error.core.config import settings

if TYPE_CHECKING:
    from api_error.domain.protocols.cause_chain_protocol import CauseChainProtocol
    from api_error.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    ``API_ERROR_LOG_JSON`` overrides the environment default.

    Returns:
        LoggerProtocol: Logger bound with ``app`` and ``version``.
    """
    from api_error.infrastructure.logging.console_adapter import ConsoleAdapter

    adapter = ConsoleAdapter(use_json=settings.use_json, min_level=settings.min_level)
    return adapter.bind(app=settings.app_name, version=settings.app_version)


@lru_cache()
def get_cause_chain_factory() -> "type[CauseChainProtocol]":
    """Return the cause chain implementation selected by settings.

    Returns correct backend based on CAUSE_CHAIN_BACKEND:
        - 'exception': ExceptionChain (native ``__cause__`` chaining)
        - 'traceback': TracebackChain (snapshot via TracebackException)

    Returns:
        Class implementing CauseChainProtocol.

    Raises:
        ValueError: If the backend name is unsupported.
    """
    backend = settings.cause_chain_backend

    if backend == "exception":
        from api_error.infrastructure.chain.exception_chain import ExceptionChain

        return ExceptionChain

    elif backend == "traceback":
        from api_error.infrastructure.chain.traceback_chain import TracebackChain

        return TracebackChain

    else:
        raise ValueError(
            f"Unsupported CAUSE_CHAIN_BACKEND: {backend}. "
            "Supported: 'exception', 'traceback'"
        )
