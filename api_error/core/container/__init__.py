"""Container module - Centralized dependency injection.

    from api_error.core.container import get_logger, get_cause_chain_factory
"""

from api_error.core.container.infrastructure import (
    get_cause_chain_factory,
    get_logger,
)

__all__ = [
    "get_cause_chain_factory",
    "get_logger",
]
