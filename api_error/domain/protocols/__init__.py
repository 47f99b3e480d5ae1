"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from api_error.domain.protocols import LoggerProtocol, ToResponse
"""

from api_error.domain.protocols.cause_chain_protocol import CauseChainProtocol
from api_error.domain.protocols.logger_protocol import LoggerProtocol
from api_error.domain.protocols.to_response_protocol import ToResponse

__all__ = [
    "CauseChainProtocol",
    "LoggerProtocol",
    "ToResponse",
]
