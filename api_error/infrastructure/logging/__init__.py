"""Logging adapters implementing LoggerProtocol.

    from api_error.infrastructure.logging import ConsoleAdapter
"""

from api_error.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
