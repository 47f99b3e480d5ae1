"""Centralized constants for internal implementation details.

This module contains constants that are NOT environment-specific
configuration. For environment-specific settings, use
`api_error/core/config.py` instead.

Example:
    >>> from api_error.core.constants import VERSION
"""

# =============================================================================
# Package metadata
# =============================================================================

VERSION: str = "0.1.0"
"""Library version, also the default ``app_version`` bound onto records."""

DEFAULT_APP_NAME: str = "api-error"
"""Default ``app`` value bound onto every record."""


# =============================================================================
# Configuration
# =============================================================================

ENV_PREFIX: str = "API_ERROR_"
"""Prefix for environment variables read by Settings."""
