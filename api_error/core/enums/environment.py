"""Application environment types.

Defines the runtime environments the library can be configured for.
Used by Settings to pick the log renderer.

Environments:
- DEVELOPMENT: Local development, human-readable console output
- TESTING: Automated test execution, JSON output
- CI: Continuous integration, JSON output
- PRODUCTION: Deployed service, JSON output
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
