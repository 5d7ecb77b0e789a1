"""Runtime environment types.

Used by Settings to choose environment-specific behavior, such as the log
renderer picked by the logger composition root.

Environments:
- DEVELOPMENT: Local development, human-readable console logs
- TESTING: Automated test execution, JSON logs
- CI: Continuous integration, JSON logs
- PRODUCTION: Deployed library consumers
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
