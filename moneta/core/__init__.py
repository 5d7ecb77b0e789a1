"""Core shared kernel.

This module provides foundational utilities used across all layers:
- Result types for railway-oriented programming
- Settings loaded from the environment

The core module has NO dependencies on other moneta layers.
"""

from moneta.core.enums import Environment
from moneta.core.result import Failure, Result, Success, is_success, map_success

__all__ = [
    "Environment",
    "Failure",
    "Result",
    "Success",
    "is_success",
    "map_success",
]
