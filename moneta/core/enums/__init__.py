"""Core enums package.

Usage:
    from moneta.core.enums import Environment
"""

from moneta.core.enums.environment import Environment

__all__ = ["Environment"]
