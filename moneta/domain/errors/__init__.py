"""Domain errors package.

Usage:
    from moneta.domain.errors import CurrencyError, Mismatch, DivideByZero, Unknown
"""

from moneta.domain.errors.currency_error import (
    CurrencyError,
    CurrencyOperationError,
    DivideByZero,
    Mismatch,
    Unknown,
)

__all__ = [
    "CurrencyError",
    "CurrencyOperationError",
    "DivideByZero",
    "Mismatch",
    "Unknown",
]
