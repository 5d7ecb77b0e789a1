"""moneta: amounts of money and error-coalescing monetary arithmetic.

Usage:
    from decimal import Decimal
    from moneta import Amount, Currency, Outcome

    a = Amount(Decimal("3"), Currency.EUR)
    b = Amount(Decimal("5"), Currency.USD)

    total = a + b
    total.is_mismatch()   # True
    str(total)            # "mismatch currency 'EUR' and 'USD'"
"""

from moneta.core.result import Failure, Result, Success
from moneta.domain.enums import Ordering
from moneta.domain.errors import (
    CurrencyError,
    CurrencyOperationError,
    DivideByZero,
    Mismatch,
    Unknown,
)
from moneta.domain.value_objects import Amount, Currency, Outcome

__all__ = [
    "Amount",
    "Currency",
    "CurrencyError",
    "CurrencyOperationError",
    "DivideByZero",
    "Failure",
    "Mismatch",
    "Ordering",
    "Outcome",
    "Result",
    "Success",
    "Unknown",
]
