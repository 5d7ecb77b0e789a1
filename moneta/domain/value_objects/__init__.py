"""Domain value objects.

Immutable monetary values: the currency catalog, Amount, and the
error-coalescing Outcome.
"""

from moneta.domain.value_objects.amount import DEFAULT_PRECISION, Amount
from moneta.domain.value_objects.currency import VALID_CURRENCIES, Currency
from moneta.domain.value_objects.outcome import Outcome

__all__ = [
    "Amount",
    "Currency",
    "DEFAULT_PRECISION",
    "Outcome",
    "VALID_CURRENCIES",
]
