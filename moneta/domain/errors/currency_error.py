"""Currency errors produced by monetary arithmetic.

Error Hierarchy:
    CurrencyError (base - does NOT inherit from Exception)
    ├── Mismatch (binary operation on two different currencies)
    ├── DivideByZero (division by a zero scalar)
    └── Unknown (no amount known yet, e.g. the sum of nothing)

These errors flow through arithmetic chains as data held by an ``Outcome``.
``CurrencyOperationError`` is the only exception in this module; it is raised
when a caller explicitly terminates a chain that holds an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from moneta.domain.value_objects.currency import Currency


@dataclass(frozen=True, slots=True)
class CurrencyError:
    """Base currency error (does NOT inherit from Exception)."""


@dataclass(frozen=True, slots=True)
class Mismatch(CurrencyError):
    """Two amounts of different currencies were combined.

    Attributes:
        first: Currency of the left operand.
        second: Currency of the right operand.
    """

    first: Currency
    second: Currency

    def __str__(self) -> str:
        return f"mismatch currency '{self.first.code}' and '{self.second.code}'"


@dataclass(frozen=True, slots=True)
class DivideByZero(CurrencyError):
    """An amount was divided by a zero scalar."""

    def __str__(self) -> str:
        return "divide by zero"


@dataclass(frozen=True, slots=True)
class Unknown(CurrencyError):
    """No amount is known yet.

    Identity element of addition: combining Unknown with a valid amount
    yields that amount. Summing an empty sequence produces Unknown.
    """

    def __str__(self) -> str:
        return "unknown currency"


class CurrencyOperationError(ValueError):
    """Raised when a currency error must leave the arithmetic chain.

    Attributes:
        error: The CurrencyError that stopped the chain.
    """

    def __init__(self, error: CurrencyError) -> None:
        """Initialize from the currency error that stopped the chain.

        Args:
            error: Mismatch, DivideByZero or Unknown.
        """
        super().__init__(str(error))
        self.error = error
