"""Error-coalescing result of monetary arithmetic.

An Outcome holds either a valid Amount or a CurrencyError, stored as a
``Success``/``Failure`` Result. Outcomes take part in the same arithmetic as
amounts, so a chain of operations can be written without intermediate checks
and inspected once at the end:

    total = Outcome.sum(line_items) - discount
    total = total / quantity
    if total.is_mismatch():
        ...

Combination rules:
    - Unknown is the identity of addition: ``x + Unknown == Unknown + x == x``.
    - Subtracting from Unknown negates: ``Unknown - x == -x``.
    - Mismatch and DivideByZero are absorbing: once held, no later operand
      replaces them. When both operands hold such an error, the left one wins.
    - Scaling, negation and conversion map over a held amount and pass any
      error through unchanged.
    - Division by zero yields DivideByZero unless the outcome already holds
      Mismatch or DivideByZero.

Every binary operator converts its operands to Outcome and goes through one
combination function (``_add``, ``_subtract``, ``_divide``).
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from decimal import Decimal
from functools import reduce
from typing import Self

from moneta.core.result import (
    Failure,
    Result,
    Success,
    is_success,
    map_success,
)
from moneta.domain.errors.currency_error import (
    CurrencyError,
    CurrencyOperationError,
    DivideByZero,
    Mismatch,
    Unknown,
)
from moneta.domain.value_objects.amount import (
    Amount,
    Scalar,
    as_scalar,
    split_format_spec,
)
from moneta.domain.value_objects.currency import Currency


@dataclass(frozen=True, slots=True, init=False, eq=False, repr=False)
class Outcome:
    """Either a valid Amount or a CurrencyError.

    Construct from an Amount (success), a CurrencyError (failure), a
    Success/Failure Result, or another Outcome.

    Attributes:
        result: ``Success(value=Amount)`` or ``Failure(error=CurrencyError)``.

    Example:
        >>> eur = Currency.EUR
        >>> Outcome(Amount(3, eur)) + Amount(5, eur)
        Outcome(Amount(value=Decimal('8'), currency=EUR))
        >>> Outcome.unknown() - Amount(1, eur)
        Outcome(Amount(value=Decimal('-1'), currency=EUR))
    """

    result: Result[Amount, CurrencyError]

    def __init__(
        self, value: Amount | CurrencyError | Outcome | Result[Amount, CurrencyError]
    ) -> None:
        """Wrap an amount, an error, a Result, or copy another Outcome.

        Raises:
            TypeError: If value is none of the supported kinds.
        """
        match value:
            case Outcome():
                result = value.result
            case Amount():
                result = Success(value=value)
            case CurrencyError():
                result = Failure(error=value)
            case Success(value=Amount()) | Failure(error=CurrencyError()):
                result = value
            case _:
                raise TypeError(
                    f"Outcome requires an Amount or a CurrencyError, got: {value!r}"
                )
        object.__setattr__(self, "result", result)

    # -------------------------------------------------------------------------
    # Factory Methods
    # -------------------------------------------------------------------------

    @classmethod
    def unknown(cls) -> Self:
        """Create an Outcome holding Unknown (the identity of addition)."""
        return cls(Unknown())

    @classmethod
    def mismatch(cls, first: Currency, second: Currency) -> Self:
        """Create an Outcome holding Mismatch(first, second)."""
        return cls(Mismatch(first, second))

    @classmethod
    def divide_by_zero(cls) -> Self:
        """Create an Outcome holding DivideByZero."""
        return cls(DivideByZero())

    @classmethod
    def sum(cls, items: Iterable[Amount | Outcome]) -> Outcome:
        """Add up amounts and outcomes from left to right.

        Args:
            items: Amounts and/or Outcomes, in the order they are added.

        Returns:
            The total. Unknown for an empty sequence; the first Mismatch or
            DivideByZero encountered poisons the rest of the reduction.

        Example:
            >>> Outcome.sum([]).is_unknown()
            True
            >>> Outcome.sum([eur_1, Outcome.unknown(), eur_2]) == eur_3
            True
        """
        return reduce(operator.add, items, cls.unknown())

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    def is_ok(self) -> bool:
        """Return True if this outcome holds an Amount."""
        return is_success(self.result)

    def is_err(self) -> bool:
        """Return True if this outcome holds a CurrencyError."""
        return not is_success(self.result)

    def is_unknown(self) -> bool:
        """Return True if this outcome holds Unknown."""
        return isinstance(self._error(), Unknown)

    def is_mismatch(self) -> bool:
        """Return True if this outcome holds Mismatch."""
        return isinstance(self._error(), Mismatch)

    def is_divide_by_zero(self) -> bool:
        """Return True if this outcome holds DivideByZero."""
        return isinstance(self._error(), DivideByZero)

    def into_inner(self) -> Result[Amount, CurrencyError]:
        """Return the underlying Success/Failure result.

        Use this to leave the arithmetic chain with ``match``:

            match (a + b).into_inner():
                case Success(value=amount):
                    ...
                case Failure(error=Mismatch(first, second)):
                    ...
        """
        return self.result

    def unwrap(self) -> Amount:
        """Return the held Amount.

        Raises:
            CurrencyOperationError: If this outcome holds an error.
        """
        match self.result:
            case Success(value=amount):
                return amount
            case Failure(error=error):
                raise CurrencyOperationError(error)

    def unwrap_err(self) -> CurrencyError:
        """Return the held CurrencyError.

        Raises:
            ValueError: If this outcome holds an Amount.
        """
        match self.result:
            case Failure(error=error):
                return error
            case Success(value=amount):
                raise ValueError(f"Outcome holds an amount, not an error: {amount}")

    def _error(self) -> CurrencyError | None:
        if isinstance(self.result, Failure):
            return self.result.error
        return None

    # -------------------------------------------------------------------------
    # Mapped Operations (errors pass through)
    # -------------------------------------------------------------------------

    def abs(self) -> Outcome:
        """Return the absolute value of the held amount, or the held error."""
        return Outcome(map_success(self.result, Amount.abs))

    def converted_to(
        self, target_currency: Currency | str, exchange_rate: Scalar
    ) -> Outcome:
        """Convert the held amount to another currency, or pass the error on.

        See ``Amount.converted_to``.
        """
        return Outcome(
            map_success(
                self.result,
                lambda amount: amount.converted_to(target_currency, exchange_rate),
            )
        )

    def __neg__(self) -> Outcome:
        return Outcome(map_success(self.result, operator.neg))

    def __abs__(self) -> Outcome:
        return self.abs()

    def __mul__(self, scalar: Scalar) -> Outcome:
        factor = as_scalar(scalar)
        if factor is None:
            return NotImplemented
        return Outcome(map_success(self.result, lambda amount: amount * factor))

    def __rmul__(self, scalar: Scalar) -> Outcome:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Scalar) -> Outcome:
        divisor = as_scalar(scalar)
        if divisor is None:
            return NotImplemented
        return _divide(self, divisor)

    # -------------------------------------------------------------------------
    # Combined Operations
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> Outcome:
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return _add(self, right)

    def __radd__(self, other: object) -> Outcome:
        left = _coerce(other)
        if left is None:
            return NotImplemented
        return _add(left, self)

    def __sub__(self, other: object) -> Outcome:
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return _subtract(self, right)

    def __rsub__(self, other: object) -> Outcome:
        left = _coerce(other)
        if left is None:
            return NotImplemented
        return _subtract(left, self)

    # -------------------------------------------------------------------------
    # Equality
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """Compare with an Outcome, an Amount, or a CurrencyError.

        An Amount equals a successful outcome holding an equal amount, and a
        CurrencyError equals a failed outcome holding an equal error.
        """
        match other:
            case Outcome():
                return self.result == other.result
            case Amount():
                return self.result == Success(value=other)
            case CurrencyError():
                return self.result == Failure(error=other)
            case _:
                return NotImplemented

    def __hash__(self) -> int:
        match self.result:
            case Success(value=amount):
                return hash(amount)
            case Failure(error=error):
                return hash(error)

    # -------------------------------------------------------------------------
    # String Representations
    # -------------------------------------------------------------------------

    def __format__(self, format_spec: str) -> str:
        """Format the held amount with ``format_spec``.

        An error is padded like an amount; its text has no precision.
        """
        match self.result:
            case Success(value=amount):
                return format(amount, format_spec)
            case Failure(error=error):
                _, pad = split_format_spec(format_spec)
                return format(str(error), pad)

    def __str__(self) -> str:
        return format(self, "")

    def __repr__(self) -> str:
        match self.result:
            case Success(value=inner) | Failure(error=inner):
                return f"Outcome({inner!r})"


def _coerce(operand: object) -> Outcome | None:
    """Convert an arithmetic operand to Outcome, or None if unsupported."""
    if isinstance(operand, Outcome):
        return operand
    if isinstance(operand, (Amount, CurrencyError)):
        return Outcome(operand)
    return None


def _combine_amounts(
    left: Amount, right: Amount, op: Callable[[Decimal, Decimal], Decimal]
) -> Outcome:
    if left.currency is not right.currency:
        return Outcome.mismatch(left.currency, right.currency)
    return Outcome(Amount(op(left.value, right.value), left.currency))


def _add(left: Outcome, right: Outcome) -> Outcome:
    match left.result, right.result:
        case Success(value=a), Success(value=b):
            return _combine_amounts(a, b, operator.add)
        case Success(), Failure(error=Unknown()):
            return left
        case Success(), Failure():
            return right
        case Failure(error=Unknown()), _:
            return right
        case _:
            return left


def _subtract(left: Outcome, right: Outcome) -> Outcome:
    match left.result, right.result:
        case Success(value=a), Success(value=b):
            return _combine_amounts(a, b, operator.sub)
        case Success(), Failure(error=Unknown()):
            return left
        case Success(), Failure():
            return right
        case Failure(error=Unknown()), _:
            # Subtracting from nothing negates
            return -right
        case _:
            return left


def _divide(dividend: Outcome, divisor: Decimal) -> Outcome:
    match dividend.result:
        case Failure(error=error) if not isinstance(error, Unknown):
            return dividend
        case _ if divisor.is_zero():
            return Outcome.divide_by_zero()
        case Success(value=amount):
            return Outcome(Amount(amount.value / divisor, amount.currency))
        case _:
            return dividend
