"""Immutable Amount value object with Decimal precision.

An Amount is a quantity of money tagged with a Currency. Operations that
cannot fail (negation, absolute value, scaling, conversion) return a new
Amount. Operations that can fail (addition, subtraction, division) return an
Outcome, which carries either the resulting Amount or a CurrencyError.

Ordering is partial: only amounts of the same currency are comparable.
``compare()`` returns None for different currencies, and the rich comparison
operators raise CurrencyOperationError instead of inventing an answer.

Usage:
    from decimal import Decimal
    from moneta.domain.value_objects import Amount, Currency

    price = Amount(Decimal("10.50"), Currency.EUR)
    total = price + Amount(Decimal("2"), Currency.EUR)   # Outcome(€ 12.50)
    print(f"{price * 3:.3}")                             # € 31.500
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_DOWN, Decimal, InvalidOperation, localcontext
from typing import TYPE_CHECKING, Self

from moneta.domain.enums.ordering import Ordering
from moneta.domain.errors.currency_error import CurrencyOperationError, Mismatch
from moneta.domain.value_objects.currency import Currency

if TYPE_CHECKING:
    from moneta.domain.value_objects.outcome import Outcome


# Fractional digits shown when no precision is requested
DEFAULT_PRECISION = 2

# [[fill]align][width][.precision][f]
_FORMAT_SPEC = re.compile(
    r"(?P<pad>(?:.?[<>^])?\d*)(?:\.(?P<precision>\d+))?f?", re.DOTALL
)

type Scalar = Decimal | int | float


def as_scalar(value: object) -> Decimal | None:
    """Convert a bare scalar operand to Decimal.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``.

    Args:
        value: Candidate scalar operand.

    Returns:
        The Decimal value, or None if value is not a supported scalar type.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value))
    return None


def split_format_spec(format_spec: str) -> tuple[int, str]:
    """Split a format spec into its precision and its padding part.

    Args:
        format_spec: ``[[fill]align][width][.precision][f]``.

    Returns:
        (precision, padding spec for ``str.__format__``); precision defaults
        to DEFAULT_PRECISION.

    Raises:
        ValueError: If format_spec has any other form.
    """
    match = _FORMAT_SPEC.fullmatch(format_spec)
    if match is None:
        raise ValueError(f"Invalid format specifier '{format_spec}' for Amount")
    precision = match.group("precision")
    return (
        DEFAULT_PRECISION if precision is None else int(precision),
        match.group("pad"),
    )


@dataclass(frozen=True, slots=True)
class Amount:
    """Immutable quantity of money in a specific currency.

    Attributes:
        value: Decimal quantity (positive, negative, or zero).
        currency: Currency in which value is measured.

    Example:
        >>> Amount(Decimal("10.5"), Currency.USD).abs()
        Amount(value=Decimal('10.5'), currency=USD)
        >>> (Amount(3, "EUR") - Amount(5, "USD")).is_mismatch()
        True
    """

    value: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        """Normalize value to Decimal and currency to a Currency member.

        Raises:
            ValueError: If value is not a finite number or the code is unknown.
            TypeError: If currency is neither a Currency nor a code string.
        """
        if not isinstance(self.value, Decimal):
            # Allow int/float/str but convert to Decimal
            try:
                converted = as_scalar(self.value)
                if converted is None:
                    converted = Decimal(self.value)
            except (InvalidOperation, TypeError, ValueError) as e:
                raise ValueError(f"Amount value must be a valid number: {e}") from e
            object.__setattr__(self, "value", converted)

        if not self.value.is_finite():
            raise ValueError("Amount value cannot be NaN or Infinite")

        if isinstance(self.currency, str):
            object.__setattr__(self, "currency", Currency.from_code(self.currency))
        elif not isinstance(self.currency, Currency):
            raise TypeError(
                f"currency must be a Currency or a currency code, got: {self.currency!r}"
            )

    @classmethod
    def zero(cls, currency: Currency | str) -> Self:
        """Create an Amount of zero in the given currency."""
        return cls(Decimal("0"), currency)

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        """Return True if the quantity is exactly zero, whatever the currency."""
        return self.value.is_zero()

    def is_sign_negative(self) -> bool:
        """Return True if the sign of the quantity is negative (including -0)."""
        return self.value.is_signed()

    # -------------------------------------------------------------------------
    # Infallible Operations
    # -------------------------------------------------------------------------

    def abs(self) -> Amount:
        """Return the absolute value of this amount, in the same currency."""
        return Amount(abs(self.value), self.currency)

    def converted_to(
        self, target_currency: Currency | str, exchange_rate: Scalar
    ) -> Amount:
        """Return this amount converted to another currency.

        The caller is responsible for the exchange rate: it is not validated,
        and converting to the source currency is allowed.

        Args:
            target_currency: Currency of the result.
            exchange_rate: Units of target currency per unit of this currency.

        Returns:
            New Amount of ``value * exchange_rate`` in target_currency.

        Raises:
            TypeError: If exchange_rate is not a number.

        Example:
            >>> Amount(10, "EUR").converted_to(Currency.USD, Decimal("1.1"))
            Amount(value=Decimal('11.0'), currency=USD)
        """
        rate = as_scalar(exchange_rate)
        if rate is None:
            raise TypeError(f"exchange_rate must be a number, got: {exchange_rate!r}")
        return Amount(self.value * rate, target_currency)

    def __neg__(self) -> Amount:
        return Amount(-self.value, self.currency)

    def __abs__(self) -> Amount:
        return self.abs()

    def __mul__(self, scalar: Scalar) -> Amount:
        """Scale the quantity by a scalar, keeping the currency.

        Args:
            scalar: Number to multiply by.

        Returns:
            New Amount with scaled value.
        """
        factor = as_scalar(scalar)
        if factor is None:
            return NotImplemented
        return Amount(self.value * factor, self.currency)

    def __rmul__(self, scalar: Scalar) -> Amount:
        return self.__mul__(scalar)

    # -------------------------------------------------------------------------
    # Fallible Operations (return Outcome)
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> Outcome:
        """Add an Amount or Outcome.

        Returns:
            Outcome with the sum, Mismatch if the currencies differ, or the
            right operand's error if it holds one other than Unknown.
        """
        from moneta.domain.value_objects.outcome import Outcome

        return Outcome(self).__add__(other)

    def __sub__(self, other: object) -> Outcome:
        """Subtract an Amount or Outcome.

        Returns:
            Outcome with the difference, Mismatch if the currencies differ,
            or the right operand's error if it holds one other than Unknown.
        """
        from moneta.domain.value_objects.outcome import Outcome

        return Outcome(self).__sub__(other)

    def __truediv__(self, scalar: Scalar) -> Outcome:
        """Divide the quantity by a scalar.

        Returns:
            Outcome with the divided amount, or DivideByZero if scalar is zero.
        """
        from moneta.domain.value_objects.outcome import Outcome

        return Outcome(self).__truediv__(scalar)

    # -------------------------------------------------------------------------
    # Comparison Operations (Same Currency Only)
    # -------------------------------------------------------------------------

    def compare(self, other: Amount) -> Ordering | None:
        """Compare with another amount of the same currency.

        Args:
            other: Amount to compare against.

        Returns:
            Ordering of self relative to other, or None if the currencies
            differ (amounts of different currencies are incomparable).
        """
        if self.currency is not other.currency:
            return None
        if self.value < other.value:
            return Ordering.LESS
        if self.value > other.value:
            return Ordering.GREATER
        return Ordering.EQUAL

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self._ordering_with(other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self._ordering_with(other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self._ordering_with(other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self._ordering_with(other) is not Ordering.LESS

    def _ordering_with(self, other: Amount) -> Ordering:
        """Compare, raising if the amounts are incomparable.

        Raises:
            CurrencyOperationError: If currencies differ.
        """
        ordering = self.compare(other)
        if ordering is None:
            raise CurrencyOperationError(Mismatch(self.currency, other.currency))
        return ordering

    # -------------------------------------------------------------------------
    # String Representations
    # -------------------------------------------------------------------------

    def format(self, precision: int = DEFAULT_PRECISION) -> str:
        """Render as ``"<symbol> <value>"`` with ``precision`` fractional digits.

        Digits beyond the requested precision are dropped, not rounded.

        Args:
            precision: Number of fractional digits (default: 2).

        Returns:
            Formatted string like "€ 2.00".
        """
        if precision < 0:
            raise ValueError(f"precision must be >= 0, got: {precision}")
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, self.value.adjusted() + precision + 2)
            truncated = self.value.quantize(
                Decimal(1).scaleb(-precision), rounding=ROUND_DOWN
            )
        return f"{self.currency.symbol} {truncated:f}"

    def __format__(self, format_spec: str) -> str:
        """Support ``f"{amount}"``, ``f"{amount:.3}"`` and ``f"{amount:>12.2f}"``.

        Precision selects the fractional digits; fill, alignment and width
        pad the rendered ``"<symbol> <value>"`` string.
        """
        precision, pad = split_format_spec(format_spec)
        return format(self.format(precision), pad)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Amount(value={self.value!r}, currency={self.currency.code})"
