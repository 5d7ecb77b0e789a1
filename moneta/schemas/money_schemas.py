"""Serialization schemas for amounts, currency errors and outcomes.

Pydantic schemas converting domain values to and from JSON-compatible records:

    Amount         {"value": "10.50", "currency": "EUR"}
    CurrencyError  "Unknown" | "DivideByZero" | {"Mismatch": ["EUR", "USD"]}
    Outcome        {"Ok": <Amount record>} | {"Err": <CurrencyError form>}

Decimal quantities are written as strings so no precision is lost. Loading
malformed data raises ``pydantic.ValidationError`` after a warning is logged
through the container logger (``moneta.core.container.get_logger``). Keys must
use the exact tags above; lower-case spellings are rejected.

Usage:
    from moneta.schemas import dump_amount, load_amount

    record = dump_amount(amount)          # {"value": "1", "currency": "EUR"}
    assert load_amount(record) == amount
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Literal, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    ValidationError,
    field_validator,
    model_validator,
)

from moneta.core.config import get_settings
from moneta.core.container import get_logger
from moneta.core.result import Failure, Success
from moneta.domain.errors.currency_error import (
    CurrencyError,
    DivideByZero,
    Mismatch,
    Unknown,
)
from moneta.domain.value_objects.amount import Amount
from moneta.domain.value_objects.currency import Currency
from moneta.domain.value_objects.outcome import Outcome


def _validate_code(code: str) -> str:
    return Currency.from_code(code).code


# =============================================================================
# Amount
# =============================================================================


class AmountSchema(BaseModel):
    """Serialized Amount.

    Attributes:
        value: Decimal quantity as a string (numbers are accepted on input).
        currency: ISO 4217 currency code.
    """

    value: str = Field(..., description="Decimal quantity", examples=["10.50"])
    currency: str = Field(..., description="ISO 4217 currency code", examples=["EUR"])

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v: Any) -> Any:
        """Accept JSON numbers and Decimals by rendering them as strings."""
        if isinstance(v, (int, float, Decimal)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        """Ensure value parses as a finite decimal.

        Raises:
            ValueError: If value is not a finite decimal number.
        """
        try:
            parsed = Decimal(v)
        except InvalidOperation:
            raise ValueError(f"value is not a decimal number: {v!r}") from None
        if not parsed.is_finite():
            raise ValueError("value cannot be NaN or Infinite")
        return v.strip()

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """Normalize and validate the currency code."""
        return _validate_code(v)

    @classmethod
    def from_domain(cls, amount: Amount) -> Self:
        """Build the schema from an Amount."""
        return cls(value=str(amount.value), currency=amount.currency.code)

    def to_domain(self) -> Amount:
        """Build the Amount described by this schema."""
        return Amount(Decimal(self.value), Currency.from_code(self.currency))


# =============================================================================
# CurrencyError
# =============================================================================


class MismatchSchema(BaseModel):
    """Serialized Mismatch: ``{"Mismatch": ["<code1>", "<code2>"]}``."""

    model_config = ConfigDict(extra="forbid")

    mismatch: tuple[str, str] = Field(..., alias="Mismatch")

    @field_validator("mismatch")
    @classmethod
    def validate_codes(cls, v: tuple[str, str]) -> tuple[str, str]:
        """Normalize and validate both currency codes, keeping their order."""
        return (_validate_code(v[0]), _validate_code(v[1]))


class CurrencyErrorSchema(RootModel[Literal["Unknown", "DivideByZero"] | MismatchSchema]):
    """Serialized CurrencyError: a bare tag or a single-key Mismatch record."""

    @classmethod
    def from_domain(cls, error: CurrencyError) -> Self:
        """Build the schema from a CurrencyError.

        Raises:
            TypeError: If error is not one of the known variants.
        """
        match error:
            case Unknown():
                return cls("Unknown")
            case DivideByZero():
                return cls("DivideByZero")
            case Mismatch(first, second):
                return cls(MismatchSchema(Mismatch=(first.code, second.code)))
            case _:
                raise TypeError(f"Unsupported currency error: {error!r}")

    def to_domain(self) -> CurrencyError:
        """Build the CurrencyError described by this schema."""
        match self.root:
            case "Unknown":
                return Unknown()
            case "DivideByZero":
                return DivideByZero()
            case MismatchSchema(mismatch=(first, second)):
                return Mismatch(Currency.from_code(first), Currency.from_code(second))


# =============================================================================
# Outcome
# =============================================================================


class OutcomeSchema(BaseModel):
    """Serialized Outcome: exactly one of ``Ok`` or ``Err``."""

    model_config = ConfigDict(extra="forbid")

    ok: AmountSchema | None = Field(None, alias="Ok")
    err: CurrencyErrorSchema | None = Field(None, alias="Err")

    @model_validator(mode="after")
    def validate_exactly_one(self) -> Self:
        """Ensure the record holds either an amount or an error, not both."""
        if (self.ok is None) == (self.err is None):
            raise ValueError("outcome must hold exactly one of 'Ok' or 'Err'")
        return self

    @classmethod
    def from_domain(cls, outcome: Outcome) -> Self:
        """Build the schema from an Outcome."""
        match outcome.into_inner():
            case Success(value=amount):
                return cls(Ok=AmountSchema.from_domain(amount))
            case Failure(error=error):
                return cls(Err=CurrencyErrorSchema.from_domain(error))

    def to_domain(self) -> Outcome:
        """Build the Outcome described by this schema."""
        if self.ok is not None:
            return Outcome(self.ok.to_domain())
        return Outcome(self.err.to_domain())


# =============================================================================
# Module API
# =============================================================================


def dump_amount(amount: Amount) -> dict[str, str]:
    """Serialize an Amount to ``{"value": ..., "currency": ...}``."""
    return AmountSchema.from_domain(amount).model_dump(mode="json")


def load_amount(data: Any) -> Amount:
    """Deserialize an Amount record.

    Raises:
        ValidationError: If data is not a valid Amount record.
    """
    try:
        schema = AmountSchema.model_validate(data)
    except ValidationError as e:
        get_logger().warning("amount_decode_failed", error_count=e.error_count())
        raise
    return schema.to_domain()


def dump_currency_error(error: CurrencyError) -> str | dict[str, list[str]]:
    """Serialize a CurrencyError to its tag or Mismatch record."""
    return CurrencyErrorSchema.from_domain(error).model_dump(mode="json", by_alias=True)


def load_currency_error(data: Any) -> CurrencyError:
    """Deserialize a CurrencyError.

    Raises:
        ValidationError: If data is not a valid CurrencyError form.
    """
    try:
        schema = CurrencyErrorSchema.model_validate(data)
    except ValidationError as e:
        get_logger().warning(
            "currency_error_decode_failed", error_count=e.error_count()
        )
        raise
    return schema.to_domain()


def dump_outcome(outcome: Outcome) -> dict[str, Any]:
    """Serialize an Outcome to ``{"Ok": ...}`` or ``{"Err": ...}``."""
    return OutcomeSchema.from_domain(outcome).model_dump(
        mode="json", by_alias=True, exclude_none=True
    )


def load_outcome(data: Any) -> Outcome:
    """Deserialize an Outcome record.

    Raises:
        ValidationError: If data is not a valid Outcome record.
    """
    try:
        schema = OutcomeSchema.model_validate(data)
    except ValidationError as e:
        get_logger().warning("outcome_decode_failed", error_count=e.error_count())
        raise
    return schema.to_domain()


def display(value: Amount | Outcome, precision: int | None = None) -> str:
    """Render an Amount or Outcome for humans.

    Args:
        value: Amount or Outcome to render.
        precision: Fractional digits; defaults to ``Settings.display_precision``.

    Returns:
        String like "€ 2.00", or the error text for a failed outcome.
    """
    if precision is None:
        precision = get_settings().display_precision
    return format(value, f".{precision}")
