"""Serialization schemas.

Usage:
    from moneta.schemas import dump_outcome, load_outcome
"""

from moneta.schemas.money_schemas import (
    AmountSchema,
    CurrencyErrorSchema,
    MismatchSchema,
    OutcomeSchema,
    display,
    dump_amount,
    dump_currency_error,
    dump_outcome,
    load_amount,
    load_currency_error,
    load_outcome,
)

__all__ = [
    "AmountSchema",
    "CurrencyErrorSchema",
    "MismatchSchema",
    "OutcomeSchema",
    "display",
    "dump_amount",
    "dump_currency_error",
    "dump_outcome",
    "load_amount",
    "load_currency_error",
    "load_outcome",
]
