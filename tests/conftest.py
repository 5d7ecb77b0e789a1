"""Pytest configuration and shared test helpers.

Helpers build domain values tersely so that operator tables read like the
rules they test:

    assert eur(3) + outcome(Unknown()) == eur(3)
"""

from decimal import Decimal

import pytest

from moneta.core.config import get_settings
from moneta.core.container import get_logger
from moneta.domain.errors import CurrencyError
from moneta.domain.value_objects import Amount, Currency, Outcome


def eur(value: str | int | Decimal) -> Amount:
    """Helper to create a EUR Amount for testing."""
    return Amount(Decimal(str(value)), Currency.EUR)


def usd(value: str | int | Decimal) -> Amount:
    """Helper to create a USD Amount for testing."""
    return Amount(Decimal(str(value)), Currency.USD)


def dec(value: str | int) -> Decimal:
    """Helper to create a Decimal from its exact textual form."""
    return Decimal(str(value))


def outcome(value: Amount | CurrencyError) -> Outcome:
    """Helper to wrap an Amount or CurrencyError in an Outcome."""
    return Outcome(value)


@pytest.fixture(autouse=True)
def clear_cached_singletons():
    """Reset cached settings and logger so environment patches take effect."""
    get_settings.cache_clear()
    get_logger.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()
