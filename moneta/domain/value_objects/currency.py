"""ISO 4217 currency catalog.

Each member carries a three-letter code, a display symbol and a human name.
Members are singletons, so currency equality is identity.

Usage:
    from moneta.domain.value_objects import Currency

    Currency.EUR.code      # "EUR"
    Currency.EUR.symbol    # "€"
    Currency.from_code("usd") is Currency.USD
"""

from enum import Enum
from typing import Self


class Currency(Enum):
    """Supported ISO 4217 currencies.

    Attributes:
        code: Three-letter ISO 4217 code (e.g., "USD").
        symbol: Display symbol used when rendering amounts (e.g., "$").
        full_name: Human-readable currency name.
    """

    # Major currencies
    USD = ("USD", "$", "US Dollar")
    EUR = ("EUR", "€", "Euro")
    GBP = ("GBP", "£", "British Pound")
    JPY = ("JPY", "¥", "Japanese Yen")
    CHF = ("CHF", "Fr", "Swiss Franc")
    CAD = ("CAD", "$", "Canadian Dollar")
    AUD = ("AUD", "$", "Australian Dollar")
    NZD = ("NZD", "$", "New Zealand Dollar")
    # Asian currencies
    CNY = ("CNY", "¥", "Chinese Yuan")
    HKD = ("HKD", "$", "Hong Kong Dollar")
    SGD = ("SGD", "$", "Singapore Dollar")
    KRW = ("KRW", "₩", "South Korean Won")
    INR = ("INR", "₹", "Indian Rupee")
    TWD = ("TWD", "$", "Taiwan Dollar")
    # European currencies
    SEK = ("SEK", "kr", "Swedish Krona")
    NOK = ("NOK", "kr", "Norwegian Krone")
    DKK = ("DKK", "kr", "Danish Krone")
    PLN = ("PLN", "zł", "Polish Zloty")
    CZK = ("CZK", "Kč", "Czech Koruna")
    # Americas
    MXN = ("MXN", "$", "Mexican Peso")
    BRL = ("BRL", "R$", "Brazilian Real")
    # Other
    ZAR = ("ZAR", "R", "South African Rand")
    RUB = ("RUB", "₽", "Russian Ruble")
    TRY = ("TRY", "₺", "Turkish Lira")

    def __init__(self, code: str, symbol: str, full_name: str) -> None:
        self.code = code
        self.symbol = symbol
        self.full_name = full_name

    @classmethod
    def from_code(cls, code: str) -> Self:
        """Look up a currency by its ISO 4217 code.

        Args:
            code: Currency code (case-insensitive, surrounding whitespace ignored).

        Returns:
            The matching Currency member.

        Raises:
            ValueError: If code is empty, not 3 characters, or not in the catalog.

        Example:
            >>> Currency.from_code("eur")
            <Currency.EUR: ('EUR', '€', 'Euro')>
            >>> Currency.from_code("XYZ")
            ValueError: Invalid currency code: XYZ
        """
        if not code or not isinstance(code, str):
            raise ValueError("Currency code cannot be empty")

        normalized = code.upper().strip()

        if len(normalized) != 3:
            raise ValueError(f"Currency code must be 3 characters: {code}")

        try:
            return cls[normalized]
        except KeyError:
            raise ValueError(f"Invalid currency code: {code}") from None

    def __str__(self) -> str:
        return self.code


# Codes of every supported currency
VALID_CURRENCIES: frozenset[str] = frozenset(currency.code for currency in Currency)
