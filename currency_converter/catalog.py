"""Fixed catalog of supported currencies."""
from __future__ import annotations

from enum import Enum
from typing import Tuple

from currency_converter.utils.errors import ConfigurationError, ValidationError

CODE_LENGTH = 3


class Currency(Enum):
    """Supported currencies; each value is the display label."""

    USD = "USD - US Dollar"
    EUR = "EUR - Euro"
    RUB = "RUB - Russian Ruble"
    GBP = "GBP - British Pound"
    CAD = "CAD - Canadian Dollar"
    AUD = "AUD - Australian Dollar"
    JPY = "JPY - Japanese Yen"
    INR = "INR - Indian Rupee"
    NZD = "NZD - New Zealand Dollar"
    CHF = "CHF - Swiss Franc"

    @property
    def label(self) -> str:
        return self.value

    @property
    def code(self) -> str:
        return currency_code(self.value)

    def __str__(self) -> str:
        return self.value


def _is_code(text: str) -> bool:
    return len(text) == CODE_LENGTH and all("A" <= ch <= "Z" for ch in text)


def currency_code(label: str) -> str:
    """Extract the leading 3-letter uppercase code from a display label."""
    prefix = label[:CODE_LENGTH]
    if not _is_code(prefix):
        raise ValidationError(f"Label does not start with a currency code: {label!r}")
    return prefix


def all_currencies() -> Tuple[Currency, ...]:
    """All supported currencies in display order."""
    return tuple(Currency)


def code(currency: Currency) -> str:
    return currency.code


def label(currency: Currency) -> str:
    return currency.label


def from_code(text: str) -> Currency:
    """
    Look up a currency by its 3-letter code (case-insensitive).

    Raises:
        ValidationError: If the code is not in the catalog
    """
    wanted = (text or "").strip().upper()
    for currency in Currency:
        if currency.code == wanted:
            return currency
    raise ValidationError(
        f"Unsupported currency: {text!r}. Expected one of {[c.code for c in Currency]}"
    )


def _check_catalog() -> None:
    seen = set()
    for currency in Currency:
        try:
            value = currency.code
        except ValidationError as e:
            raise ConfigurationError(f"Currency {currency.name} has no valid code") from e
        if value != currency.name:
            raise ConfigurationError(f"Currency {currency.name} is labelled with code {value}")
        if value in seen:
            raise ConfigurationError(f"Duplicate currency code: {value}")
        seen.add(value)


_check_catalog()
