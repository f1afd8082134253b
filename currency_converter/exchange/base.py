"""Exchange client base class and data contracts."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from currency_converter.catalog import Currency
from currency_converter.utils.errors import FailureReason


@dataclass(frozen=True)
class ConversionRequest:
    """One outbound conversion call, built from the current form."""

    from_code: str
    to_code: str
    amount: str  # sent verbatim, never re-formatted


@dataclass(frozen=True)
class Succeeded:
    """Service echoed the query and returned a converted amount."""

    requested_amount: Decimal
    from_currency: Currency
    to_currency: Currency
    converted_amount: Decimal


@dataclass(frozen=True)
class Failed:
    """Conversion did not produce a result."""

    reason: FailureReason
    detail: str = ""


ConversionResult = Union[Succeeded, Failed]


class BaseExchangeClient(ABC):
    """Abstract base class for exchange-rate conversion clients."""

    NAME: str = "base"

    @abstractmethod
    async def convert(self, from_code: str, to_code: str, amount: str) -> ConversionResult:
        """Convert ``amount`` and report the outcome as data; must not raise."""

    async def execute(self, request: ConversionRequest) -> ConversionResult:
        return await self.convert(request.from_code, request.to_code, request.amount)
