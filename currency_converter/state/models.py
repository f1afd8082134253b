from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from currency_converter.catalog import Currency
from currency_converter.exchange.base import ConversionRequest, Failed, Succeeded

DEFAULT_AMOUNT = "1.00"
DEFAULT_FROM = Currency.RUB
DEFAULT_TO = Currency.USD


class Phase(Enum):
    """Whether a conversion request is in flight."""

    IDLE = "idle"
    PENDING = "pending"


@dataclass(frozen=True)
class Idle:
    """No conversion has been attempted yet."""


@dataclass(frozen=True)
class Pending:
    """A conversion request is outstanding."""


ConversionOutcome = Union[Idle, Pending, Succeeded, Failed]


@dataclass(frozen=True)
class FormState:
    """User-editable part of the converter."""

    amount: str = DEFAULT_AMOUNT
    selected_from: Currency = DEFAULT_FROM
    selected_to: Currency = DEFAULT_TO


@dataclass(frozen=True)
class ConverterState:
    """Snapshot of everything the renderer projects."""

    form: FormState = field(default_factory=FormState)
    phase: Phase = Phase.IDLE
    outcome: ConversionOutcome = field(default_factory=Idle)

    @property
    def is_pending(self) -> bool:
        return self.phase == Phase.PENDING


# Events


@dataclass(frozen=True)
class SetAmount:
    text: str


@dataclass(frozen=True)
class SelectFrom:
    currency: Currency


@dataclass(frozen=True)
class SelectTo:
    currency: Currency


@dataclass(frozen=True)
class SubmitConversion:
    pass


@dataclass(frozen=True)
class ReceiveResult:
    result: Any  # Succeeded | Failed from the client; anything else is absorbed as a decode failure
    correlation_id: Optional[str] = None


ConverterEvent = Union[SetAmount, SelectFrom, SelectTo, SubmitConversion, ReceiveResult]


# Effects


@dataclass(frozen=True)
class RequestConversion:
    """Ask the session to call the exchange client."""

    request: ConversionRequest
    correlation_id: str
