from __future__ import annotations

"""Formatting helpers for the TUI."""

from decimal import Decimal

from currency_converter.exchange.base import Failed, Succeeded
from currency_converter.state.models import ConversionOutcome, Pending
from currency_converter.utils.errors import FailureReason

from .config import FAILED_TEXT, LOADING_TEXT, THEME


REASON_LABELS = {
    FailureReason.TRANSPORT_FAILURE: "network error",
    FailureReason.DECODE_FAILURE: "unexpected response",
    FailureReason.REMOTE_REJECTED: "rejected by service",
}


def format_number(value: Decimal) -> str:
    """Plain notation without trailing zeros: 100, 1.35."""
    text = format(value.normalize(), "f")
    return "0" if text in ("-0", "") else text


def format_outcome(outcome: ConversionOutcome) -> str:
    """One-line text of the conversion outcome: '100 RUB = 1.35 USD'."""
    if isinstance(outcome, Pending):
        return LOADING_TEXT
    if isinstance(outcome, Succeeded):
        return (
            f"{format_number(outcome.requested_amount)} {outcome.from_currency.code} = "
            f"{format_number(outcome.converted_amount)} {outcome.to_currency.code}"
        )
    if isinstance(outcome, Failed):
        return FAILED_TEXT
    return ""


def format_failure_reason(outcome: Failed) -> str:
    label = REASON_LABELS.get(outcome.reason, outcome.reason.value)
    if outcome.detail:
        return f"{label}: {outcome.detail}"
    return label


def get_color_for_outcome(outcome: ConversionOutcome) -> str:
    if isinstance(outcome, Succeeded):
        return THEME.success
    if isinstance(outcome, Failed):
        return THEME.error
    if isinstance(outcome, Pending):
        return THEME.warning
    return THEME.primary
