"""Pure transition function of the converter."""
from __future__ import annotations

import uuid
from dataclasses import replace
from typing import Optional, Tuple

from currency_converter.catalog import Currency
from currency_converter.exchange.base import ConversionRequest, Failed, Succeeded
from currency_converter.utils.errors import FailureReason
from currency_converter.utils.logging import get_logger
from currency_converter.utils.validation import is_valid_amount_prefix

from .models import (
    ConverterState,
    FormState,
    Pending,
    Phase,
    ReceiveResult,
    RequestConversion,
    SelectFrom,
    SelectTo,
    SetAmount,
    SubmitConversion,
)

logger = get_logger(__name__)

Transition = Tuple[ConverterState, Optional[RequestConversion]]


def initial_state() -> ConverterState:
    return ConverterState()


def select_from(form: FormState, currency: Currency) -> FormState:
    """Pick the source currency, swapping when it collides with the target."""
    selected_to = form.selected_from if currency == form.selected_to else form.selected_to
    return replace(form, selected_from=currency, selected_to=selected_to)


def select_to(form: FormState, currency: Currency) -> FormState:
    """Pick the target currency, swapping when it collides with the source."""
    selected_from = form.selected_to if currency == form.selected_from else form.selected_from
    return replace(form, selected_from=selected_from, selected_to=currency)


def transition(state: ConverterState, event: object) -> Transition:
    """
    Apply one event to a state snapshot.

    Returns the next snapshot and, for a submission, the request effect the
    caller has to run. Never raises: malformed events leave the state as is.
    """
    if isinstance(event, SetAmount):
        if not is_valid_amount_prefix(event.text):
            logger.debug(f"Rejected amount input: {event.text!r}")
            return state, None
        return replace(state, form=replace(state.form, amount=event.text)), None

    if isinstance(event, (SelectFrom, SelectTo)):
        if not isinstance(event.currency, Currency):
            logger.warning(f"Ignoring selection of unknown currency: {event.currency!r}")
            return state, None
        pick = select_from if isinstance(event, SelectFrom) else select_to
        return replace(state, form=pick(state.form, event.currency)), None

    if isinstance(event, SubmitConversion):
        form = state.form
        effect = RequestConversion(
            request=ConversionRequest(
                from_code=form.selected_from.code,
                to_code=form.selected_to.code,
                amount=form.amount,
            ),
            correlation_id=str(uuid.uuid4()),
        )
        if state.is_pending:
            # Earlier request is not cancelled; whichever result arrives last wins
            logger.info("Submitting while a conversion is still pending", extra={"correlation_id": effect.correlation_id})
        return replace(state, phase=Phase.PENDING, outcome=Pending()), effect

    if isinstance(event, ReceiveResult):
        result = event.result
        if not isinstance(result, (Succeeded, Failed)):
            logger.error(
                f"Unexpected conversion result: {result!r}",
                extra={"correlation_id": event.correlation_id},
            )
            result = Failed(reason=FailureReason.DECODE_FAILURE, detail=f"Unexpected result: {result!r}")
        return replace(state, phase=Phase.IDLE, outcome=result), None

    logger.warning(f"Ignoring unknown event: {event!r}")
    return state, None
