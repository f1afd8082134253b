"""Converter state machine: snapshot models, transition function and session."""

from .machine import initial_state, transition
from .models import (
    ConversionOutcome,
    ConverterEvent,
    ConverterState,
    FormState,
    Idle,
    Pending,
    Phase,
    ReceiveResult,
    RequestConversion,
    SelectFrom,
    SelectTo,
    SetAmount,
    SubmitConversion,
)
from .session import ConverterSession

__all__ = [
    "ConversionOutcome",
    "ConverterEvent",
    "ConverterSession",
    "ConverterState",
    "FormState",
    "Idle",
    "Pending",
    "Phase",
    "ReceiveResult",
    "RequestConversion",
    "SelectFrom",
    "SelectTo",
    "SetAmount",
    "SubmitConversion",
    "initial_state",
    "transition",
]
