"""Custom exception classes for the Currency Converter."""
from enum import Enum


class FailureReason(Enum):
    """Why a conversion attempt ended in a failure."""

    TRANSPORT_FAILURE = "transport_failure"
    DECODE_FAILURE = "decode_failure"
    REMOTE_REJECTED = "remote_rejected"


class CurrencyConverterError(Exception):
    """Base exception for all Currency Converter errors."""
    pass


class ConfigurationError(CurrencyConverterError):
    """Raised when there's a configuration error."""
    pass


class ValidationError(CurrencyConverterError):
    """Raised when data validation fails."""
    pass


class ExchangeClientError(CurrencyConverterError):
    """Base exception for exchange client errors."""

    reason: FailureReason = FailureReason.TRANSPORT_FAILURE


class TransportError(ExchangeClientError):
    """Raised when the remote service cannot be reached."""

    reason = FailureReason.TRANSPORT_FAILURE


class DecodeError(ExchangeClientError):
    """Raised when a response body does not match the expected schema."""

    reason = FailureReason.DECODE_FAILURE


class RemoteRejectedError(ExchangeClientError):
    """Raised when the remote service answers with success=false."""

    reason = FailureReason.REMOTE_REJECTED
