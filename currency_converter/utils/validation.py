"""Input validation utilities."""
from decimal import Decimal, InvalidOperation

from currency_converter.utils.errors import ValidationError

DIGITS = "0123456789"
DECIMAL_POINT = "."


def _skip_digits(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in DIGITS:
        pos += 1
    return pos


def is_valid_amount_prefix(candidate: str) -> bool:
    """
    Check whether text may appear in the amount field while typing.

    Grammar: ``digits? "."? digits?`` over ASCII digits, nothing else. This is
    a prefix check, so incomplete numbers such as ``""``, ``"12."`` and ``"."``
    are accepted.

    Args:
        candidate: Full text the field would hold after the keystroke

    Returns:
        True if the text is an acceptable (possibly incomplete) amount
    """
    if not isinstance(candidate, str):
        return False

    pos = _skip_digits(candidate, 0)
    if pos < len(candidate) and candidate[pos] == DECIMAL_POINT:
        pos = _skip_digits(candidate, pos + 1)
    return pos == len(candidate)


def parse_amount(text: str) -> Decimal:
    """
    Convert accepted amount text into a number.

    Raises:
        ValidationError: If the text is not a complete amount
    """
    if not is_valid_amount_prefix(text) or not any(ch in DIGITS for ch in text):
        raise ValidationError(f"Invalid amount: {text!r}")
    try:
        return Decimal(text)
    except InvalidOperation as e:
        raise ValidationError(f"Invalid amount: {text!r}") from e
