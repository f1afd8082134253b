from decimal import Decimal

import pytest

from currency_converter.utils.errors import ValidationError
from currency_converter.utils.validation import is_valid_amount_prefix, parse_amount


@pytest.mark.parametrize("candidate", ["", "0", "12", "12.", "12.5", ".", ".5", "007.250", "1.00"])
def test_accepts_amount_prefixes(candidate):
    assert is_valid_amount_prefix(candidate) is True


@pytest.mark.parametrize(
    "candidate",
    ["1.2.3", "-1", "-5", "+1", "1e5", "abc", "12.5a", " 1", "1 ", "1,000", "..", "1..", "١٢"],
)
def test_rejects_other_text(candidate):
    assert is_valid_amount_prefix(candidate) is False


def test_rejects_non_string():
    assert is_valid_amount_prefix(None) is False  # type: ignore[arg-type]


def test_parse_amount():
    assert parse_amount("12.5") == Decimal("12.5")
    assert parse_amount("12.") == Decimal("12")
    assert parse_amount(".5") == Decimal("0.5")


@pytest.mark.parametrize("text", ["", ".", "-1", "1.2.3"])
def test_parse_amount_rejects_incomplete(text):
    with pytest.raises(ValidationError):
        parse_amount(text)
