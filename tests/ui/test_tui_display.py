from __future__ import annotations

from decimal import Decimal

from rich.console import Console

from currency_converter.catalog import Currency
from currency_converter.exchange.base import Failed, Succeeded
from currency_converter.state import ConverterState, Idle, Pending, initial_state
from currency_converter.ui.tui.display import (
    create_currency_table,
    create_help_table,
    create_state_panel,
    create_welcome_panel,
)
from currency_converter.ui.tui.config import THEME
from currency_converter.ui.tui.renderer import (
    format_failure_reason,
    format_number,
    format_outcome,
    get_color_for_outcome,
)
from currency_converter.utils.errors import FailureReason


def render_text(renderable) -> str:
    console = Console(record=True, width=120)
    console.print(renderable)
    return console.export_text()


def test_format_outcome_success_matches_display_line():
    outcome = Succeeded(Decimal("100"), Currency.RUB, Currency.USD, Decimal("1.35"))

    assert format_outcome(outcome) == "100 RUB = 1.35 USD"


def test_format_outcome_states():
    assert format_outcome(Idle()) == ""
    assert format_outcome(Pending()) == "Loading..."
    assert format_outcome(Failed(reason=FailureReason.DECODE_FAILURE)) == "Conversion failed"


def test_format_number_drops_trailing_zeros():
    assert format_number(Decimal("1.00")) == "1"
    assert format_number(Decimal("1500")) == "1500"
    assert format_number(Decimal("0.0135000")) == "0.0135"


def test_failure_reason_is_visible_for_diagnostics():
    failure = Failed(reason=FailureReason.REMOTE_REJECTED, detail="invalid key")

    assert format_failure_reason(failure) == "rejected by service: invalid key"


def test_welcome_panel_renderable():
    panel = create_welcome_panel()
    assert hasattr(panel, "__rich_console__")


def test_state_panel_shows_form_and_outcome():
    state = ConverterState(outcome=Succeeded(Decimal("100"), Currency.RUB, Currency.USD, Decimal("1.35")))
    text = render_text(create_state_panel(state))

    assert "1.00" in text
    assert "RUB - Russian Ruble" in text
    assert "USD - US Dollar" in text
    assert "100 RUB = 1.35 USD" in text


def test_state_panel_shows_failure_reason():
    state = ConverterState(outcome=Failed(reason=FailureReason.TRANSPORT_FAILURE, detail="timed out"))
    text = render_text(create_state_panel(state))

    assert "Conversion failed" in text
    assert "network error: timed out" in text


def test_currency_table_lists_catalog():
    table = create_currency_table()
    assert table.row_count == 10
    assert "Swiss Franc" in render_text(table)


def test_help_table_lists_commands():
    assert "convert" in render_text(create_help_table())


def test_initial_panel_has_no_outcome_line():
    text = render_text(create_state_panel(initial_state()))
    assert "Loading" not in text


def test_outcome_colours_come_from_theme():
    success = Succeeded(Decimal("1"), Currency.RUB, Currency.USD, Decimal("0.01"))
    failure = Failed(reason=FailureReason.DECODE_FAILURE)

    assert get_color_for_outcome(success) == THEME.success
    assert get_color_for_outcome(failure) == THEME.error
    assert get_color_for_outcome(Pending()) == THEME.warning
    assert get_color_for_outcome(Idle()) == THEME.primary
