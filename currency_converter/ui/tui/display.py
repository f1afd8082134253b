from __future__ import annotations

"""Rich display components for the TUI."""

from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from currency_converter.catalog import all_currencies
from currency_converter.exchange.base import Failed
from currency_converter.state.models import ConversionOutcome, ConverterState, FormState

from .config import BOX, HELP_ROWS, THEME, WELCOME_TEXT
from .renderer import format_failure_reason, format_outcome, get_color_for_outcome


def create_welcome_panel() -> Panel:
    return Panel(WELCOME_TEXT, title="Welcome", border_style=THEME.primary, box=getattr(box, BOX.welcome))


def create_form_table(form: FormState) -> Table:
    table = Table(box=box.SIMPLE, show_header=True, header_style=f"{THEME.primary} bold")
    table.add_column("Amount")
    table.add_column("From")
    table.add_column("To")
    table.add_row(form.amount or "—", form.selected_from.label, form.selected_to.label)
    return table


def create_outcome_text(outcome: ConversionOutcome) -> Text:
    text = Text(format_outcome(outcome), style=f"bold {get_color_for_outcome(outcome)}")
    if isinstance(outcome, Failed):
        text.append(f"\n{format_failure_reason(outcome)}", style=THEME.muted)
    return text


def create_state_panel(state: ConverterState) -> Panel:
    """Whole converter: form selections above, last outcome below."""
    body = Group(create_form_table(state.form), create_outcome_text(state.outcome))
    return Panel(
        body,
        title="Currency converter",
        border_style=get_color_for_outcome(state.outcome),
        box=getattr(box, BOX.panel),
    )


def create_currency_table() -> Table:
    table = Table(title="Currencies", box=box.SIMPLE)
    table.add_column("Code", style=f"{THEME.primary} bold", width=6)
    table.add_column("Name", style=THEME.neutral)
    for currency in all_currencies():
        table.add_row(currency.code, currency.label.split(" - ", 1)[-1])
    return table


def create_help_table() -> Table:
    table = Table(title="Commands", box=box.SIMPLE, show_header=False)
    table.add_column("Command", style=f"{THEME.primary} bold", width=18)
    table.add_column("Description", style=THEME.neutral)
    for command, description in HELP_ROWS:
        table.add_row(command, description)
    return table


def create_error_panel(message: str) -> Panel:
    return Panel(f"[bold {THEME.error}]Error:[/] {message}", border_style=THEME.error, box=getattr(box, BOX.error))
