from __future__ import annotations

"""TUI configuration and style constants."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    primary: str = "cyan"
    success: str = "green"
    warning: str = "yellow"
    error: str = "red"
    neutral: str = "white"
    muted: str = "dim"


@dataclass(frozen=True)
class BoxStyles:
    welcome: str = "DOUBLE"
    panel: str = "ROUNDED"
    error: str = "HEAVY"


THEME = Theme()
BOX = BoxStyles()

LOADING_TEXT = "Loading..."
FAILED_TEXT = "Conversion failed"

WELCOME_TEXT = (
    """
[bold cyan]Currency converter[/bold cyan]
Convert an amount between currencies using live exchange rates.

Type [bold]help[/bold] to see the available commands.
    """
    .strip()
)

HELP_ROWS = (
    ("amount <value>", "Set the amount, e.g. amount 12.50"),
    ("from <code>", "Select the source currency, e.g. from EUR"),
    ("to <code>", "Select the target currency, e.g. to USD"),
    ("convert", "Fetch the converted amount"),
    ("list", "Show supported currencies"),
    ("help", "Show this help"),
    ("quit", "Leave the converter"),
)
