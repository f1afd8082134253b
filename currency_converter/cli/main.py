from __future__ import annotations

import asyncio
from typing import Optional

import typer
from rich.console import Console

from currency_converter.catalog import from_code
from currency_converter.config import Config, load_config, reset_config
from currency_converter.exchange import get_client
from currency_converter.exchange.base import BaseExchangeClient, Failed, Succeeded
from currency_converter.state.models import ConverterState, SelectFrom, SelectTo, SetAmount, SubmitConversion
from currency_converter.state.session import ConverterSession
from currency_converter.ui.tui.app import CurrencyConverterTUI
from currency_converter.ui.tui.display import create_currency_table, create_error_panel
from currency_converter.ui.tui.renderer import format_failure_reason, format_outcome
from currency_converter.utils.errors import ConfigurationError, ValidationError
from currency_converter.utils.logging import setup_logging
from currency_converter.utils.validation import parse_amount


app = typer.Typer(add_completion=False, help="Currency converter CLI")
console = Console()

EXIT_FAILED = 1
EXIT_REJECTED = 2


def _load(config_path: Optional[str], console_logging: Optional[bool] = None) -> Optional[Config]:
    if config_path:
        reset_config()
    try:
        return load_config(config_path, console_logging=console_logging)
    except ConfigurationError as e:
        if config_path:
            console.print(create_error_panel(str(e)))
            raise typer.Exit(code=EXIT_REJECTED)
        if console_logging is False:
            # No file to configure logging from; keep records off the terminal
            setup_logging(console=False)
        return None


def _client() -> BaseExchangeClient:
    return get_client()


async def _convert_once(client: BaseExchangeClient, amount: str, source: str, target: str) -> ConverterState:
    session = ConverterSession(client)
    # Source differs from target, so selecting it last never swaps the target away
    session.dispatch(SelectTo(from_code(target)))
    session.dispatch(SelectFrom(from_code(source)))
    session.dispatch(SetAmount(amount))
    session.dispatch(SubmitConversion())
    return await session.run_until_idle()


@app.command("convert")
def convert(
    amount: str = typer.Argument(..., help="Amount to convert, e.g. 100 or 12.50"),
    source: str = typer.Option("RUB", "--from", "-f", help="Source currency code"),
    target: str = typer.Option("USD", "--to", "-t", help="Target currency code"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
):
    """Convert an amount once and print the result."""

    _load(config_path)

    try:
        parse_amount(amount)
        from_code(source)
        from_code(target)
    except ValidationError as e:
        console.print(create_error_panel(str(e)))
        raise typer.Exit(code=EXIT_REJECTED)
    if source.strip().upper() == target.strip().upper():
        console.print(create_error_panel("Source and target currencies must differ"))
        raise typer.Exit(code=EXIT_REJECTED)

    state = asyncio.run(_convert_once(_client(), amount, source, target))
    outcome = state.outcome

    if isinstance(outcome, Succeeded):
        console.print(f"[bold green]{format_outcome(outcome)}[/]")
        return
    if isinstance(outcome, Failed):
        console.print(f"[bold red]{format_outcome(outcome)}[/] [dim]({format_failure_reason(outcome)})[/]")
    raise typer.Exit(code=EXIT_FAILED)


@app.command("currencies")
def currencies():
    """List supported currencies."""
    console.print(create_currency_table())


@app.command("tui")
def tui(
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
):
    """Start the interactive converter."""
    cfg = _load(config_path, console_logging=False)
    CurrencyConverterTUI(client=_client(), config=cfg, console=console).run()


if __name__ == "__main__":
    app()
