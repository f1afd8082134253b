from __future__ import annotations

import asyncio
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.patch_stdout import patch_stdout
from rich.console import Console

from currency_converter.config import Config
from currency_converter.exchange import ApiLayerClient
from currency_converter.exchange.base import BaseExchangeClient
from currency_converter.state.models import ConverterState, SetAmount
from currency_converter.state.session import ConverterSession
from currency_converter.utils.logging import get_logger

from .config import THEME
from .display import (
    create_currency_table,
    create_error_panel,
    create_help_table,
    create_state_panel,
    create_welcome_panel,
)
from .input_handler import create_completer, parse_command


logger = get_logger(__name__)

DEFAULT_PROMPT = "> "


class CurrencyConverterTUI:
    """Terminal front end: renders session state and forwards typed commands as events."""

    def __init__(
        self,
        client: Optional[BaseExchangeClient] = None,
        config: Optional[Config] = None,
        console: Optional[Console] = None,
    ) -> None:
        self.client = client or ApiLayerClient()
        self.console = console or Console()
        self.prompt_text = config.get("ui.prompt", DEFAULT_PROMPT) if config else DEFAULT_PROMPT
        self.session: Optional[ConverterSession] = None
        self._last_rendered: Optional[ConverterState] = None

    def run(self) -> None:
        """Main entry point (sync)."""
        asyncio.run(self.start())

    async def start(self) -> None:
        self.session = ConverterSession(self.client)
        self.session.subscribe(self.render)
        runner = asyncio.create_task(self.session.run())

        self.console.print(create_welcome_panel())
        self.render(self.session.state)

        prompt_session = PromptSession(completer=create_completer())
        try:
            with patch_stdout():
                while True:
                    try:
                        line = await prompt_session.prompt_async(self.prompt_text)
                    except KeyboardInterrupt:
                        self.console.print("[yellow]Use 'quit' to leave the converter[/]")
                        continue
                    except EOFError:
                        break
                    if not self.handle_line(line):
                        break
        finally:
            self.session.stop()
            await runner
            await self.session.aclose()
            self.console.print("[bold green]Goodbye![/]")

    def handle_line(self, line: str) -> bool:
        """Act on one typed line; returns False when the user wants to leave."""
        parsed = parse_command(line)
        if parsed.name == "quit":
            return False
        if parsed.error:
            self.console.print(create_error_panel(parsed.error))
            return True
        if parsed.name == "help":
            self.console.print(create_help_table())
        elif parsed.name == "list":
            self.console.print(create_currency_table())
        elif parsed.event is not None:
            self.session.dispatch(parsed.event)
        return True

    def render(self, state: ConverterState, event: object = None) -> None:
        """Print the converter panel whenever the projected state changes."""
        if isinstance(event, SetAmount) and state.form.amount != event.text:
            self.console.print(f"[{THEME.warning}]Ignored amount {event.text!r}: digits and one '.' only[/]")
        if state == self._last_rendered:
            return
        self._last_rendered = state
        self.console.print(create_state_panel(state))

