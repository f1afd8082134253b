from __future__ import annotations

"""Command parsing for the TUI.

Each line typed at the prompt becomes either a converter event or a local
command (help, list, quit). Nothing here touches the converter state.
"""

from dataclasses import dataclass
from typing import Optional

from prompt_toolkit.completion import WordCompleter

from currency_converter.catalog import all_currencies, from_code
from currency_converter.state.models import ConverterEvent, SelectFrom, SelectTo, SetAmount, SubmitConversion
from currency_converter.utils.errors import ValidationError


QUIT_COMMANDS = {"quit", "exit", "q"}
CONVERT_COMMANDS = {"convert", "c"}


@dataclass(frozen=True)
class ParsedCommand:
    name: str
    event: Optional[ConverterEvent] = None
    error: Optional[str] = None


def parse_command(line: str) -> ParsedCommand:
    text = line.strip()
    if not text:
        return ParsedCommand("noop")

    head, _, rest = text.partition(" ")
    command = head.lower()
    arg = rest.strip()

    if command in QUIT_COMMANDS:
        return ParsedCommand("quit")
    if command in ("help", "?"):
        return ParsedCommand("help")
    if command in ("list", "currencies"):
        return ParsedCommand("list")
    if command in CONVERT_COMMANDS:
        return ParsedCommand("convert", event=SubmitConversion())
    if command == "amount":
        # Amount text is passed through as typed; the state machine decides
        return ParsedCommand("amount", event=SetAmount(arg))
    if command in ("from", "to"):
        if not arg:
            return ParsedCommand(command, error=f"Usage: {command} <code>")
        try:
            currency = from_code(arg)
        except ValidationError as e:
            return ParsedCommand(command, error=str(e))
        event = SelectFrom(currency) if command == "from" else SelectTo(currency)
        return ParsedCommand(command, event=event)

    return ParsedCommand("unknown", error=f"Unknown command: {head}. Type 'help' for commands.")


def create_completer() -> WordCompleter:
    words = ["amount", "from", "to", "convert", "list", "help", "quit"]
    words.extend(currency.code for currency in all_currencies())
    return WordCompleter(words, ignore_case=True)
