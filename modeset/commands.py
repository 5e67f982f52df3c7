"""
Text commands for driving modes.

Parses strings such as "cycle", "set Acc" or "describe Melee Mode" and runs
the matching operation, so key bindings and typed commands can share one
entry point.
"""
import logging
from dataclasses import dataclass
from typing import Any

from .errors import UnknownCommandError
from .mode import Mode


logger = logging.getLogger(__name__)

# Operations that take no argument
NO_ARG_COMMANDS = frozenset({"cycle", "cycleback", "toggle", "reset"})

# Operations that require an argument
ARG_COMMANDS = frozenset({"set", "describe"})

COMMANDS = NO_ARG_COMMANDS | ARG_COMMANDS


@dataclass
class ParsedCommand:
    """Result of parsing a mode command."""
    name: str
    arg: str = ""
    raw: str = ""


def parse_command(text: str) -> ParsedCommand:
    """
    Parse a command string into an operation name and argument.

    The operation name is matched case-insensitively. Everything after the
    first run of whitespace is kept verbatim as the argument.

    Args:
        text: Raw command text, e.g. "Set acc"

    Returns:
        ParsedCommand with the lowercased operation name

    Raises:
        UnknownCommandError: If the text is empty, names no known
            operation, or is missing or carrying an unexpected argument
    """
    stripped = text.strip()
    if not stripped:
        raise UnknownCommandError("Empty mode command", text)

    parts = stripped.split(maxsplit=1)
    name = parts[0].lower()
    arg = parts[1] if len(parts) > 1 else ""

    if name not in COMMANDS:
        raise UnknownCommandError(
            f"Unknown mode command: {parts[0]}. "
            f"Available commands: {', '.join(sorted(COMMANDS))}",
            text,
        )
    if name in ARG_COMMANDS and not arg:
        raise UnknownCommandError(f"Mode command '{name}' needs an argument", text)
    if name in NO_ARG_COMMANDS and arg:
        raise UnknownCommandError(f"Mode command '{name}' takes no argument", text)

    return ParsedCommand(name=name, arg=arg, raw=text)


def apply_command(mode: Mode, text: str) -> Any:
    """
    Run a text command against a mode.

    Errors raised by the mode itself (for example toggling a list mode)
    propagate unchanged.

    Args:
        mode: The mode to operate on
        text: Command text accepted by parse_command()

    Returns:
        The mode's current value after the operation
    """
    command = parse_command(text)
    logger.debug(f"Applying mode command {command.name!r} with arg {command.arg!r}")

    if command.name == "cycle":
        return mode.cycle()
    if command.name == "cycleback":
        return mode.cycleback()
    if command.name == "toggle":
        return mode.toggle()
    if command.name == "reset":
        return mode.reset()
    if command.name == "set":
        return mode.set(command.arg)
    return mode.describe(command.arg)
