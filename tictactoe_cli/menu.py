"""
Start menu: reads commands until the user starts a game or quits.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from rich.console import Console

from tictactoe_cli.types import PlayerType

logger = logging.getLogger(__name__)

USAGE = "Type 'start [] []' where [] can be 'Human', 'Easy', 'Medium', and 'Hard'."


class CommandKind(Enum):
    HELP = "help"
    EXIT = "exit"
    START = "start"
    INVALID = "invalid"


_COMMANDS: dict[str, CommandKind] = {
    "help": CommandKind.HELP,
    "menu": CommandKind.HELP,
    "?": CommandKind.HELP,
    "exit": CommandKind.EXIT,
    "quit": CommandKind.EXIT,
    "stop": CommandKind.EXIT,
    "start": CommandKind.START,
}


@dataclass(frozen=True)
class MenuCommand:
    """A parsed line of menu input."""

    kind: CommandKind
    players: tuple[PlayerType, PlayerType] | None = None


def parse_command(line: str) -> MenuCommand:
    """
    Parse one line of menu input.

    Anything that is not a recognised command, or a start command without
    two valid player types, comes back as INVALID.
    """
    words = line.split()
    if not words:
        return MenuCommand(CommandKind.INVALID)

    kind = _COMMANDS.get(words[0].lower(), CommandKind.INVALID)
    if kind != CommandKind.START:
        return MenuCommand(kind)

    if len(words) < 3:
        return MenuCommand(CommandKind.INVALID)
    try:
        first = PlayerType.from_string(words[1])
        second = PlayerType.from_string(words[2])
    except ValueError:
        return MenuCommand(CommandKind.INVALID)
    return MenuCommand(CommandKind.START, (first, second))


class Menu:
    """Interactive menu on the console."""

    def __init__(self, console: Console, read_line: Callable[[], str] = input):
        self.console = console
        self._read_line = read_line

    def print_usage(self) -> None:
        self.console.print(USAGE, markup=False, highlight=False)

    def prompt(self) -> tuple[PlayerType, PlayerType]:
        """
        Block until a valid start command is entered.

        Exits the process with status 0 on an exit command or end of input.
        """
        while True:
            self.print_usage()
            self.console.print("Input command:", highlight=False)
            try:
                line = self._read_line()
            except EOFError:
                line = "exit"

            command = parse_command(line)
            if command.kind == CommandKind.HELP:
                self.print_usage()
            elif command.kind == CommandKind.EXIT:
                logger.info("Exit requested from menu")
                sys.exit(0)
            elif command.kind == CommandKind.START and command.players is not None:
                return command.players
            else:
                logger.debug("Rejected menu input: %r", line)
