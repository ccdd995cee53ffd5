"""
Text rendering for the console.
"""

from __future__ import annotations

from tictactoe_cli.board import Board
from tictactoe_cli.types import GameOutcome, Mark

SEPARATOR = "+-+-+-+"


def render_board(board: Board) -> str:
    """
    Draw the board as a bordered grid.

    Row 2 is printed first so that (0, 0) ends up bottom-left:

        +-+-+-+
        |O| | |
        +-+-+-+
        | |X| |
        +-+-+-+
        |X| |O|
        +-+-+-+
    """
    lines = [SEPARATOR]
    for row in reversed(range(Board.SIZE)):
        symbols = "|".join(board.get(col, row).symbol for col in range(Board.SIZE))
        lines.append(f"|{symbols}|")
        lines.append(SEPARATOR)
    return "\n".join(lines)


def turn_banner(mark: Mark) -> str:
    return f"\n{mark} player's turn:"


def outcome_message(outcome: GameOutcome) -> str:
    if outcome.is_draw:
        return "The game is drawn!"
    return f"The game is won by {outcome.winner}!"
