"""
Type definitions for the Tic-Tac-Toe game.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class OutOfBoundsError(IndexError):
    """Raised when a board coordinate falls outside the 3x3 grid."""


class StrategyNotSupportedError(NotImplementedError):
    """Raised when a player type without a move strategy is asked to move."""

    def __init__(self, player_type: PlayerType):
        self.player_type = player_type
        super().__init__(f"{player_type.label} player is not yet supported")


class Mark(IntEnum):
    """Contents of a single board cell."""

    EMPTY = 0
    X = 1
    O = 2

    def __str__(self) -> str:
        return self.symbol

    @property
    def symbol(self) -> str:
        """Single character used when drawing the board."""
        if self == Mark.EMPTY:
            return " "
        return self.name


class PlayerType(str, Enum):
    """Who (or what) controls a player."""

    HUMAN = "human"
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def supported(self) -> bool:
        """Whether this player type can actually make moves."""
        return self == PlayerType.EASY

    @classmethod
    def from_string(cls, s: str) -> PlayerType:
        """Parse a player type from a menu token."""
        token = s.strip().lower()
        if token in _PLAYER_ALIASES:
            return _PLAYER_ALIASES[token]
        raise ValueError(f"Invalid player type: {s}")


_PLAYER_ALIASES: dict[str, PlayerType] = {
    "human": PlayerType.HUMAN,
    "player": PlayerType.HUMAN,
    "user": PlayerType.HUMAN,
    "easy": PlayerType.EASY,
    "medium": PlayerType.MEDIUM,
    "hard": PlayerType.HARD,
}


@dataclass(frozen=True)
class Player:
    """A seat at the table: who plays it and which mark they place."""

    player_type: PlayerType
    mark: Mark

    def __post_init__(self) -> None:
        if self.mark == Mark.EMPTY:
            raise ValueError("A player must be assigned X or O")


@dataclass(frozen=True)
class GameOutcome:
    """
    Result of a finished game.

    Attributes:
        winner: Mark of the winning player, or None for a draw
        is_draw: True when the board filled up with no winner
        moves: Number of turns taken
    """

    winner: Mark | None
    is_draw: bool
    moves: int = 0

    def __post_init__(self) -> None:
        if (self.winner is None) != self.is_draw:
            raise ValueError("An outcome is either a win or a draw")
