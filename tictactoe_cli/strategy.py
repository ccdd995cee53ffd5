"""
Move strategies for each player type.
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod

from tictactoe_cli.board import Board
from tictactoe_cli.types import Mark, PlayerType, StrategyNotSupportedError

logger = logging.getLogger(__name__)


class PlayerStrategy(ABC):
    """Decides where a player puts its mark."""

    player_type: PlayerType

    @property
    def supported(self) -> bool:
        return self.player_type.supported

    @abstractmethod
    def choose_and_place(self, board: Board, mark: Mark) -> None:
        """
        Place exactly one mark on the board.

        Args:
            board: Board to mutate; must have at least one empty cell
            mark: Mark to place
        """
        ...


class UnsupportedStrategy(PlayerStrategy):
    """Player type that exists in the menu but cannot move yet."""

    def choose_and_place(self, board: Board, mark: Mark) -> None:
        raise StrategyNotSupportedError(self.player_type)


class HumanStrategy(UnsupportedStrategy):
    player_type = PlayerType.HUMAN


class MediumStrategy(UnsupportedStrategy):
    player_type = PlayerType.MEDIUM


class HardStrategy(UnsupportedStrategy):
    player_type = PlayerType.HARD


class EasyStrategy(PlayerStrategy):
    """
    Random mover.

    Picks uniformly random coordinates and retries until it hits an empty
    cell. Previously tried coordinates are not excluded.
    """

    player_type = PlayerType.EASY

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    def choose_and_place(self, board: Board, mark: Mark) -> None:
        if board.is_full():
            raise ValueError("Cannot place a mark on a full board")

        while True:
            col = self._rng.randrange(Board.SIZE)
            row = self._rng.randrange(Board.SIZE)
            if board.set(col, row, mark):
                logger.debug("%s placed at (%d, %d)", mark, col, row)
                return
            logger.debug("(%d, %d) is taken, sampling again", col, row)


_STRATEGIES: dict[PlayerType, type[PlayerStrategy]] = {
    PlayerType.HUMAN: HumanStrategy,
    PlayerType.EASY: EasyStrategy,
    PlayerType.MEDIUM: MediumStrategy,
    PlayerType.HARD: HardStrategy,
}


def create_strategy(player_type: PlayerType, rng: random.Random | None = None) -> PlayerStrategy:
    """Build the strategy that plays for the given player type."""
    if player_type == PlayerType.EASY:
        return EasyStrategy(rng)
    return _STRATEGIES[player_type]()
