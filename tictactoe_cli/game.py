"""
Tic-Tac-Toe game: a board, two players, and whose turn it is.
"""

from __future__ import annotations

import random
from collections.abc import Callable

from tictactoe_cli.board import Board
from tictactoe_cli.strategy import PlayerStrategy, create_strategy
from tictactoe_cli.types import GameOutcome, Mark, Player, PlayerType

RenderHook = Callable[[Board], None]


class Game:
    """
    A single game between two players.

    X always belongs to the first player type and O to the second. The
    current/next roles are tracked as an index into the fixed pair of
    players, so swapping turns never moves marks around.
    """

    def __init__(
        self,
        first: PlayerType,
        second: PlayerType,
        rng: random.Random | None = None,
        on_render: RenderHook | None = None,
        board: Board | None = None,
    ):
        self.board = board or Board()
        self.players: tuple[Player, Player] = (
            Player(first, Mark.X),
            Player(second, Mark.O),
        )
        self._strategies: tuple[PlayerStrategy, PlayerStrategy] = (
            create_strategy(first, rng),
            create_strategy(second, rng),
        )
        self._current = 0
        self._on_render = on_render
        self.moves = 0

    @property
    def current_player(self) -> Player:
        return self.players[self._current]

    @property
    def next_player(self) -> Player:
        return self.players[1 - self._current]

    def take_turn(self) -> None:
        """Let the current player's strategy place its mark, then redraw."""
        strategy = self._strategies[self._current]
        strategy.choose_and_place(self.board, self.current_player.mark)
        self.moves += 1
        if self._on_render is not None:
            self._on_render(self.board)

    def swap_turn(self) -> None:
        self._current = 1 - self._current

    def is_won(self) -> bool:
        return self.board.is_won()

    def is_draw(self) -> bool:
        return self.board.is_full()

    def is_over(self) -> bool:
        return self.is_won() or self.is_draw()

    def outcome(self) -> GameOutcome:
        """
        Result of a finished game.

        Must be called after the final swap_turn(): the player who made the
        winning move then holds the "next" role.

        Raises:
            RuntimeError: If the game is still in progress
        """
        if self.is_won():
            return GameOutcome(winner=self.next_player.mark, is_draw=False, moves=self.moves)
        if self.is_draw():
            return GameOutcome(winner=None, is_draw=True, moves=self.moves)
        raise RuntimeError("Game is still in progress")
