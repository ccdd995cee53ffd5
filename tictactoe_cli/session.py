"""
Session loop: menu -> game -> result -> menu.
"""

from __future__ import annotations

import logging
import random

from rich.console import Console

from tictactoe_cli.board import Board
from tictactoe_cli.game import Game
from tictactoe_cli.menu import Menu
from tictactoe_cli.render import outcome_message, render_board, turn_banner
from tictactoe_cli.types import GameOutcome, PlayerType

logger = logging.getLogger(__name__)


class Session:
    """
    Runs games back to back on one console.

    A single random generator is shared by every game so that a seeded
    session replays identically.
    """

    def __init__(
        self,
        console: Console,
        menu: Menu | None = None,
        seed: int | None = None,
    ):
        self.console = console
        self.menu = menu or Menu(console)
        self._rng = random.Random(seed)
        self.games_played = 0

    def _show_board(self, board: Board) -> None:
        self.console.print(render_board(board), markup=False, highlight=False)

    def play_game(self, first: PlayerType, second: PlayerType) -> GameOutcome:
        """Play one fresh game to completion and announce the result."""
        logger.info("Starting game: X=%s, O=%s", first.label, second.label)
        game = Game(first, second, rng=self._rng, on_render=self._show_board)

        self._show_board(game.board)
        while not game.is_over():
            self.console.print(turn_banner(game.current_player.mark), markup=False, highlight=False)
            game.take_turn()
            game.swap_turn()

        outcome = game.outcome()
        self.games_played += 1
        logger.info("Game finished after %d moves: %s", outcome.moves, outcome_message(outcome))
        self.console.print(outcome_message(outcome), highlight=False)
        return outcome

    def run(self, max_games: int | None = None) -> None:
        """
        Alternate between the menu and games.

        Args:
            max_games: Stop after this many games; None runs until the
                menu receives an exit command
        """
        while max_games is None or self.games_played < max_games:
            first, second = self.menu.prompt()
            self.play_game(first, second)
