"""
Command-line Tic-Tac-Toe

Two players, human or computer, take turns on a 3x3 board.
"""

from tictactoe_cli.board import Board
from tictactoe_cli.game import Game
from tictactoe_cli.session import Session
from tictactoe_cli.strategy import (
    EasyStrategy,
    HardStrategy,
    HumanStrategy,
    MediumStrategy,
    PlayerStrategy,
    create_strategy,
)
from tictactoe_cli.types import (
    GameOutcome,
    Mark,
    OutOfBoundsError,
    Player,
    PlayerType,
    StrategyNotSupportedError,
)

__version__ = "1.0.0"

__all__ = [
    # Types
    "Mark",
    "Player",
    "PlayerType",
    "GameOutcome",
    "OutOfBoundsError",
    "StrategyNotSupportedError",
    # Game
    "Board",
    "Game",
    "Session",
    # Strategies
    "PlayerStrategy",
    "HumanStrategy",
    "EasyStrategy",
    "MediumStrategy",
    "HardStrategy",
    "create_strategy",
]
