"""
Pytest configuration and shared fixtures for Tic-Tac-Toe tests.
"""

import io
import random

import pytest
from rich.console import Console


class ScriptedRandom:
    """Stand-in for random.Random that replays a fixed list of randrange results."""

    def __init__(self, values: list[int]):
        self.values = list(values)
        self.calls = 0

    def randrange(self, *args, **kwargs) -> int:
        self.calls += 1
        return self.values.pop(0)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep TICTACTOE_* settings from the host out of the tests."""
    for name in ("TICTACTOE_SEED", "TICTACTOE_MAX_GAMES", "TICTACTOE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def rng():
    """Seeded random generator."""
    return random.Random(42)


@pytest.fixture
def scripted_rng():
    """Factory for generators with predetermined coordinates."""
    return ScriptedRandom


@pytest.fixture
def console():
    """Console that writes into a buffer instead of the terminal."""
    return Console(file=io.StringIO(), width=80, color_system=None)


@pytest.fixture
def board_from_rows():
    """
    Build a board from three strings, top row first, as printed on screen.

    Example: board_from_rows("XO ", " X ", "O X")
    """
    from tictactoe_cli.board import Board
    from tictactoe_cli.types import Mark

    symbols = {"X": Mark.X, "O": Mark.O, " ": Mark.EMPTY, ".": Mark.EMPTY}

    def build(top: str, middle: str, bottom: str) -> Board:
        cells = []
        for line in (bottom, middle, top):
            cells.extend(symbols[ch] for ch in line)
        return Board(cells)

    return build

