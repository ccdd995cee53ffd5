"""
Runtime configuration, read from the environment (and a .env file).
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _int_from_env(name: str) -> int | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class GameConfig:
    """Configuration for a play session."""

    # Seed for the computer players' random generator (None = nondeterministic)
    seed: int | None = None

    # Stop after this many games (None = until the user exits)
    max_games: int | None = None

    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")
        if self.max_games is not None and self.max_games < 1:
            raise ValueError("max_games must be at least 1")

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True, with_game_limit: bool = True) -> GameConfig:
        """
        Build a config from TICTACTOE_* environment variables.

        Variables:
            TICTACTOE_SEED: integer seed
            TICTACTOE_MAX_GAMES: integer game limit, skipped when
                with_game_limit is False
            TICTACTOE_LOG_LEVEL: logging level name
        """
        if load_dotenv_file:
            load_dotenv(find_dotenv(usecwd=True))
        return cls(
            seed=_int_from_env("TICTACTOE_SEED"),
            max_games=_int_from_env("TICTACTOE_MAX_GAMES") if with_game_limit else None,
            log_level=os.environ.get("TICTACTOE_LOG_LEVEL") or "WARNING",
        )

    def merged(
        self,
        seed: int | None = None,
        max_games: int | None = None,
        log_level: str | None = None,
    ) -> GameConfig:
        """Return a copy with any explicitly given values taking precedence."""
        return GameConfig(
            seed=self.seed if seed is None else seed,
            max_games=self.max_games if max_games is None else max_games,
            log_level=self.log_level if log_level is None else log_level,
        )
