"""
CLI for Tic-Tac-Toe
"""

import logging

import typer
from rich.console import Console

from tictactoe_cli.config import GameConfig
from tictactoe_cli.menu import Menu
from tictactoe_cli.session import Session
from tictactoe_cli.types import PlayerType

app = typer.Typer(
    name="tictactoe",
    help="Two-player command-line Tic-Tac-Toe",
)
console = Console()
logger = logging.getLogger(__name__)


def _load_config(
    seed: int | None = None,
    games: int | None = None,
    log_level: str | None = None,
    with_game_limit: bool = True,
) -> GameConfig:
    try:
        config = GameConfig.from_env(with_game_limit=with_game_limit)
        config = config.merged(seed=seed, max_games=games, log_level=log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Loaded config: %s", config)
    return config


def _parse_player(value: str) -> PlayerType:
    try:
        return PlayerType.from_string(value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


@app.command()
def play(
    seed: int | None = typer.Option(None, help="Random seed for computer players"),
    games: int | None = typer.Option(None, help="Stop after this many games"),
    log_level: str | None = typer.Option(None, help="Logging level (DEBUG, INFO, ...)"),
) -> None:
    """Pick players from the menu and play games until you quit."""
    config = _load_config(seed, games, log_level)
    session = Session(console, menu=Menu(console), seed=config.seed)

    try:
        session.run(max_games=config.max_games)
    except KeyboardInterrupt:
        console.print("\nGoodbye!")
        raise typer.Exit(0)


@app.command()
def start(
    first: str = typer.Argument(..., help="X player: human, easy, medium or hard"),
    second: str = typer.Argument(..., help="O player: human, easy, medium or hard"),
    seed: int | None = typer.Option(None, help="Random seed for computer players"),
    log_level: str | None = typer.Option(None, help="Logging level (DEBUG, INFO, ...)"),
) -> None:
    """Play a single game between two player types, skipping the menu."""
    x_player = _parse_player(first)
    o_player = _parse_player(second)
    config = _load_config(seed, log_level=log_level, with_game_limit=False)

    try:
        Session(console, seed=config.seed).play_game(x_player, o_player)
    except KeyboardInterrupt:
        console.print("\nGoodbye!")
        raise typer.Exit(0)


if __name__ == "__main__":
    app()
