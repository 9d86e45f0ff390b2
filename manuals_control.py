# -*- coding: utf-8 -*-
"""
Play the tile merge game in a terminal.
"""
import argparse
import curses
import logging

from tilemerge.envs import GameConfiguration, TileMergeGame
from tilemerge.utils import board_lines, direction_for_key, is_quit_key, score_line

logger = logging.getLogger(__name__)


def redraw(screen: "curses.window", game: TileMergeGame):
    """
    Redraw the game grid and the score.

    Parameters
    ----------
    screen: curses.window
        Terminal window to draw on

    game: TileMergeGame
        The game session
    """
    lines = board_lines(game.grid)
    for row, line in enumerate(lines):
        screen.addstr(row, 0, line)
    screen.addstr(len(lines), 0, score_line(game.score))
    screen.clrtoeol()
    screen.refresh()


def step(screen: "curses.window", game: TileMergeGame, key: int) -> bool:
    """
    Apply the move bound to a key.

    Parameters
    ----------
    screen: curses.window
        Terminal window to draw on

    game: TileMergeGame
        The game session

    key: int
        Key code read from the terminal

    Returns
    -------
    bool
        False if the player asked to quit, True otherwise.
    """
    if is_quit_key(key):
        return False

    direction = direction_for_key(key)
    if direction is not None:
        game.step(direction)
        redraw(screen, game)
    return True


def play(screen: "curses.window", config: GameConfiguration):
    """
    Run one game until the player quits or no move is left.

    Parameters
    ----------
    screen: curses.window
        Terminal window to draw on

    config: GameConfiguration
        Game session settings
    """
    game = TileMergeGame(config)
    redraw(screen, game)

    while not game.is_finished:
        if not step(screen, game, screen.getch()):
            return

    screen.addstr(len(game.grid) + 1, 0, "Game over.")
    screen.refresh()
    screen.getch()


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse the command line.

    Parameters
    ----------
    argv: list[str], optional
        Arguments to parse, defaults to sys.argv

    Returns
    -------
    argparse.Namespace
        Seed, spawn mode, number of initial tiles and logging settings
    """
    parser = argparse.ArgumentParser(description="Play the tile merge game in a terminal.")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the tile spawner")
    parser.add_argument("--initial-tiles", type=int, default=1, help="Number of tiles on a new grid")
    parser.add_argument(
        "--byte-spawn",
        action="store_true",
        help="Pick the spawn cell from the random byte instead of a uniform draw",
    )
    parser.add_argument("--log-file", default=None, help="Write logs to this file")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv: list[str] | None = None):
    """
    Configure logging and run a game in the terminal.

    Parameters
    ----------
    argv: list[str], optional
        Command line arguments, defaults to sys.argv
    """
    args = parse_arguments(argv)

    # ##: The terminal belongs to curses, logs only go to a file.
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=args.log_level,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    config = GameConfiguration(initial_tiles=args.initial_tiles, uniform_spawn=not args.byte_spawn, seed=args.seed)

    # ##: curses.wrapper restores the terminal before any error (entropy failure included) propagates.
    curses.wrapper(play, config)


if __name__ == "__main__":
    main()
