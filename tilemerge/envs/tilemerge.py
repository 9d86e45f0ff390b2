"""Tile merge game session, owning one grid and its score."""

import logging

from numpy import ndarray

from tilemerge.core.gameboard import move, new_generator, spawn
from tilemerge.core.gamemove import has_moves
from tilemerge.core.types import Direction, MoveOutcome, new_grid
from tilemerge.envs.config import GameConfiguration
from tilemerge.utils.render import board_lines, score_line

logger = logging.getLogger(__name__)


class TileMergeGame:
    """
    Tile merge game session.

    This class drives the rule engine: it applies moves to its grid, spawns a tile after every successful move,
    accumulates the score and reports when no move is left.
    """

    def __init__(self, config: GameConfiguration | None = None):
        """
        Initialize the game session.

        Parameters
        ----------
        config : GameConfiguration, optional
            Session settings (default is one initial tile, uniform spawn, random seed).
        """
        self.config = config if config is not None else GameConfiguration()
        self._grid = new_grid()
        self._score = 0
        self._moves = 0
        self._rng = None

        self.reset(seed=self.config.seed)

    @property
    def grid(self) -> ndarray:
        """
        Get the current game grid.

        Returns
        -------
        ndarray
            The 4x4 grid, shared with the session (not a copy).
        """
        return self._grid

    @property
    def score(self) -> int:
        """Sum of all merged values since the last reset."""
        return self._score

    @property
    def moves(self) -> int:
        """Number of successful moves since the last reset."""
        return self._moves

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if no move is possible anymore, False otherwise.
        """
        return not has_moves(self._grid)

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game on an empty grid with the configured number of initial tiles.

        Parameters
        ----------
        seed : int, optional
            Seed of the random generator used to spawn tiles.

        Returns
        -------
        ndarray
            The new game grid.

        Raises
        ------
        EntropyError
            If the random source failed.
        """
        self._rng = new_generator(seed)
        self._grid[:, :] = 0
        self._score = 0
        self._moves = 0
        for _ in range(self.config.initial_tiles):
            spawn(self._grid, rng=self._rng, uniform=self.config.uniform_spawn)

        logger.info('New game with %d initial tile(s)', self.config.initial_tiles)
        return self._grid

    def step(self, direction: Direction) -> tuple[ndarray, MoveOutcome, bool]:
        """
        Apply a move to the grid.

        Parameters
        ----------
        direction : Direction
            Direction of travel.

        Returns
        -------
        tuple[ndarray, MoveOutcome, bool]
            A tuple containing:
            - The game grid (ndarray)
            - The outcome of the move (MoveOutcome)
            - Whether the game has finished after this move (bool)

        Notes
        -----
        - An unchanged move neither spawns a tile nor changes the score.
        """
        outcome = move(self._grid, direction)
        if outcome.moved:
            self._score += outcome.delta
            self._moves += 1
            spawn(self._grid, rng=self._rng, uniform=self.config.uniform_spawn)

        finished = self.is_finished
        if finished:
            logger.info('Game over after %d move(s), score %d', self._moves, self._score)
        return self._grid, outcome, finished

    def render(self) -> str:
        """
        Render the game grid followed by the score line.
        """
        return '\n'.join([*board_lines(self._grid), score_line(self._score)])
