"""
Shared types of the tile merge engine: the grid, the four directions and the outcome of a move.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from numpy import int64, ndarray, zeros

# ##>: The board is always a 4x4 grid.
GRID_SIZE = 4
GRID_SHAPE = (GRID_SIZE, GRID_SIZE)


class Direction(IntEnum):
    """
    Direction of travel of the tiles.

    The integer values follow the action numbering used across the project (0: left, 1: up, 2: right, 3: down).
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @property
    def offset(self) -> tuple[int, int]:
        """
        Row and column offset of one step in this direction.

        Returns
        -------
        tuple[int, int]
            The (row, column) delta applied to a cell to reach its neighbour.
        """
        return _OFFSETS[self]


_OFFSETS = {
    Direction.LEFT: (0, -1),
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
}


@dataclass(frozen=True)
class Unchanged:
    """No tile moved, the grid is untouched."""

    moved: ClassVar[bool] = False
    delta: ClassVar[int] = 0


@dataclass(frozen=True)
class Changed:
    """
    At least one tile moved or merged.

    Attributes
    ----------
    delta : int
        Sum of the values produced by merges during the move (0 if only slides occurred).
    """

    delta: int
    moved: ClassVar[bool] = True


MoveOutcome = Unchanged | Changed


class EntropyError(RuntimeError):
    """The source of randomness failed. Fatal for the game session."""


def new_grid(rows: list[list[int]] | None = None) -> ndarray:
    """
    Build a game grid.

    Parameters
    ----------
    rows : list[list[int]], optional
        Initial cell values. An empty grid is returned when omitted.

    Returns
    -------
    ndarray
        A 4x4 array of int64.

    Raises
    ------
    ValueError
        If the given rows do not form a 4x4 grid.
    """
    if rows is None:
        return zeros(GRID_SHAPE, dtype=int64)

    if len(rows) != GRID_SIZE or any(len(row) != GRID_SIZE for row in rows):
        raise ValueError(f'grid must be {GRID_SIZE}x{GRID_SIZE}, got {rows!r}')
    grid = zeros(GRID_SHAPE, dtype=int64)
    grid[:, :] = rows
    return grid
