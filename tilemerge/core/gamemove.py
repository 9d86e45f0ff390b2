"""
Terminal state detection for the tile merge game.
"""

from numpy import ndarray

from tilemerge.core.types import GRID_SIZE


def has_moves(grid: ndarray) -> bool:
    """
    Check whether any move is still possible.

    Parameters
    ----------
    grid : ndarray
        The game grid. Not modified.

    Returns
    -------
    bool
        True if a cell is empty or two horizontally or vertically adjacent cells hold the same value,
        False when the grid is full and no neighbours match (game over).
    """
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            value = grid[row, col]

            # ##: Blanks.
            if value == 0:
                return True

            # ##: Merges with an existing neighbour.
            if row > 0 and grid[row - 1, col] == value:
                return True
            if row < GRID_SIZE - 1 and grid[row + 1, col] == value:
                return True
            if col > 0 and grid[row, col - 1] == value:
                return True
            if col < GRID_SIZE - 1 and grid[row, col + 1] == value:
                return True
    return False
