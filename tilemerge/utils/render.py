"""Textual rendering of the game grid and score."""

from numpy import ndarray

# ##>: Each cell is right-aligned in a field of this width, cells are one column apart.
CELL_WIDTH = 5


def board_lines(grid: ndarray) -> list[str]:
    """
    Format the grid as one line of text per row.

    Parameters
    ----------
    grid : ndarray
        The game grid.

    Returns
    -------
    list[str]
        One string per row, every cell right-aligned in a 5-wide field and separated by a space.

    Example
    -------
    >>> import numpy as np
    >>> board_lines(np.array([[2, 0, 0, 16]] + [[0] * 4] * 3))[0]
    '    2     0     0    16'
    """
    return [' '.join(f'{int(value):{CELL_WIDTH}}' for value in row) for row in grid]


def score_line(score: int) -> str:
    """
    Format the score line shown under the grid.

    Parameters
    ----------
    score : int
        Current score.

    Returns
    -------
    str
        The line, e.g. ``Score: 12``.
    """
    return f'Score: {score}'
