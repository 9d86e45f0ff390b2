"""
Core functionality of the tile merge game: moving the board in a direction and spawning new tiles.
"""

import logging
from functools import lru_cache

from numpy import argwhere, ndarray
from numpy.random import PCG64DXSM, Generator, default_rng

from tilemerge.core.types import GRID_SIZE, Changed, Direction, EntropyError, MoveOutcome, Unchanged

logger = logging.getLogger(__name__)


def _traversal(direction: Direction) -> tuple[tuple[int, int], ...]:
    """
    Order in which cells are visited for a direction: cells closest to the destination edge come first.
    """
    rows = range(GRID_SIZE - 1, -1, -1) if direction is Direction.DOWN else range(GRID_SIZE)
    cols = range(GRID_SIZE - 1, -1, -1) if direction is Direction.RIGHT else range(GRID_SIZE)
    return tuple((row, col) for row in rows for col in cols)


# ##>: Pre-computed visiting order for each direction.
TRAVERSALS: dict[Direction, tuple[tuple[int, int], ...]] = {direction: _traversal(direction) for direction in Direction}


def new_generator(seed: int | None = None) -> Generator:
    """
    Create a random generator.

    Parameters
    ----------
    seed : int, optional
        Seed for reproducibility. Fresh OS entropy is used when omitted.

    Returns
    -------
    Generator
        A NumPy random generator.

    Raises
    ------
    EntropyError
        If the operating system could not provide entropy.
    """
    try:
        return default_rng(PCG64DXSM(seed))
    except OSError as exc:
        logger.error('Unable to seed the random generator: %s', exc)
        raise EntropyError(f'unable to seed the random generator: {exc}') from exc


@lru_cache(maxsize=1)
def _default_generator() -> Generator:
    """Module-level generator, seeded from OS entropy on first use."""
    return new_generator()


def _advance(grid: ndarray, row: int, col: int, direction: Direction, merged: set[tuple[int, int]]) -> int | None:
    """
    Push the tile at (row, col) as far as possible in the given direction.

    Parameters
    ----------
    grid : ndarray
        The game grid. **Modified in-place.**
    row, col : int
        Position of the tile to push.
    direction : Direction
        Direction of travel.
    merged : set[tuple[int, int]]
        Cells already produced by a merge during the current move. Updated in-place.

    Returns
    -------
    int or None
        The merged value if the tile merged, 0 if it only slid, None if it did not move.
    """
    value = grid[row, col]
    if value == 0:
        return None

    d_row, d_col = direction.offset
    moved = False
    while True:
        next_row, next_col = row + d_row, col + d_col

        # ##: Blocked by the edge.
        if not (0 <= next_row < GRID_SIZE and 0 <= next_col < GRID_SIZE):
            break

        target = grid[next_row, next_col]

        # ##: Merge, then the tile settles.
        if target == value and (next_row, next_col) not in merged:
            grid[next_row, next_col] = target + value
            grid[row, col] = 0
            merged.add((next_row, next_col))
            return int(target + value)

        # ##: Slide one cell and keep going.
        if target == 0:
            grid[next_row, next_col] = value
            grid[row, col] = 0
            row, col = next_row, next_col
            moved = True
            continue

        # ##: Blocked by an unequal tile (or by a tile already merged).
        break

    return 0 if moved else None


def move(grid: ndarray, direction: Direction) -> MoveOutcome:
    """
    Slide and merge every tile of the grid in a direction.

    Parameters
    ----------
    grid : ndarray
        The game grid. **Modified in-place.**
    direction : Direction
        Direction of travel.

    Returns
    -------
    MoveOutcome
        ``Unchanged()`` if no tile moved, ``Changed(delta)`` otherwise, where ``delta`` is the sum of merged values.

    Notes
    -----
    - Cells nearest to the destination edge are processed first, so a tile never blocks the one behind it.
    - A tile merges at most once per move, and a cell created by a merge cannot absorb another tile in the same move.
    - The grid is untouched when ``Unchanged()`` is returned.
    """
    direction = Direction(direction)
    merged: set[tuple[int, int]] = set()
    delta = 0
    changed = False

    for row, col in TRAVERSALS[direction]:
        result = _advance(grid, row, col, direction, merged)
        if result is not None:
            delta += result
            changed = True

    if not changed:
        return Unchanged()

    logger.debug('Moved %s, merged value %d', direction.name, delta)
    return Changed(delta)


def spawn(grid: ndarray, rng: Generator | None = None, uniform: bool = True) -> tuple[int, int]:
    """
    Place a new tile (2 or 4) in an empty cell.

    Parameters
    ----------
    grid : ndarray
        The game grid. **Modified in-place.** Must hold at least one empty cell.
    rng : Generator, optional
        Source of randomness. A module-level generator seeded from OS entropy is used when omitted.
    uniform : bool, optional
        Draw the cell uniformly among empty cells (default). When False the cell is picked from the
        random byte modulo the number of empty cells, which slightly favours the first cells in scan order.

    Returns
    -------
    tuple[int, int]
        The (row, column) of the new tile.

    Raises
    ------
    ValueError
        If the grid has no empty cell.
    EntropyError
        If no generator is given and the default one could not be seeded from OS entropy.

    Notes
    -----
    - The tile value comes from a single random byte: even gives 2, odd gives 4.
    - Empty cells are counted in row-major order.
    """
    empty_cells = argwhere(grid == 0)
    if len(empty_cells) == 0:
        raise ValueError('cannot spawn a tile on a full grid')

    rng = rng if rng is not None else _default_generator()
    byte = int(rng.integers(0, 256))
    index = int(rng.integers(0, len(empty_cells))) if uniform else byte % len(empty_cells)

    row, col = (int(coord) for coord in empty_cells[index])
    grid[row, col] = 2 if byte % 2 == 0 else 4
    logger.debug('Spawned %d at (%d, %d)', grid[row, col], row, col)
    return row, col
