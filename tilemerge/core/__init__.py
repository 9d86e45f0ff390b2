# -*- coding: utf-8 -*-
"""
Rule engine of the tile merge game.

It includes the board mutator (sliding and merging tiles in a direction), the terminal detector
and the tile spawner, along with the shared grid, direction and move outcome types.
"""

from .gameboard import TRAVERSALS, move, new_generator, spawn
from .gamemove import has_moves
from .types import GRID_SIZE, Changed, Direction, EntropyError, MoveOutcome, Unchanged, new_grid

__all__ = [
    "move",
    "has_moves",
    "spawn",
    "new_generator",
    "new_grid",
    "TRAVERSALS",
    "GRID_SIZE",
    "Direction",
    "MoveOutcome",
    "Changed",
    "Unchanged",
    "EntropyError",
]
