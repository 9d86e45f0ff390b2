# -*- coding: utf-8 -*-
"""
Rule engine and terminal game for a 4x4 sliding tile merge puzzle.
"""

from .core import Changed, Direction, EntropyError, MoveOutcome, Unchanged, has_moves, move, new_grid, spawn
from .envs import GameConfiguration, TileMergeGame

__all__ = [
    "move",
    "has_moves",
    "spawn",
    "new_grid",
    "Direction",
    "MoveOutcome",
    "Changed",
    "Unchanged",
    "EntropyError",
    "TileMergeGame",
    "GameConfiguration",
]
