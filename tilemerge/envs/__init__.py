# -*- coding: utf-8 -*-
"""
Game session of the tile merge game.

This module provides the `TileMergeGame` class, which owns a grid and its score and drives the rule engine,
and `GameConfiguration`, which holds its settings.
"""

from .config import GameConfiguration
from .tilemerge import TileMergeGame

__all__ = ["TileMergeGame", "GameConfiguration"]
