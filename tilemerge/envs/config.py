# -*- coding: utf-8 -*-
"""
Game session configuration.
"""
from dataclasses import dataclass


@dataclass
class GameConfiguration:
    """
    Settings of a game session.
    """

    initial_tiles: int = 1
    uniform_spawn: bool = True
    seed: int | None = None
