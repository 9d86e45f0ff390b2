# -*- coding: utf-8 -*-
"""
This module provides utilities for the terminal front end: textual rendering of the grid and keyboard bindings.
"""

from .keymap import KEY_BINDINGS, QUIT_KEYS, direction_for_key, is_quit_key
from .render import board_lines, score_line

__all__ = ["board_lines", "score_line", "direction_for_key", "is_quit_key", "KEY_BINDINGS", "QUIT_KEYS"]
