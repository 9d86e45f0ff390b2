"""
Keyboard bindings of the terminal front end: arrow keys and vi-style letters.
"""

import curses

from tilemerge.core.types import Direction

KEY_BINDINGS: dict[int, Direction] = {
    curses.KEY_LEFT: Direction.LEFT,
    ord('h'): Direction.LEFT,
    ord('H'): Direction.LEFT,
    curses.KEY_DOWN: Direction.DOWN,
    ord('j'): Direction.DOWN,
    ord('J'): Direction.DOWN,
    curses.KEY_UP: Direction.UP,
    ord('k'): Direction.UP,
    ord('K'): Direction.UP,
    curses.KEY_RIGHT: Direction.RIGHT,
    ord('l'): Direction.RIGHT,
    ord('L'): Direction.RIGHT,
}

QUIT_KEYS = frozenset({ord('q'), ord('Q')})


def direction_for_key(key: int) -> Direction | None:
    """
    Map a key code, as returned by ``curses.window.getch``, to a direction.

    Returns
    -------
    Direction or None
        The bound direction, or None for any other key.
    """
    return KEY_BINDINGS.get(key)


def is_quit_key(key: int) -> bool:
    """
    Check whether a key code asks to leave the game.

    Returns
    -------
    bool
        True for `q` or `Q`.
    """
    return key in QUIT_KEYS
