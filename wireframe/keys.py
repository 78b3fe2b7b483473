"""Keyboard codes understood by the viewer."""

from __future__ import annotations

from enum import IntEnum


class Key(IntEnum):
    """X11 keysym values of the keys the viewer reacts to."""

    ESC = 65307
    UP_ARROW = 65362
    LEFT_ARROW = 65361
    DOWN_ARROW = 65364
    RIGHT_ARROW = 65363
    F = 102
    G = 103
    PLUS = 61
    MINUS = 45
    U = 117
    D = 100
    R = 114
    TWO_DIM = 233
    C = 99
    M = 109
    P = 112
    SPACE = 32
    GRAVE = 96
    SQUARED = 178

    @classmethod
    def from_code(cls, code: int) -> Key | None:
        """Return the key for a raw keysym, or None if it is not one of ours."""
        try:
            return cls(code)
        except ValueError:
            return None