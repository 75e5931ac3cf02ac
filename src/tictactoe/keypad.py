"""Numpad keys to cell indices.

Keys are numbered like a numeric keypad: 1 is bottom-left, 9 is top-right.
Cells are stored row-major from the top row down, so the vertical axis flips.

    7 8 9        0 1 2
    4 5 6   ->   3 4 5
    1 2 3        6 7 8
"""
from __future__ import annotations

from typing import Optional, Tuple

from .config import CELL_COUNT, DIMENSION
from .errors import OutOfRangeIndex


def cell_index(x: int, y: int) -> int:
    return x + DIMENSION * (DIMENSION - 1 - y)


def key_coords(key: int) -> Tuple[int, int]:
    if key < 1 or key > CELL_COUNT:
        raise OutOfRangeIndex(key)
    return (key - 1) % DIMENSION, (key - 1) // DIMENSION


def numpad_to_index(key: int) -> int:
    x, y = key_coords(key)
    return cell_index(x, y)


def index_to_numpad(index: int) -> int:
    if index < 0 or index >= CELL_COUNT:
        raise OutOfRangeIndex(index)
    x = index % DIMENSION
    y = DIMENSION - 1 - index // DIMENSION
    return y * DIMENSION + x + 1


def parse_key(raw: str) -> Optional[int]:
    """Cell index for a single numpad digit, or None for anything else."""
    s = raw.strip()
    if len(s) != 1 or s not in "123456789":
        return None
    return numpad_to_index(int(s))
