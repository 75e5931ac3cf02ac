"""
Game basics: symbols, lines, winner/draw checks, serialization, validity.
Teaching notes:
- State is a flat array of DIMENSION**2 cells, row-major, top row first:
  0=empty, 1=X, 2=O.
- Only rows and columns count as lines. Diagonals never win a game here.
- A "ply" is a half-move (one player's turn).
"""
from __future__ import annotations

from enum import IntEnum
from typing import List, Sequence, Tuple, Union

import numpy as np

from .config import CELL_COUNT, DIMENSION, GLYPHS


class Symbol(IntEnum):
    EMPTY = 0
    CROSS = 1
    CIRCLE = 2

    @property
    def glyph(self) -> str:
        return GLYPHS[self]

    def opponent(self) -> "Symbol":
        if self == Symbol.EMPTY:
            raise ValueError("EMPTY has no opponent.")
        return Symbol.CIRCLE if self == Symbol.CROSS else Symbol.CROSS

    @classmethod
    def from_glyph(cls, text: str) -> "Symbol":
        t = text.strip().upper()
        for s in (cls.CROSS, cls.CIRCLE):
            if s.glyph == t:
                return s
        raise ValueError(f"Unknown mark: {text!r}")


CellsLike = Union[np.ndarray, Sequence[int]]


def _build_lines() -> Tuple[Tuple[int, ...], ...]:
    # row i then column i, for each i
    lines = []
    for i in range(DIMENSION):
        lines.append(tuple(range(i * DIMENSION, (i + 1) * DIMENSION)))
        lines.append(tuple(range(i, CELL_COUNT, DIMENSION)))
    return tuple(lines)


LINES = _build_lines()
CENTER = CELL_COUNT // 2
CORNERS = (0, DIMENSION - 1, DIMENSION * (DIMENSION - 1), CELL_COUNT - 1)


def empty_cells_array() -> np.ndarray:
    return np.zeros(CELL_COUNT, dtype=np.int8)


def as_cells(values: CellsLike) -> np.ndarray:
    """Validate and copy a cell sequence into a fresh int8 array."""
    arr = np.array(values, dtype=np.int64).reshape(-1)
    if arr.shape[0] != CELL_COUNT:
        raise ValueError(f"Board must have exactly {CELL_COUNT} cells, got {arr.shape[0]}.")
    if np.any((arr < Symbol.EMPTY) | (arr > Symbol.CIRCLE)):
        raise ValueError("Cells must be 0 (empty), 1 (X) or 2 (O).")
    return arr.astype(np.int8)


def _uniform(line: np.ndarray) -> Symbol:
    first = int(line[0])
    if first != Symbol.EMPTY and bool(np.all(line == first)):
        return Symbol(first)
    return Symbol.EMPTY


def row_winner(cells: CellsLike, row: int) -> Symbol:
    arr = np.asarray(cells)
    return _uniform(arr[row * DIMENSION:(row + 1) * DIMENSION])


def column_winner(cells: CellsLike, column: int) -> Symbol:
    arr = np.asarray(cells)
    return _uniform(arr[column::DIMENSION])


def get_winner(cells: CellsLike) -> Symbol:
    for i in range(DIMENSION):
        w = row_winner(cells, i)
        if w != Symbol.EMPTY:
            return w
        w = column_winner(cells, i)
        if w != Symbol.EMPTY:
            return w
    return Symbol.EMPTY


def is_full(cells: CellsLike) -> bool:
    return bool(np.all(np.asarray(cells) != Symbol.EMPTY))


def count_wins(cells: CellsLike, player: Symbol) -> int:
    arr = np.asarray(cells)
    return sum(1 for line in LINES if bool(np.all(arr[list(line)] == player)))


def serialize_board(cells: CellsLike) -> str:
    return ''.join(str(int(c)) for c in np.asarray(cells))


def deserialize_board(board_str: str) -> np.ndarray:
    raw = board_str.strip()
    if len(raw) != CELL_COUNT or any(c not in "012" for c in raw):
        raise ValueError(f"Invalid board string. Must be {CELL_COUNT} chars of 0/1/2.")
    return as_cells([int(c) for c in raw])


def get_piece_counts(cells: CellsLike) -> Tuple[int, int]:
    arr = np.asarray(cells)
    return int(np.count_nonzero(arr == Symbol.CROSS)), int(np.count_nonzero(arr == Symbol.CIRCLE))


def is_valid_state(cells: CellsLike) -> bool:
    # either side may open, so counts differ by at most one
    x_count, o_count = get_piece_counts(cells)
    if abs(x_count - o_count) > 1:
        return False
    if count_wins(cells, Symbol.CROSS) > 0 and count_wins(cells, Symbol.CIRCLE) > 0:
        return False
    return True


def current_player(cells: CellsLike) -> Symbol:
    x, o = get_piece_counts(cells)
    return Symbol.CROSS if x <= o else Symbol.CIRCLE


def legal_moves(cells: CellsLike) -> List[int]:
    return [int(i) for i in np.flatnonzero(np.asarray(cells) == Symbol.EMPTY)]
