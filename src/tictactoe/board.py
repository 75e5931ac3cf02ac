from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import numpy as np

from .config import CELL_COUNT, DRAW_MESSAGE, WIN_MESSAGE
from .errors import CellOccupied, OutOfRangeIndex
from .game_basics import (
    Symbol,
    as_cells,
    deserialize_board,
    empty_cells_array,
    get_winner,
    is_full,
    legal_moves,
    serialize_board,
)


@dataclass(frozen=True)
class Outcome:
    terminal: bool
    winner: Symbol = Symbol.EMPTY

    @property
    def is_draw(self) -> bool:
        return self.terminal and self.winner == Symbol.EMPTY

    def message(self) -> str:
        if not self.terminal:
            raise ValueError("Round still in progress; no outcome to announce.")
        if self.winner != Symbol.EMPTY:
            return WIN_MESSAGE.format(mark=self.winner.glyph)
        return DRAW_MESSAGE


@dataclass(slots=True, eq=False)
class Board:
    cells: np.ndarray = field(default_factory=empty_cells_array)

    def __post_init__(self) -> None:
        # always own a validated int8 copy
        self.cells = as_cells(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    @classmethod
    def from_string(cls, text: str) -> "Board":
        return cls(deserialize_board(text))

    def to_string(self) -> str:
        return serialize_board(self.cells)

    def copy(self) -> "Board":
        return Board(self.cells.copy())

    def __getitem__(self, index: int) -> Symbol:
        return Symbol(int(self.cells[self._checked_index(index)]))

    @staticmethod
    def _checked_index(index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise OutOfRangeIndex(index)
        if index < 0 or index >= CELL_COUNT:
            raise OutOfRangeIndex(index)
        return int(index)

    def is_empty(self, index: int) -> bool:
        return self[index] == Symbol.EMPTY

    def empty_cells(self) -> List[int]:
        return legal_moves(self.cells)

    def place(self, index: int, symbol: Symbol) -> None:
        i = self._checked_index(index)
        if symbol not in (Symbol.CROSS, Symbol.CIRCLE):
            raise ValueError(f"Cannot place {symbol!r}; only X or O may be placed.")
        if self.cells[i] != Symbol.EMPTY:
            raise CellOccupied(i)
        self.cells[i] = int(symbol)

    def check_winner(self) -> Symbol:
        return get_winner(self.cells)

    def check_draw(self) -> bool:
        return is_full(self.cells)

    def process_outcome(self) -> Outcome:
        winner = self.check_winner()
        if winner != Symbol.EMPTY or self.check_draw():
            return Outcome(terminal=True, winner=winner)
        return Outcome(terminal=False)
