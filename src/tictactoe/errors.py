"""Move errors raised before the board is mutated."""

from __future__ import annotations

from typing import Any, Optional

from .config import CELL_COUNT


class MoveError(ValueError):
    def __init__(self, message: str, index: Optional[Any] = None) -> None:
        super().__init__(message)
        self.index = index


class OutOfRangeIndex(MoveError):
    def __init__(self, index: Any) -> None:
        super().__init__(f"Cell index {index!r} out of range [0, {CELL_COUNT}).", index)


class CellOccupied(MoveError):
    def __init__(self, index: int) -> None:
        super().__init__(f"Cell {index} is already occupied.", index)


class NoMovesAvailable(MoveError):
    def __init__(self) -> None:
        super().__init__("No valid moves.")
