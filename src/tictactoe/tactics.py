"""
Tactics for the computer player: line completions and the move heuristic.
Teaching notes:
- A line is "one away" for a player when that player holds every cell but
  one and the remaining cell is empty.
- The heuristic is a fixed priority list. The first rule that yields a cell wins:
  win now, take the center, block, take a corner, first empty cell.
"""
from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .config import DIMENSION
from .errors import NoMovesAvailable
from .game_basics import CENTER, CORNERS, LINES, CellsLike, Symbol, legal_moves


def _completions(cells: CellsLike, player: Symbol, own_count: int) -> Iterator[int]:
    arr = np.asarray(cells)
    for line in LINES:
        values = arr[list(line)]
        own = int(np.count_nonzero(values == player))
        empty = np.flatnonzero(values == Symbol.EMPTY)
        if own == own_count and len(empty) == 1:
            yield line[int(empty[0])]


def line_completion(cells: CellsLike, player: Symbol, own_count: int) -> Optional[int]:
    """First empty cell of a line holding exactly ``own_count`` of ``player``'s
    marks and exactly one empty cell, scanning LINES in order."""
    return next(_completions(cells, player, own_count), None)


def winning_cell(cells: CellsLike, player: Symbol) -> Optional[int]:
    return line_completion(cells, player, DIMENSION - 1)


def blocking_cell(cells: CellsLike, player: Symbol) -> Optional[int]:
    # mover holds nothing on the line, so the opponent holds the rest
    return line_completion(cells, player, 0)


def immediate_winning_moves(cells: CellsLike, player: Symbol) -> List[int]:
    return sorted(set(_completions(cells, player, DIMENSION - 1)))


def choose_move_with_rule(cells: CellsLike, player: Symbol) -> Tuple[int, str]:
    if player not in (Symbol.CROSS, Symbol.CIRCLE):
        raise ValueError(f"Mover must be X or O, got {player!r}.")
    player = Symbol(player)
    arr = np.asarray(cells)
    empties = legal_moves(arr)
    if not empties:
        raise NoMovesAvailable()

    m = winning_cell(arr, player)
    if m is not None:
        return m, "win"
    if arr[CENTER] == Symbol.EMPTY:
        return CENTER, "center"
    m = blocking_cell(arr, player)
    if m is not None:
        return m, "block"
    for corner in CORNERS:
        if arr[corner] == Symbol.EMPTY:
            return corner, "corner"
    return empties[0], "fallback"


def choose_move(cells: CellsLike, player: Symbol) -> int:
    move, rule = choose_move_with_rule(cells, player)
    logging.debug("heuristic %s picks cell %d (rule=%s)", Symbol(player).glyph, move, rule)
    return move
