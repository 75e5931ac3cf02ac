from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Protocol

from .board import Board
from .game_basics import Symbol
from .keypad import parse_key
from .tactics import choose_move


class Player(Protocol):
    name: str
    mark: Symbol

    def choose_move(self, board: Board) -> int:
        ...


@dataclass
class HumanPlayer:
    """
    Reads numpad digits, one per input line, until one names an empty cell.
    Anything else is ignored. EOFError from ``read_key`` propagates.
    """
    mark: Symbol = Symbol.CROSS
    name: str = "Human"
    read_key: Callable[[], str] = field(default=input, repr=False)

    def choose_move(self, board: Board) -> int:
        while True:
            raw = self.read_key()
            index = parse_key(raw)
            if index is None:
                logging.debug("ignored input %r", raw)
                continue
            if not board.is_empty(index):
                logging.debug("ignored key %s: cell %d is occupied", raw.strip(), index)
                continue
            return index


@dataclass
class HeuristicPlayer:
    mark: Symbol = Symbol.CIRCLE
    name: str = "Computer"

    def choose_move(self, board: Board) -> int:
        return choose_move(board.cells, self.mark)
