from __future__ import annotations

from typing import Optional, TextIO

from .board import Board, Outcome
from .config import ACK_PROMPT, BANNER, DIMENSION, SEPARATOR
from .game_basics import Symbol


def format_board(board: Board) -> str:
    rows = []
    for r in range(DIMENSION):
        row = board.cells[r * DIMENSION:(r + 1) * DIMENSION]
        rows.append("".join(Symbol(int(v)).glyph for v in row))
    return "\n".join(rows) + "\n" + SEPARATOR


def render(board: Board, file: Optional[TextIO] = None) -> None:
    print(format_board(board), file=file, flush=True)


def print_banner(file: Optional[TextIO] = None) -> None:
    for line in BANNER:
        print(line, file=file)


def announce(outcome: Outcome, file: Optional[TextIO] = None) -> None:
    print(outcome.message(), file=file)
    print(ACK_PROMPT, file=file, flush=True)
