"""
Round loop and the replay session.

A round alternates the players in fixed order on a fresh board until someone
fills a row or column, or the board is full. A session replays rounds forever,
waiting for an acknowledgment between them, unless a round limit is given.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from .board import Board, Outcome
from .keypad import index_to_numpad
from .players import Player
from .render import announce, render as render_board


def play_round(
    players: Sequence[Player],
    render: Callable[[Board], None] = render_board,
) -> Outcome:
    if len(players) != 2 or players[0].mark == players[1].mark:
        raise ValueError("A round needs two players with different marks.")
    board = Board()
    render(board)
    while True:
        for player in players:
            move = player.choose_move(board)
            board.place(move, player.mark)
            logging.debug(
                "%s (%s) -> cell %d (key %d)", player.name, player.mark.glyph, move, index_to_numpad(move)
            )
            render(board)
            outcome = board.process_outcome()
            if outcome.terminal:
                return outcome


def run_session(
    players: Sequence[Player],
    acknowledge: Callable[[], object] = input,
    rounds: Optional[int] = None,
    render: Callable[[Board], None] = render_board,
    announce_outcome: Callable[[Outcome], None] = announce,
) -> int:
    """Play rounds until ``rounds`` is reached or input runs out.

    Returns the number of completed rounds.
    """
    played = 0
    try:
        while rounds is None or played < rounds:
            outcome = play_round(players, render=render)
            played += 1
            if outcome.is_draw:
                logging.info("round %d: draw", played)
            else:
                logging.info("round %d: %s wins", played, outcome.winner.glyph)
            announce_outcome(outcome)
            acknowledge()
    except EOFError:
        logging.info("input closed after %d round(s)", played)
    return played
