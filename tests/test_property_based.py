from typing import List

from hypothesis import assume, given, strategies as st

from tictactoe.board import Board
from tictactoe.game_basics import LINES, Symbol, get_winner, is_full
from tictactoe.tactics import choose_move, choose_move_with_rule

boards = st.lists(st.integers(min_value=0, max_value=2), min_size=9, max_size=9)
movers = st.sampled_from([Symbol.CROSS, Symbol.CIRCLE])


def _full_lines(board: List[int], p: int) -> int:
    return sum(1 for line in LINES if all(board[i] == p for i in line))


@given(boards)
def test_winner_has_a_full_line(board: List[int]):
    w = get_winner(board)
    if w != Symbol.EMPTY:
        assert _full_lines(board, w) > 0
    else:
        assert _full_lines(board, 1) == 0
        assert _full_lines(board, 2) == 0


@given(boards)
def test_draw_iff_no_empty_cell(board: List[int]):
    b = Board(board)
    assert b.check_draw() == (0 not in board)
    out = b.process_outcome()
    assert out.terminal == (b.check_winner() != Symbol.EMPTY or 0 not in board)


@given(boards, movers)
def test_selector_picks_an_empty_cell(board: List[int], mover: Symbol):
    assume(not is_full(board))
    move = choose_move(board, mover)
    assert board[move] == 0


@given(boards, movers)
def test_selector_takes_a_win_when_one_exists(board: List[int], mover: Symbol):
    can_win = any(
        sum(board[i] == mover for i in line) == 2 and sum(board[i] == 0 for i in line) == 1
        for line in LINES
    )
    assume(can_win)
    move, rule = choose_move_with_rule(board, mover)
    assert rule == "win"
    after = board[:]
    after[move] = int(mover)
    assert _full_lines(after, mover) > _full_lines(board, mover)


@given(boards)
def test_place_then_outcome_never_loses_cells(board: List[int]):
    b = Board(board)
    before = b.to_string()
    empties = b.empty_cells()
    assume(empties)
    b.place(empties[0], Symbol.CROSS)
    after = b.to_string()
    diff = [i for i in range(9) if before[i] != after[i]]
    assert diff == [empties[0]]
