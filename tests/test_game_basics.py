import numpy as np
import pytest

from tictactoe.game_basics import (
    CENTER,
    CORNERS,
    LINES,
    Symbol,
    column_winner,
    current_player,
    deserialize_board,
    get_winner,
    is_full,
    is_valid_state,
    row_winner,
    serialize_board,
)


def test_lines_are_rows_and_columns_interleaved():
    assert LINES == (
        (0, 1, 2), (0, 3, 6),
        (3, 4, 5), (1, 4, 7),
        (6, 7, 8), (2, 5, 8),
    )
    assert CENTER == 4
    assert CORNERS == (0, 2, 6, 8)


def test_row_and_column_checkers():
    b = [1, 1, 1,
         2, 0, 2,
         0, 0, 2]
    assert row_winner(b, 0) == Symbol.CROSS
    assert row_winner(b, 1) == Symbol.EMPTY
    assert column_winner(b, 2) == Symbol.EMPTY
    c = [0, 2, 1,
         0, 2, 1,
         0, 2, 0]
    assert column_winner(c, 1) == Symbol.CIRCLE
    assert column_winner(c, 0) == Symbol.EMPTY  # empty column is not a win
    assert row_winner([0] * 9, 0) == Symbol.EMPTY


@pytest.mark.parametrize("board", [
    [1, 0, 0, 0, 1, 0, 0, 0, 1],
    [0, 0, 2, 0, 2, 0, 2, 0, 0],
])
def test_diagonals_never_win(board):
    assert get_winner(board) == Symbol.EMPTY


def test_winner_from_row_or_column():
    # top row
    b = [1, 1, 1,
         2, 0, 2,
         0, 2, 2]
    assert get_winner(b) == Symbol.CROSS
    # left column
    b2 = [2, 1, 0,
          2, 1, 0,
          2, 0, 1]
    assert get_winner(b2) == Symbol.CIRCLE


def test_is_full_independent_of_winner():
    assert is_full([1, 1, 1, 2, 2, 1, 2, 1, 2])
    assert not is_full([1, 1, 1, 2, 2, 0, 0, 0, 0])


def test_serialize_round_trip_and_errors():
    b = deserialize_board("100020000")
    assert isinstance(b, np.ndarray)
    assert b.dtype == np.int8
    assert serialize_board(b) == "100020000"
    for bad in ["abc", "0123", "0000000003", "10002000x"]:
        with pytest.raises(ValueError):
            deserialize_board(bad)


def test_validity_and_side_to_move():
    assert is_valid_state([0] * 9)
    assert current_player([0] * 9) == Symbol.CROSS
    assert current_player([1, 0, 0, 0, 0, 0, 0, 0, 0]) == Symbol.CIRCLE
    # computer may open, so O can be one ahead
    assert is_valid_state([0, 0, 0, 0, 2, 0, 0, 0, 0])
    assert current_player([0, 0, 0, 0, 2, 0, 0, 0, 0]) == Symbol.CROSS
    assert not is_valid_state([1, 1, 1, 0, 0, 0, 0, 0, 0])
    # both sides complete a row
    assert not is_valid_state([1, 1, 1, 2, 2, 2, 0, 0, 0])


def test_symbol_helpers():
    assert Symbol.CROSS.opponent() == Symbol.CIRCLE
    assert Symbol.CIRCLE.opponent() == Symbol.CROSS
    assert Symbol.from_glyph("x") == Symbol.CROSS
    assert Symbol.EMPTY.glyph == " "
    with pytest.raises(ValueError):
        Symbol.EMPTY.opponent()
    with pytest.raises(ValueError):
        Symbol.from_glyph("Z")
