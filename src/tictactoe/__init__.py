"""tictactoe package.

Numpad tic-tac-toe against a rule-based computer opponent: board state and
row/column win detection, the move heuristic, and a small console CLI.

Convenience imports are exposed for common workflows.
"""

from .board import Board, Outcome
from .errors import CellOccupied, MoveError, NoMovesAvailable, OutOfRangeIndex
from .game import play_round, run_session
from .game_basics import Symbol
from .players import HeuristicPlayer, HumanPlayer
from .tactics import choose_move

__all__ = [
    "Board",
    "Outcome",
    "Symbol",
    "choose_move",
    "play_round",
    "run_session",
    "HumanPlayer",
    "HeuristicPlayer",
    "MoveError",
    "OutOfRangeIndex",
    "CellOccupied",
    "NoMovesAvailable",
]
