from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .board import Board
from .config import log_level
from .game import run_session
from .game_basics import Symbol, current_player, is_valid_state
from .keypad import index_to_numpad
from .players import HeuristicPlayer, HumanPlayer, Player
from .render import print_banner
from .tactics import choose_move_with_rule, immediate_winning_moves


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Numpad tic-tac-toe against the computer")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )

    p_play = sub.add_parser("play", help="Play against the computer (default command)")
    p_play.add_argument(
        "--rounds", type=int, default=None, help="Stop after this many rounds (default: play forever)"
    )
    p_play.add_argument(
        "--computer-first", action="store_true", help="Let the computer (O) open each round"
    )

    p_tac = sub.add_parser(
        "tactics",
        help="Show immediate wins and the computer's choice for a board (9 digits, 0=empty,1=X,2=O)",
    )
    p_tac.add_argument("--board", required=True, help="Board string, e.g., 110020000")
    p_tac.add_argument(
        "--player", choices=["X", "O"], default=None, help="Side to move (default: inferred from counts)"
    )

    p_out = sub.add_parser("outcome", help="Report winner/draw for a board (rows and columns only)")
    p_out.add_argument("--board", required=True, help="Board string, e.g., 111220000")

    return p


def _print_info() -> None:
    import importlib.util
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy"]:
        spec = importlib.util.find_spec(pkg)
        if spec is None:
            print(f"{pkg}=<not installed>")
        else:
            mod = __import__(pkg)
            ver = getattr(mod, "__version__", "?")
            print(f"{pkg}={ver}")


def _load_board(raw: str) -> Optional[Board]:
    try:
        board = Board.from_string(raw)
    except ValueError as e:
        logging.error("%s", e)
        return None
    if not is_valid_state(board.cells):
        logging.error("Board is not a valid reachable state.")
        return None
    return board


def _play(rounds: Optional[int], computer_first: bool) -> int:
    if rounds is not None and rounds < 1:
        logging.error("--rounds must be at least 1, got %d", rounds)
        return 2
    players: List[Player] = [HumanPlayer(Symbol.CROSS), HeuristicPlayer(Symbol.CIRCLE)]
    if computer_first:
        players.reverse()
    print_banner()
    try:
        played = run_session(players, rounds=rounds)
    except KeyboardInterrupt:
        logging.info("interrupted")
        return 0
    logging.debug("session ended after %d round(s)", played)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else log_level(),
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("numpad-tictactoe"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd is None:
        return _play(None, False)

    if ns.cmd == "play":
        return _play(ns.rounds, ns.computer_first)

    if ns.cmd == "tactics":
        board = _load_board(ns.board)
        if board is None:
            return 2
        if board.process_outcome().terminal:
            logging.error("Board is already decided; no move to suggest.")
            return 2
        p = Symbol.from_glyph(ns.player) if ns.player else current_player(board.cells)
        move, rule = choose_move_with_rule(board.cells, p)
        logging.info(
            "to_move=%s wins=%s blocks=%s choice=%d key=%d rule=%s",
            p.glyph,
            immediate_winning_moves(board.cells, p),
            immediate_winning_moves(board.cells, p.opponent()),
            move,
            index_to_numpad(move),
            rule,
        )
        return 0

    if ns.cmd == "outcome":
        board = _load_board(ns.board)
        if board is None:
            return 2
        outcome = board.process_outcome()
        logging.info(
            "terminal=%s winner=%s draw=%s",
            outcome.terminal,
            outcome.winner.glyph.strip() or "-",
            outcome.is_draw,
        )
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
