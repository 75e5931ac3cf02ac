"""Fixed game constants and env-first settings.

The board size is not configurable; everything that depends on it derives
from DIMENSION. Runtime knobs come from environment variables with safe
fallbacks, so the package behaves the same when installed or run in place.
"""

from __future__ import annotations

import logging
import os

DIMENSION = 3
CELL_COUNT = DIMENSION * DIMENSION

# glyphs indexed by symbol code: 0=empty, 1=X, 2=O
GLYPHS = (" ", "X", "O")

SEPARATOR = "_" * 43

BANNER = ("Use num pad keys to place crosses", "Good luck!")
DRAW_MESSAGE = "It's a draw!"
WIN_MESSAGE = "The winner is {mark} !!!"
ACK_PROMPT = "Press Enter key to play again:"

DEFAULT_LOG_LEVEL = "INFO"


def log_level() -> int:
    """Logging level from TTT_LOG_LEVEL, falling back to INFO.

    Accepts level names (``debug``, ``WARNING``) or numeric values.
    """
    raw = os.getenv("TTT_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.INFO
