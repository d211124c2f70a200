"""Bingo draw simulator: load boards, play a draw sequence, score the winner."""

from .board import BOARD_SIZE, MARKED, calculate_score, check_for_win, mark_number
from .errors import (
    BoardParseError,
    BoardsNotFoundError,
    DrawParseError,
    DrawsNotFoundError,
    NoWinnerError,
    SimulationError,
)
from .simulate import SimulationResult, WinRecord, final_score, simulate
from .version import __version__

__all__ = [
    "BOARD_SIZE",
    "MARKED",
    "mark_number",
    "check_for_win",
    "calculate_score",
    "simulate",
    "final_score",
    "SimulationResult",
    "WinRecord",
    "SimulationError",
    "BoardsNotFoundError",
    "BoardParseError",
    "DrawsNotFoundError",
    "DrawParseError",
    "NoWinnerError",
    "__version__",
]
