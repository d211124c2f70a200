"""Draw simulation over a collection of boards."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .board import Board, calculate_score, check_for_win, mark_number, snapshot
from .errors import NoWinnerError

logger = logging.getLogger(__name__)

WINNER_CHOICES = ("last", "first")


@dataclass(frozen=True)
class WinRecord:
    """A board completing its first row or column."""

    board_index: int
    draw_index: int
    number: int
    board: Tuple[Tuple[int, ...], ...]
    score: int


@dataclass
class SimulationResult:
    wins: List[WinRecord] = field(default_factory=list)
    draws_played: int = 0
    boards_remaining: int = 0

    @property
    def first_win(self) -> Optional[WinRecord]:
        return self.wins[0] if self.wins else None

    @property
    def last_win(self) -> Optional[WinRecord]:
        return self.wins[-1] if self.wins else None


def simulate(boards: Sequence[Board], draws: Sequence[int]) -> SimulationResult:
    """Play ``draws`` in order against ``boards``, marking them in place.

    A board that wins is recorded and dropped from the active set; it is never
    marked or checked again. When several boards win on the same number they
    are recorded in collection order, so the later one becomes the last winner.
    """
    active: List[Tuple[int, Board]] = list(enumerate(boards))
    result = SimulationResult()
    for draw_index, number in enumerate(draws):
        result.draws_played += 1
        if not active:
            continue
        retained: List[Tuple[int, Board]] = []
        for board_index, board in active:
            if mark_number(board, number) and check_for_win(board):
                record = WinRecord(
                    board_index=board_index,
                    draw_index=draw_index,
                    number=number,
                    board=snapshot(board),
                    score=calculate_score(board, number),
                )
                result.wins.append(record)
                logger.debug(
                    "Board %d won on draw %d (number %d, score %d)",
                    board_index,
                    draw_index,
                    number,
                    record.score,
                )
            else:
                retained.append((board_index, board))
        active = retained
    result.boards_remaining = len(active)
    logger.info(
        "Simulation finished: %d of %d boards won after %d draws",
        len(result.wins),
        len(boards),
        result.draws_played,
    )
    return result


def select_winner(result: SimulationResult, winner: str = "last") -> WinRecord:
    if winner not in WINNER_CHOICES:
        raise ValueError(f"winner must be one of {', '.join(WINNER_CHOICES)}: {winner!r}")
    record = result.last_win if winner == "last" else result.first_win
    if record is None:
        raise NoWinnerError(f"No board won after {result.draws_played} draws")
    return record


def final_score(result: SimulationResult, winner: str = "last") -> int:
    return select_winner(result, winner).score
