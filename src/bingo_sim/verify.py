from __future__ import annotations

from collections import Counter
from typing import Dict, List, Sequence

from .board import cols_of_board, rows_of_board

MAX_VALUE = 99


def check_no_duplicates_within_boards(boards: Sequence[Sequence[Sequence[int]]]) -> bool:
    for board in boards:
        seen = set()
        for row in board:
            for x in row:
                if x in seen:
                    return False
                seen.add(x)
    return True


def check_values_in_range(boards: Sequence[Sequence[Sequence[int]]], max_value: int = MAX_VALUE) -> bool:
    return all(0 <= x <= max_value for board in boards for row in board for x in row)


def duplicate_draws(draws: Sequence[int]) -> List[int]:
    counts = Counter(draws)
    return sorted(x for x, c in counts.items() if c > 1)


def unused_draws(boards: Sequence[Sequence[Sequence[int]]], draws: Sequence[int]) -> List[int]:
    on_boards = {x for board in boards for row in board for x in row}
    return sorted(set(draws) - on_boards)


def unwinnable_boards(boards: Sequence[Sequence[Sequence[int]]], draws: Sequence[int]) -> List[int]:
    """Indexes of boards with no row or column fully covered by ``draws``."""
    drawn = set(draws)
    out: List[int] = []
    for idx, board in enumerate(boards):
        lines = rows_of_board(board) + cols_of_board(board)
        if not any(all(x in drawn for x in line) for line in lines):
            out.append(idx)
    return out


def verify_inputs(
    boards: Sequence[Sequence[Sequence[int]]], draws: Sequence[int]
) -> Dict[str, object]:
    never_win = unwinnable_boards(boards, draws)
    return {
        "board_count": len(boards),
        "draw_count": len(draws),
        "ok_no_duplicates_within_boards": check_no_duplicates_within_boards(boards),
        "ok_values_in_range": check_values_in_range(boards),
        "duplicate_draws": duplicate_draws(draws),
        "unused_draws": unused_draws(boards, draws),
        "unwinnable_boards": never_win,
        "ok_any_winner": len(never_win) < len(boards),
    }
