from __future__ import annotations

import hashlib
import json
from typing import Iterable, List, Sequence, Tuple

BOARD_SIZE = 5
CELLS_PER_BOARD = BOARD_SIZE * BOARD_SIZE
MARKED = -1

Board = List[List[int]]


def mark_number(board: Board, number: int) -> bool:
    """Mark the first cell equal to ``number`` (row-major). Returns False if absent."""
    for row in board:
        for col, value in enumerate(row):
            if value == number:
                row[col] = MARKED
                return True
    return False


def rows_of_board(board: Sequence[Sequence[int]]) -> List[Tuple[int, ...]]:
    return [tuple(row) for row in board]


def cols_of_board(board: Sequence[Sequence[int]]) -> List[Tuple[int, ...]]:
    if not board:
        return []
    return [tuple(board[i][j] for i in range(len(board))) for j in range(len(board[0]))]


def check_for_win(board: Sequence[Sequence[int]]) -> bool:
    # rows and columns only, diagonals never count
    for line in rows_of_board(board) + cols_of_board(board):
        if all(value == MARKED for value in line):
            return True
    return False


def unmarked_sum(board: Sequence[Sequence[int]]) -> int:
    return sum(value for row in board for value in row if value != MARKED)


def calculate_score(board: Sequence[Sequence[int]], winning_number: int) -> int:
    return unmarked_sum(board) * winning_number


def snapshot(board: Sequence[Sequence[int]]) -> Tuple[Tuple[int, ...], ...]:
    return tuple(tuple(row) for row in board)


def board_hash(board: Sequence[Sequence[int]]) -> str:
    payload = json.dumps([list(row) for row in board], ensure_ascii=True, separators=(",", ":"))
    return "sha256:" + hashlib.sha256(payload.encode("utf-8")).hexdigest()


def boards_hash(boards: Iterable[Sequence[Sequence[int]]]) -> str:
    hashes = [board_hash(b) for b in boards]
    payload = json.dumps(hashes, ensure_ascii=True, separators=(",", ":"))
    return "sha256:" + hashlib.sha256(payload.encode("utf-8")).hexdigest()
