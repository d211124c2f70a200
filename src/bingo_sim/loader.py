from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Tuple

from .board import BOARD_SIZE, CELLS_PER_BOARD, Board
from .errors import BoardParseError, BoardsNotFoundError, DrawParseError, DrawsNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_DRAWS: Tuple[int, ...] = (
    1, 76, 38, 96, 62, 41, 27, 33, 4, 2, 94, 15, 89, 25, 66, 14, 30, 0, 71, 21,
    48, 44, 87, 73, 60, 50, 77, 45, 29, 18, 5, 99, 65, 16, 93, 95, 37, 3, 52, 32,
    46, 80, 98, 63, 92, 24, 35, 55, 12, 81, 51, 17, 70, 78, 61, 91, 54, 8, 72, 40,
    74, 68, 75, 67, 39, 64, 10, 53, 9, 31, 6, 7, 47, 42, 90, 20, 19, 36, 22, 43,
    58, 28, 79, 86, 57, 49, 83, 84, 97, 11, 85, 26, 69, 23, 59, 82, 88, 34, 56, 13,
)

_DRAW_SEPARATORS = re.compile(r"[,\s]+")
_INT_TOKEN = re.compile(r"-?[0-9]+")


def _parse_int(token: str, position: int, error_cls: type) -> int:
    # ASCII digits with optional leading minus
    if not _INT_TOKEN.fullmatch(token):
        raise error_cls(f"Non-integer token {token!r} at position {position}")
    value = int(token)
    if value < 0:
        raise error_cls(f"Negative value {value} at position {position}")
    return value


def _read_text(path: Path, not_found_cls: type, parse_cls: type, what: str) -> str:
    try:
        with path.open("r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        raise not_found_cls(f"{what} file not found: {path}") from None
    except OSError as exc:
        raise not_found_cls(f"Cannot open {what.lower()} file {path}: {exc.strerror or exc}") from None
    except UnicodeDecodeError as exc:
        raise parse_cls(f"{what} file {path} is not valid UTF-8 text: {exc.reason}") from None


def parse_boards(text: str) -> List[Board]:
    """Split whitespace-separated integers into 5x5 boards, row-major.

    Boards are inferred purely by count: every run of 25 tokens is one board.
    """
    tokens = text.split()
    if len(tokens) % CELLS_PER_BOARD != 0:
        raise BoardParseError(
            f"Expected a multiple of {CELLS_PER_BOARD} integers, got {len(tokens)}"
        )
    values = [_parse_int(tok, pos, BoardParseError) for pos, tok in enumerate(tokens)]
    boards: List[Board] = []
    for start in range(0, len(values), CELLS_PER_BOARD):
        cells = values[start : start + CELLS_PER_BOARD]
        boards.append([cells[r * BOARD_SIZE : (r + 1) * BOARD_SIZE] for r in range(BOARD_SIZE)])
    return boards


def load_boards(path: Path) -> List[Board]:
    text = _read_text(path, BoardsNotFoundError, BoardParseError, "Boards")
    boards = parse_boards(text)
    logger.debug("Loaded %d boards from %s", len(boards), path)
    return boards


def parse_draws(text: str) -> Tuple[int, ...]:
    tokens = [tok for tok in _DRAW_SEPARATORS.split(text) if tok]
    return tuple(_parse_int(tok, pos, DrawParseError) for pos, tok in enumerate(tokens))


def load_draws(path: Path | None) -> Tuple[int, ...]:
    """Read the draw sequence from ``path``, or fall back to ``DEFAULT_DRAWS``."""
    if path is None:
        return DEFAULT_DRAWS
    text = _read_text(path, DrawsNotFoundError, DrawParseError, "Draws")
    draws = parse_draws(text)
    logger.debug("Loaded %d draws from %s", len(draws), path)
    return draws
