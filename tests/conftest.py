from __future__ import annotations

from pathlib import Path

import pytest

EXAMPLE_BOARDS = """\
22 13 17 11  0
 8  2 23  4 24
21  9 14 16  7
 6 10  3 18  5
 1 12 20 15 19

 3 15  0  2 22
 9 18 13 17  5
19  8  7 25 23
20 11 10 24  4
14 21 16 12  6

14 21 17 24  4
10 16 15  9 19
18  8 23 26 20
22 11 13  6  5
 2  0 12  3  7
"""

EXAMPLE_DRAWS = "7,4,9,5,11,17,23,2,0,14,21,24,10,16,13,6,15,25,12,22,18,20,8,19,3,26,1\n"


@pytest.fixture
def example_files(tmp_path: Path) -> tuple[Path, Path]:
    boards = tmp_path / "boards.txt"
    draws = tmp_path / "draws.txt"
    boards.write_text(EXAMPLE_BOARDS, encoding="utf-8")
    draws.write_text(EXAMPLE_DRAWS, encoding="utf-8")
    return boards, draws


@pytest.fixture
def example_boards():
    from bingo_sim.loader import parse_boards

    return parse_boards(EXAMPLE_BOARDS)


@pytest.fixture
def example_draws():
    from bingo_sim.loader import parse_draws

    return parse_draws(EXAMPLE_DRAWS)
