from __future__ import annotations

import json
import platform
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Sequence

from .board import board_hash, boards_hash
from .simulate import SimulationResult, WinRecord


def ensure_parent(path: Path, *, mkdirs: bool) -> None:
    parent = path.parent
    if not parent.exists() and mkdirs:
        parent.mkdir(parents=True, exist_ok=True)


def write_json(path: Path, data: object, *, mkdirs: bool, overwrite: bool) -> None:
    if path.exists() and not overwrite:
        raise FileExistsError(f"Refusing to overwrite existing file without --force: {path}")
    ensure_parent(path, mkdirs=mkdirs)
    text = json.dumps(data, ensure_ascii=True, sort_keys=True, indent=2)
    path.write_text(text + "\n", encoding="utf-8")


def build_run_meta(*, app_version: str, params_hash: str) -> Dict[str, object]:
    return {
        "app_version": app_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "python_version": sys.version.split()[0],
        "platform": platform.system().lower(),
        "params_hash": params_hash,
        "hash_algorithm": "sha256",
    }


def win_entry(record: WinRecord) -> Dict[str, object]:
    return {
        "board_index": record.board_index,
        "draw_index": record.draw_index,
        "number": record.number,
        "score": record.score,
        "board": [list(row) for row in record.board],
        "board_hash": board_hash(record.board),
    }


def describe_inputs(
    boards: Sequence[Sequence[Sequence[int]]], draws: Sequence[int]
) -> Dict[str, object]:
    """Summarize inputs; call before simulating since boards are marked in place."""
    return {
        "board_count": len(boards),
        "draw_count": len(draws),
        "boards_hash": boards_hash(boards),
    }


def build_report(
    *,
    inputs: Dict[str, object],
    result: SimulationResult,
    winner: WinRecord,
    winner_mode: str,
    run_meta: Dict[str, object],
) -> Dict[str, object]:
    wins: List[Dict[str, object]] = [win_entry(r) for r in result.wins]
    return {
        "run_meta": run_meta,
        "inputs": inputs,
        "wins": wins,
        "boards_remaining": result.boards_remaining,
        "winner_mode": winner_mode,
        "winner": win_entry(winner),
        "final_score": winner.score,
    }


def emit_report_json(
    path: Path, *, report: Dict[str, object], mkdirs: bool, overwrite: bool
) -> None:
    write_json(path, report, mkdirs=mkdirs, overwrite=overwrite)
