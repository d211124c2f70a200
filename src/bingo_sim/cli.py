from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import typer

from .config import resolve_parameters
from .errors import SimulationError
from .loader import load_boards, load_draws
from .logging_setup import setup_logging
from .serialize import build_report, build_run_meta, describe_inputs, emit_report_json
from .simulate import WINNER_CHOICES, select_winner, simulate
from .verify import verify_inputs
from .version import __version__

app = typer.Typer(help="Bingo draw simulator CLI")

logger = logging.getLogger(__name__)


def _fail(message: str, code: int) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(code=code)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(0)


@app.callback()
def common_options(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show application version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    pass


@app.command()
def run(
    boards: str = typer.Option(None, "--boards", help="Path to boards file (25 integers per board)"),
    draws: str = typer.Option(None, "--draws", help="Path to draw sequence file (built-in sequence if omitted)"),
    config: str = typer.Option(None, "--config", help="Path to config file (YAML/JSON)"),
    winner: str = typer.Option(None, "--winner", help="last|first"),
    out_report: str = typer.Option(None, "--out-report", help="report.json output path"),
    force: bool = typer.Option(False, "--force", help="Overwrite report if it exists"),
    no_mkdirs: bool = typer.Option(False, "--no-mkdirs", help="Do not create parent directories"),
    log_file: str = typer.Option(None, "--log-file", help="Log file path"),
    log_level: str = typer.Option(None, "--log-level", help="DEBUG|INFO|WARNING|ERROR"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Resolve params and exit"),
) -> None:
    """Play the draw sequence and print the winning board's score."""

    cli_overrides = {
        "boards": boards,
        "draws": draws,
        "winner": winner,
        "out_report": out_report,
        "log_file": log_file,
        "log_level": log_level,
    }
    try:
        resolved, params_hash, _cfg_path = resolve_parameters(
            config_path_str=config, cli_overrides=cli_overrides
        )
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)

    setup_logging(level=str(resolved["log_level"]), log_file=resolved.get("log_file"))

    winner_mode = str(resolved["winner"]).lower()
    if winner_mode not in WINNER_CHOICES:
        raise _fail(f"--winner must be one of {', '.join(WINNER_CHOICES)}: {winner_mode!r}", 2)

    if dry_run:
        typer.echo(f"Boards: {resolved['boards']}")
        typer.echo(f"Draws: {resolved['draws'] or '<built-in>'}")
        typer.echo(f"Winner: {winner_mode}")
        typer.echo(f"Params hash: {params_hash}")
        raise typer.Exit(0)

    draws_path = Path(resolved["draws"]) if resolved.get("draws") else None
    try:
        board_list = load_boards(Path(resolved["boards"]))
        draw_seq = load_draws(draws_path)
        inputs = describe_inputs(board_list, draw_seq)
        result = simulate(board_list, draw_seq)
        record = select_winner(result, winner_mode)
    except SimulationError as exc:
        raise _fail(str(exc), exc.exit_code)

    logger.info(
        "Winner (%s): board %d on number %d", winner_mode, record.board_index, record.number
    )

    if resolved.get("out_report"):
        report = build_report(
            inputs=inputs,
            result=result,
            winner=record,
            winner_mode=winner_mode,
            run_meta=build_run_meta(app_version=__version__, params_hash=params_hash),
        )
        try:
            emit_report_json(
                Path(resolved["out_report"]),
                report=report,
                mkdirs=(not no_mkdirs),
                overwrite=force,
            )
        except FileExistsError as exc:
            raise _fail(str(exc), 1)
        logger.info("Report written to %s", resolved["out_report"])

    typer.echo(f"Final score: {record.score}")
    raise typer.Exit(code=0)


@app.command()
def verify(
    boards: str = typer.Option(..., "--boards", help="Path to boards file"),
    draws: str = typer.Option(None, "--draws", help="Path to draw sequence file"),
    strict: bool = typer.Option(False, "--strict", help="Fail on any deviation"),
) -> None:
    """Check boards and draws for problems without running the simulation."""
    try:
        board_list = load_boards(Path(boards))
        draw_seq = load_draws(Path(draws) if draws else None)
    except SimulationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=exc.exit_code)

    report = verify_inputs(board_list, draw_seq)
    typer.echo(json.dumps(report, sort_keys=True, indent=2))

    clean = (
        report["ok_no_duplicates_within_boards"]
        and report["ok_values_in_range"]
        and not report["duplicate_draws"]
        and not report["unwinnable_boards"]
    )
    raise typer.Exit(code=1 if (strict and not clean) else 0)


def main(_argv: list[str] | None = None) -> int:
    try:
        app(standalone_mode=True)
        return 0
    except SystemExit as e:
        return int(e.code) if e.code is not None else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
