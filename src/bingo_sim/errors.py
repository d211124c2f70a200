"""Error types raised while loading inputs or scoring a simulation."""

from __future__ import annotations


class SimulationError(Exception):
    """Base class for all fatal simulation errors."""

    exit_code = 1


class BoardsNotFoundError(SimulationError, FileNotFoundError):
    exit_code = 2


class DrawsNotFoundError(SimulationError, FileNotFoundError):
    exit_code = 2


class BoardParseError(SimulationError, ValueError):
    exit_code = 3


class DrawParseError(SimulationError, ValueError):
    exit_code = 3


class NoWinnerError(SimulationError):
    """Draw sequence exhausted without any board completing a row or column."""

    exit_code = 4
