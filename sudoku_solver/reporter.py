"""Time solver runs and print them for the command line."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import List, Optional

import typer

from .sudoku import Board, solve, to_printable

log = logging.getLogger(__name__)


@dataclass
class SolveRun:
    """Outcome of solving one board."""

    name: str
    board: Board
    solution: Optional[Board]
    elapsed: float

    @property
    def solved(self) -> bool:
        return self.solution is not None


def run_puzzle(name: str, board: Board, debug: bool = False) -> SolveRun:
    started = time.perf_counter()
    solution = solve(board, debug=debug)
    elapsed = time.perf_counter() - started
    log.info("Puzzle %s %s in %.3f s", name, "solved" if solution is not None else "failed", elapsed)
    return SolveRun(name=name, board=board, solution=solution, elapsed=elapsed)


def format_elapsed(run: SolveRun) -> str:
    if run.solved:
        return f"Solved in {run.elapsed:.3f} seconds."
    return f"Gave up after {run.elapsed:.3f} seconds."


def print_run(run: SolveRun) -> None:
    typer.echo()
    typer.echo(f"Puzzle: {run.name}")
    typer.echo(to_printable(run.board), nl=False)
    typer.echo()
    if run.solved:
        typer.echo(to_printable(run.solution), nl=False)
    else:
        typer.echo("No solution.")
    typer.echo(format_elapsed(run))


def print_summary(runs: List[SolveRun]) -> None:
    for run in runs:
        print_run(run)
    if len(runs) > 1:
        solved = sum(1 for run in runs if run.solved)
        total = sum(run.elapsed for run in runs)
        typer.echo()
        typer.echo(f"{solved}/{len(runs)} puzzles solved in {total:.3f} seconds.")
