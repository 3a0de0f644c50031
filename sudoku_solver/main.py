#!/usr/bin/env python3
"""Command-line driver and web UI for the backtracking Sudoku solver."""

import asyncio
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import typer
from aiohttp import web
from jinja2 import Environment, FileSystemLoader, select_autoescape

from .input_manager import prepare_puzzles, resolve_puzzle
from .puzzles import PUZZLES
from .reporter import print_summary, run_puzzle
from .sudoku import Board, is_legal_board, to_printable

app = typer.Typer(help="Solve and validate 9x9 Sudoku puzzles by brute-force backtracking.")

DEFAULT_PUZZLE = "easy1"
BASE_DIR = Path(__file__).resolve().parent
TEMPLATE_ENV = Environment(
    loader=FileSystemLoader(str(BASE_DIR)),
    autoescape=select_autoescape(),
)


def _load(entries: List[str]) -> List[Tuple[str, Board]]:
    try:
        return prepare_puzzles(entries)
    except ValueError as exc:
        typer.echo(f"Could not read puzzle: {exc}", err=True)
        raise typer.Exit(code=1)


@app.command("solve")
def solve_command(
    puzzle: List[str] = typer.Option(
        [], "--puzzle", "-p", help="Fixture name, 81-cell puzzle string or file path (repeatable)."
    ),
    all_puzzles: bool = typer.Option(
        False, "--all", help="Solve every bundled fixture with a known solution."
    ),
    debug: bool = typer.Option(
        False, "--debug", envvar="SUDOKU_DEBUG", help="Log every board visited by the search."
    ),
) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    entries = list(puzzle)
    if all_puzzles:
        entries.extend(name for name, fixture in PUZZLES.items() if fixture.solution)
    if not entries:
        entries = [DEFAULT_PUZZLE]

    prepared = _load(entries)
    runs = [run_puzzle(name, board, debug=debug) for name, board in prepared]
    print_summary(runs)
    if not all(run.solved for run in runs):
        raise typer.Exit(code=1)


@app.command()
def check(
    puzzle: List[str] = typer.Option(
        [], "--puzzle", "-p", help="Fixture name, illegal:<row|col|box>, puzzle string or file path."
    ),
) -> None:
    prepared = _load(puzzle)
    if not prepared:
        typer.echo("Provide at least one puzzle with --puzzle.", err=True)
        raise typer.Exit(code=1)

    illegal = 0
    for name, board in prepared:
        legal = is_legal_board(board)
        if not legal:
            illegal += 1
        typer.echo(f"{name}: {'legal' if legal else 'illegal'}")
    if illegal:
        raise typer.Exit(code=1)


@app.command("puzzles")
def list_puzzles() -> None:
    for name, fixture in PUZZLES.items():
        marker = "*" if fixture.solution else " "
        typer.echo(f"{marker} {name:<12} {fixture.description}")


def create_app() -> web.Application:
    """Build the web UI: a puzzle form on ``/`` that posts to ``/solve``.

    Pages are rendered from per-request values only, so one visitor never
    sees another visitor's puzzle. Searches run in the default executor to
    keep the event loop serving other clients.
    """
    template = TEMPLATE_ENV.get_template("ui_template.html")

    def render_page(
        message: Optional[str],
        puzzle_text: str = "",
        result: Optional[Dict[str, object]] = None,
    ) -> web.Response:
        return web.Response(
            text=template.render(
                message=message,
                puzzle_text=puzzle_text,
                puzzles=list(PUZZLES.values()),
                result=result,
            ),
            content_type="text/html",
        )

    async def handle_index(_: web.Request) -> web.Response:
        return render_page(None)

    async def handle_solve(request: web.Request) -> web.Response:
        reader = await request.post()
        raw_puzzle = str(reader.get("puzzle", "")).strip() or str(reader.get("fixture", ""))

        try:
            name, board = resolve_puzzle(raw_puzzle, allow_files=False)
        except ValueError as exc:
            return render_page(f"Could not read puzzle: {exc}", raw_puzzle)

        loop = asyncio.get_running_loop()
        run = await loop.run_in_executor(None, run_puzzle, name, board)
        result = {
            "name": name,
            "board": to_printable(run.board),
            "solution": to_printable(run.solution) if run.solved else None,
            "elapsed": f"{run.elapsed:.3f}",
        }
        message = f"Solved {name}." if run.solved else f"No solution for {name}."
        return render_page(message, raw_puzzle, result)

    web_app = web.Application()
    web_app.router.add_get("/", handle_index)
    web_app.router.add_post("/solve", handle_solve)
    return web_app


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", "--host", envvar="SUDOKU_HOST", help="Host interface for the UI."),
    port: int = typer.Option(8080, "--port", "-p", envvar="SUDOKU_PORT", help="Port for the UI."),
) -> None:
    web_app = create_app()
    typer.echo(f"Open http://{host}:{port} in a browser to use the solver.")
    web.run_app(web_app, host=host, port=port)


if __name__ == "__main__":
    app()
