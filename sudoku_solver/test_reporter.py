"""Tests for timed solver runs."""

from . import reporter
from .puzzles import PUZZLES


def test_run_puzzle_records_solution_and_time():
    run = reporter.run_puzzle("easy1", PUZZLES["easy1"].base_board)
    assert run.solved
    assert run.solution == PUZZLES["easy1"].solution_board
    assert run.elapsed >= 0
    assert reporter.format_elapsed(run).startswith("Solved in ")


def test_run_puzzle_without_solution():
    run = reporter.run_puzzle("unsolvable", PUZZLES["unsolvable"].base_board)
    assert not run.solved
    assert reporter.format_elapsed(run).startswith("Gave up after ")


def test_print_run_shows_both_boards(capsys):
    run = reporter.run_puzzle("easy1", PUZZLES["easy1"].base_board)
    reporter.print_run(run)
    out = capsys.readouterr().out
    assert "Puzzle: easy1" in out
    assert " 96| 4 | 3 " in out
    assert "296|145|837" in out
