"""Tests for the command-line driver and the web UI."""

import asyncio
import logging

import pytest
from aiohttp import test_utils
from typer.testing import CliRunner

from . import main
from .puzzles import PUZZLES

runner = CliRunner()


def test_solve_defaults_to_easy_puzzle():
    result = runner.invoke(main.app, ["solve"])
    assert result.exit_code == 0, result.output
    assert "Puzzle: easy1" in result.output
    assert "296|145|837" in result.output
    assert "Solved in " in result.output


def test_solve_reports_missing_solution():
    result = runner.invoke(main.app, ["solve", "-p", "unsolvable"])
    assert result.exit_code == 1
    assert "No solution." in result.output


def test_solve_multiple_puzzles_prints_summary():
    result = runner.invoke(main.app, ["solve", "-p", "easy1", "-p", PUZZLES["classic"].base])
    assert result.exit_code == 0, result.output
    assert "2/2 puzzles solved" in result.output


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_solve_debug_logs_search(restore_root_logger, caplog):
    caplog.set_level(logging.DEBUG, logger="sudoku_solver.sudoku")
    result = runner.invoke(main.app, ["solve", "--debug"])
    assert result.exit_code == 0, result.output
    assert "Solved in " in result.output
    assert "Searching board" in caplog.text


def test_solve_debug_from_environment(restore_root_logger, caplog):
    caplog.set_level(logging.DEBUG, logger="sudoku_solver.sudoku")
    result = runner.invoke(main.app, ["solve"], env={"SUDOKU_DEBUG": "1"})
    assert result.exit_code == 0, result.output
    assert "Searching board" in caplog.text


def test_solve_all_covers_fixtures_with_known_solutions():
    result = runner.invoke(main.app, ["solve", "--all"])
    assert result.exit_code == 0, result.output
    assert "Puzzle: easy1" in result.output
    assert "Puzzle: classic" in result.output
    assert "Puzzle: extreme" not in result.output
    assert "Puzzle: unsolvable" not in result.output


def test_solve_rejects_malformed_puzzle():
    result = runner.invoke(main.app, ["solve", "-p", "123"])
    assert result.exit_code == 1
    assert "Could not read puzzle" in result.output


def test_check_reports_legality():
    result = runner.invoke(main.app, ["check", "-p", "easy1", "-p", "illegal:box"])
    assert result.exit_code == 1
    assert "easy1: legal" in result.output
    assert "illegal:box: illegal" in result.output


def test_check_requires_a_puzzle():
    result = runner.invoke(main.app, ["check"])
    assert result.exit_code == 1


def test_puzzles_lists_fixtures():
    result = runner.invoke(main.app, ["puzzles"])
    assert result.exit_code == 0
    for name in PUZZLES:
        assert name in result.output


async def _request(method, path, data=None):
    async with test_utils.TestClient(test_utils.TestServer(main.create_app())) as client:
        response = await client.request(method, path, data=data)
        return response.status, await response.text()


def test_index_page_renders_form():
    status, text = asyncio.run(_request("GET", "/"))
    assert status == 200
    assert 'action="/solve"' in text
    assert "easy1" in text


def test_solve_page_shows_solution():
    status, text = asyncio.run(_request("POST", "/solve", {"puzzle": PUZZLES["easy1"].base}))
    assert status == 200
    assert "Solved custom." in text
    assert "296|145|837" in text


def test_solve_page_uses_fixture_when_textarea_is_empty():
    status, text = asyncio.run(_request("POST", "/solve", {"puzzle": "", "fixture": "easy1"}))
    assert status == 200
    assert "Solved easy1." in text


def test_solve_page_reports_malformed_input():
    status, text = asyncio.run(_request("POST", "/solve", {"puzzle": "not a sudoku"}))
    assert status == 200
    assert "Could not read puzzle" in text


def test_solve_page_reports_unsolvable_fixture():
    status, text = asyncio.run(_request("POST", "/solve", {"puzzle": "", "fixture": "unsolvable"}))
    assert status == 200
    assert "No solution for unsolvable." in text


async def _post_then_get(puzzle):
    async with test_utils.TestClient(test_utils.TestServer(main.create_app())) as client:
        await client.post("/solve", data={"puzzle": puzzle})
        response = await client.get("/")
        return await response.text()


def test_index_page_does_not_show_previous_submission():
    text = asyncio.run(_post_then_get("guestpuzzle " + PUZZLES["classic"].base))
    assert "guestpuzzle" not in text
    assert PUZZLES["classic"].base not in text
    assert "534|678|912" not in text
