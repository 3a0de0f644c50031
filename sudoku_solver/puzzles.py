"""Named Sudoku fixtures used by the CLI, the web UI and the tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .sudoku import Board, parse_puzzle


@dataclass(frozen=True)
class Puzzle:
    """An unsolved board with its expected solution, when one is known."""

    name: str
    base: str
    solution: Optional[str] = None
    description: str = ""

    @property
    def base_board(self) -> Board:
        return parse_puzzle(self.base)

    @property
    def solution_board(self) -> Optional[Board]:
        if self.solution is None:
            return None
        return parse_puzzle(self.solution)


PUZZLES: Dict[str, Puzzle] = {
    puzzle.name: puzzle
    for puzzle in (
        Puzzle(
            name="easy1",
            base=(
                "096040030"
                "057820000"
                "100900500"
                "009010008"
                "500000002"
                "400090600"
                "004003001"
                "000079260"
                "020050980"
            ),
            solution=(
                "296145837"
                "357826149"
                "148937526"
                "639512478"
                "581764392"
                "472398615"
                "964283751"
                "815479263"
                "723651984"
            ),
            description="Easy puzzle, solvable by singles alone.",
        ),
        Puzzle(
            name="classic",
            base=(
                "530070000"
                "600195000"
                "098000060"
                "800060003"
                "400803001"
                "700020006"
                "060000280"
                "000419005"
                "000080079"
            ),
            solution=(
                "534678912"
                "672195348"
                "198342567"
                "859761423"
                "426853791"
                "713924856"
                "961537284"
                "287419635"
                "345286179"
            ),
            description="The textbook example puzzle.",
        ),
        Puzzle(
            name="extreme",
            base=(
                "800000000"
                "003600000"
                "070090200"
                "050007000"
                "000045700"
                "000100030"
                "001000068"
                "008500010"
                "090000400"
            ),
            description="Very sparse puzzle; brute force takes a long time.",
        ),
        Puzzle(
            name="unsolvable",
            base=(
                "023456789"
                "000000000"
                "000000000"
                "100000000"
                "000000000"
                "000000000"
                "000000000"
                "000000000"
                "000000000"
            ),
            description="Legal board whose top-left cell has no candidate.",
        ),
    )
}

ILLEGAL_BOARDS: Dict[str, str] = {
    "row": (
        "100000001"
        "000000000"
        "000000000"
        "000000000"
        "000000000"
        "000000000"
        "000000000"
        "000000000"
        "000000000"
    ),
    "col": (
        "100000000"
        "000000000"
        "000000000"
        "000000000"
        "000000000"
        "000000000"
        "000000000"
        "000000000"
        "100000000"
    ),
    "box": (
        "123000000"
        "451000000"
        "000000000"
        "000000000"
        "000000000"
        "000000000"
        "000000000"
        "000000000"
        "000000000"
    ),
}


def get_puzzle(name: str) -> Puzzle:
    try:
        return PUZZLES[name]
    except KeyError:
        known = ", ".join(PUZZLES)
        raise KeyError(f"Unknown puzzle {name!r}; known puzzles: {known}") from None


def illegal_board(kind: str) -> Board:
    """Return a fresh board that breaks the rule for ``kind`` (row, col or box)."""
    return parse_puzzle(ILLEGAL_BOARDS[kind])
