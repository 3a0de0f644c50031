"""Backtracking Sudoku solver with board validation and ASCII rendering."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

Board = List[List[int]]
CellRef = Tuple[int, int]

SIZE = 9
BOX_SIZE = 3
EMPTY = 0
INVALID_BOARD_MESSAGE = "Invalid board.\n"

log = logging.getLogger(__name__)


def parse_puzzle(puzzle: Iterable[str]) -> Board:
    """Convert a flat iterable of characters into a 9x9 board."""
    digits = []
    for ch in puzzle:
        if ch.isdigit():
            digits.append(int(ch))
        elif ch in {".", "_", "-"}:
            digits.append(EMPTY)
    if len(digits) != SIZE * SIZE:
        raise ValueError(f"Sudoku puzzle must yield 81 cells, got {len(digits)}")
    return [digits[i : i + SIZE] for i in range(0, SIZE * SIZE, SIZE)]


def serialize_board(board: Board) -> str:
    """Return board as a single string for easy comparison."""
    return "".join(str(cell) for row in board for cell in row)


def has_duplicates(values: Iterable[int], ignore: int = EMPTY) -> bool:
    """Return True if ``values`` repeats any element other than ``ignore``."""
    seen: set[int] = set()
    for value in values:
        if value == ignore:
            continue
        if value in seen:
            return True
        seen.add(value)
    return False


def box_index(row: int, col: int) -> int:
    return col // BOX_SIZE + BOX_SIZE * (row // BOX_SIZE)


def _rows(board: Board) -> Board:
    return board


def _columns(board: Board) -> Board:
    return [[row[col] for row in board] for col in range(SIZE)]


def _boxes(board: Board) -> Board:
    boxes: Board = [[] for _ in range(SIZE)]
    for row_idx, row in enumerate(board):
        for col_idx, value in enumerate(row):
            boxes[box_index(row_idx, col_idx)].append(value)
    return boxes


def is_legal_board(board: Board) -> bool:
    """Check that no row, column or box repeats a placed digit.

    Empty cells never count as duplicates. Groups are built lazily so the
    check stops at the first group type holding a conflict. Digits outside
    1-9 are not rejected here.
    """
    for groups in (_rows, _columns, _boxes):
        if any(has_duplicates(group) for group in groups(board)):
            return False
    return True


def next_empty_cell(board: Board) -> Optional[CellRef]:
    for row_idx, row in enumerate(board):
        for col_idx, value in enumerate(row):
            if value == EMPTY:
                return row_idx, col_idx
    return None


def solve(board: Board, debug: bool = False) -> Optional[Board]:
    """Solve the puzzle by depth-first search over copies of ``board``.

    Empty cells are filled in row-major order, digits tried in ascending
    order, and every candidate board is checked with :func:`is_legal_board`
    before going deeper. The first complete board found is returned, so the
    result is deterministic. Returns None for an illegal board or when no
    assignment completes it. The input board is never modified.
    """
    if not is_legal_board(board):
        return None
    if debug:
        log.debug("Searching board:\n%s", to_printable(board))
    empty = next_empty_cell(board)
    if empty is None:
        return board
    row, col = empty
    for candidate in range(1, SIZE + 1):
        trial = [line[:] for line in board]
        trial[row][col] = candidate
        result = solve(trial, debug)
        if result is not None:
            return result
    return None


def solve_puzzle(puzzle: Iterable[str]) -> Board:
    board = parse_puzzle(puzzle)
    solution = solve(board)
    if solution is None:
        raise ValueError("Sudoku puzzle cannot be solved")
    return solution


def _is_grid(board: Optional[Sequence[Sequence[int]]]) -> bool:
    if board is None or len(board) != SIZE:
        return False
    return all(len(row) == SIZE for row in board)


def to_printable(board: Optional[Board]) -> str:
    """Render the board as ASCII with ``|`` and ``---+---+---`` box dividers."""
    if not _is_grid(board):
        return INVALID_BOARD_MESSAGE
    lines = []
    for r, row in enumerate(board):
        if r % BOX_SIZE == 0 and r:
            lines.append("---+---+---")
        chunks = []
        for c, value in enumerate(row):
            if c % BOX_SIZE == 0 and c:
                chunks.append("|")
            chunks.append(str(value) if value else " ")
        lines.append("".join(chunks))
    return "\n".join(lines) + "\n"


__all__ = [
    "Board",
    "CellRef",
    "INVALID_BOARD_MESSAGE",
    "box_index",
    "has_duplicates",
    "is_legal_board",
    "next_empty_cell",
    "parse_puzzle",
    "serialize_board",
    "solve",
    "solve_puzzle",
    "to_printable",
]
