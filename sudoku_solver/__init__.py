"""Backtracking Sudoku solver."""

from .sudoku import (
    Board,
    CellRef,
    has_duplicates,
    is_legal_board,
    next_empty_cell,
    solve,
    to_printable,
)

__all__ = [
    "Board",
    "CellRef",
    "has_duplicates",
    "is_legal_board",
    "next_empty_cell",
    "solve",
    "to_printable",
]
