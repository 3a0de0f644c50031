"""Resolve puzzle entries from the command line or the web form into boards."""

from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from .puzzles import ILLEGAL_BOARDS, PUZZLES, illegal_board
from .sudoku import Board, parse_puzzle

ILLEGAL_PREFIX = "illegal:"
CUSTOM_NAME = "custom"


def normalize_entry(raw: str) -> Optional[str]:
    candidate = raw.strip()
    if not candidate:
        return None
    return candidate


def resolve_puzzle(entry: str, allow_files: bool = True) -> Tuple[str, Board]:
    """Turn a fixture name, ``illegal:<kind>``, file path or puzzle string into a board.

    Raises ValueError when the entry cannot be read as an 81-cell puzzle.
    """
    candidate = normalize_entry(entry)
    if candidate is None:
        raise ValueError("Puzzle entry is empty")
    if candidate in PUZZLES:
        return candidate, PUZZLES[candidate].base_board
    if candidate.startswith(ILLEGAL_PREFIX):
        kind = candidate[len(ILLEGAL_PREFIX) :]
        if kind not in ILLEGAL_BOARDS:
            known = ", ".join(ILLEGAL_BOARDS)
            raise ValueError(f"Unknown illegal board {kind!r}; expected one of: {known}")
        return candidate, illegal_board(kind)
    if allow_files:
        path = Path(candidate)
        if path.is_file():
            return path.name, parse_puzzle(path.read_text(encoding="utf-8"))
    return CUSTOM_NAME, parse_puzzle(candidate)


def prepare_puzzles(entries: Iterable[str], allow_files: bool = True) -> List[Tuple[str, Board]]:
    """Drop blank and repeated entries, then resolve each remaining one."""
    seen: set[str] = set()
    prepared: List[Tuple[str, Board]] = []
    for entry in entries:
        normalized = normalize_entry(entry)
        if not normalized or normalized in seen:
            continue
        seen.add(normalized)
        prepared.append(resolve_puzzle(normalized, allow_files=allow_files))
    return prepared
