"""Win detection over a board's rows, columns and diagonals."""

from __future__ import annotations

from typing import List

from .board import Board, Square


def lines_of(board: Board) -> List[List[Square]]:
    """All ``2 * size + 2`` lines: rows, then columns, then main and anti diagonal."""
    return [*board.rows, *board.columns, *board.diagonals]


def completed_lines(board: Board) -> List[List[Square]]:
    return [line for line in lines_of(board) if line and all(sq.checked for sq in line)]


def is_completed(board: Board) -> bool:
    """Recomputed from the current ``checked`` flags on every call; never latched."""
    if not board.squares:
        return False
    return any(all(sq.checked for sq in line) for line in lines_of(board))


def toggle(square: Square) -> None:
    square.toggle()
