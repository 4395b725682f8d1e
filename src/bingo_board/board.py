"""Board entities and assembly of a dealt deck onto an N x N grid."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .deck import build_deck
from .errors import EmptyPool, OutOfRange
from .labels import LabelPool
from .rng import PyRandomSource, RandomSource

logger = logging.getLogger(__name__)

CENTER = "center"
RANDOM = "random"
FREE_CELL_POLICIES = (CENTER, RANDOM)


@dataclass
class Square:
    row: int
    col: int
    label: str
    checked: bool = False
    free: bool = False

    def toggle(self) -> None:
        # the free square stays solved
        if not self.free:
            self.checked = not self.checked


@dataclass
class Board:
    """Row-major grid of ``size * size`` squares with exactly one free square."""

    size: int
    squares: List[Square] = field(default_factory=list)

    def square_at(self, row: int, col: int) -> Square:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise OutOfRange(f"square ({row},{col}) outside a {self.size}x{self.size} board")
        return self.squares[row * self.size + col]

    def toggle(self, row: int, col: int) -> None:
        self.square_at(row, col).toggle()

    @property
    def free_square(self) -> Optional[Square]:
        return next((sq for sq in self.squares if sq.free), None)

    @property
    def rows(self) -> List[List[Square]]:
        return [self.squares[r * self.size:(r + 1) * self.size] for r in range(self.size)]

    @property
    def columns(self) -> List[List[Square]]:
        return [self.squares[c::self.size] for c in range(self.size)]

    @property
    def diagonals(self) -> List[List[Square]]:
        main = [sq for sq in self.squares if sq.row == sq.col]
        anti = [sq for sq in self.squares if sq.row == self.size - sq.col - 1]
        return [main, anti]


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError("size must be >= 1")


def free_cell_index(size: int, policy: str, rng: RandomSource) -> int:
    """Grid index reserved for the free label.

    ``center`` is the geometric center for odd sizes; for even sizes it is the
    first cell of the lower-middle row, which is off-center but deterministic.
    """
    cells = size * size
    if policy == CENTER:
        return cells // 2
    if policy == RANDOM:
        return rng.randint(0, cells - 1)
    raise ValueError(f"free cell policy must be one of {FREE_CELL_POLICIES}, got {policy!r}")


def assemble(
    pool: LabelPool,
    deck: Sequence[str],
    size: int,
    policy: str = CENTER,
    rng: Optional[RandomSource] = None,
) -> Board:
    if len(pool) == 0:
        raise EmptyPool("cannot assemble a board from an empty label pool")
    _check_size(size)
    cells = size * size
    if len(deck) != cells - 1:
        raise ValueError(f"deck must hold {cells - 1} labels, got {len(deck)}")

    free_at = free_cell_index(size, policy, rng or PyRandomSource())
    body = iter(deck)
    squares: List[Square] = []
    for i in range(cells):
        row, col = divmod(i, size)
        if i == free_at:
            squares.append(Square(row=row, col=col, label=pool.free_label, checked=True, free=True))
        else:
            squares.append(Square(row=row, col=col, label=next(body)))
    return Board(size=size, squares=squares)


def build_board(
    pool: LabelPool,
    size: int = 5,
    policy: str = CENTER,
    rng: Optional[RandomSource] = None,
) -> Board:
    """Deal and assemble a fresh board; previous boards are left untouched."""
    if len(pool) == 0:
        raise EmptyPool("cannot build a board from an empty label pool")
    _check_size(size)
    if policy not in FREE_CELL_POLICIES:
        raise ValueError(f"free cell policy must be one of {FREE_CELL_POLICIES}, got {policy!r}")
    rng = rng or PyRandomSource()
    deck = build_deck(pool, size * size - 1, exclude_free=True, rng=rng)
    board = assemble(pool, deck, size, policy=policy, rng=rng)
    logger.info(
        "Built %dx%d board from %d labels (free cell %r, policy %s)",
        size, size, len(pool), pool.free_label, policy,
    )
    return board
