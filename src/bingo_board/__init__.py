"""Randomized bingo boards dealt from a label pool, with win detection."""

from .board import CENTER, RANDOM, Board, Square, assemble, build_board
from .deck import build_deck
from .errors import BingoError, EmptyPool, InsufficientLabels, InvalidLabel, OutOfRange
from .labels import FREE_LABEL, LabelPool
from .rng import create_rng
from .version import __version__
from .win import completed_lines, is_completed, lines_of, toggle

__all__ = [
    "CENTER",
    "RANDOM",
    "FREE_LABEL",
    "Board",
    "Square",
    "LabelPool",
    "assemble",
    "build_board",
    "build_deck",
    "create_rng",
    "lines_of",
    "is_completed",
    "completed_lines",
    "toggle",
    "BingoError",
    "EmptyPool",
    "InsufficientLabels",
    "InvalidLabel",
    "OutOfRange",
    "__version__",
]
