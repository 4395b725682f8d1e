"""Recoverable error conditions raised by pool editing and board generation."""

from __future__ import annotations


class BingoError(Exception):
    """Base class for user-facing bingo errors."""


class InvalidLabel(BingoError, ValueError):
    """Label text is empty or whitespace only."""


class OutOfRange(BingoError, IndexError):
    """Pool index or board coordinate outside the valid range."""


class EmptyPool(BingoError, ValueError):
    """Board assembly requested from a pool with no labels."""


class InsufficientLabels(BingoError, ValueError):
    """No body labels remain to deal from once the free label is set aside."""
