from __future__ import annotations

from collections import Counter
from typing import Dict, Sequence

from .board import Board


def label_frequencies(board: Board, include_free: bool = False) -> Dict[str, int]:
    counts: Counter[str] = Counter()
    for sq in board.squares:
        if sq.free and not include_free:
            continue
        counts[sq.label] += 1
    return dict(counts)


def blocks_are_permutations(deck: Sequence[str], body: Sequence[str]) -> bool:
    """Check that each full ``len(body)`` block of ``deck`` is a permutation of ``body``.

    A trailing partial block must only hold labels from ``body``, without repeats.
    """
    k = len(body)
    if k == 0:
        return len(deck) == 0
    expected = sorted(body)
    for start in range(0, len(deck), k):
        block = list(deck[start:start + k])
        if len(block) == k:
            if sorted(block) != expected:
                return False
        elif Counter(block) - Counter(body):
            return False
    return True
