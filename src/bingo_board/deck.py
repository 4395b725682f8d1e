from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from .errors import InsufficientLabels
from .labels import LabelPool
from .rng import PyRandomSource, RandomSource

logger = logging.getLogger(__name__)


def deck_count(cell_count: int, body_size: int) -> int:
    """Number of full shuffles needed to cover ``cell_count`` cells."""
    if body_size <= 0:
        raise InsufficientLabels("no labels available to deal")
    return math.ceil(cell_count / body_size)


def shuffled(labels: Sequence[str], rng: RandomSource) -> List[str]:
    """Fisher-Yates shuffle into a new list; the input is left untouched."""
    out = list(labels)
    for i in range(len(out) - 1, 0, -1):
        j = rng.randint(0, i)
        out[i], out[j] = out[j], out[i]
    return out


def build_deck(
    pool: LabelPool,
    cell_count: int,
    exclude_free: bool = True,
    rng: Optional[RandomSource] = None,
) -> List[str]:
    """Deal exactly ``cell_count`` labels from independent shuffles of the pool.

    Each consecutive block of ``len(body)`` entries is a permutation of the body
    labels. No dedup happens across block seams, so a label can repeat where
    one shuffle ends and the next begins.
    """
    if cell_count < 0:
        raise ValueError("cell_count must be >= 0")
    body = pool.body_labels(exclude_free=exclude_free)
    decks = deck_count(cell_count, len(body))
    rng = rng or PyRandomSource()

    deck: List[str] = []
    for _ in range(decks):
        deck.extend(shuffled(body, rng))
    logger.debug("Dealt %d shuffles of %d labels for %d cells", decks, len(body), cell_count)
    return deck[:cell_count]
