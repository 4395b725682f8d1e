from __future__ import annotations

import string

import pytest
from hypothesis import given, strategies as st

from bingo_board.deck import build_deck, deck_count, shuffled
from bingo_board.errors import InsufficientLabels
from bingo_board.labels import LabelPool
from bingo_board.report import blocks_are_permutations
from bingo_board.rng import create_rng


def test_deck_count_rounds_up():
    assert deck_count(24, 3) == 8
    assert deck_count(25, 3) == 9
    assert deck_count(0, 4) == 0
    with pytest.raises(InsufficientLabels):
        deck_count(10, 0)


def test_empty_body_raises():
    with pytest.raises(InsufficientLabels):
        build_deck(LabelPool(), 5)
    # only the free label is present
    with pytest.raises(InsufficientLabels):
        build_deck(LabelPool(["X"], free_index=0), 5, exclude_free=True)


def test_negative_cell_count_is_rejected():
    with pytest.raises(ValueError):
        build_deck(LabelPool(["A"]), -1)


def test_free_label_excluded_from_body():
    pool = LabelPool(["A", "B", "FREEBIE"], free_index=2)
    deck = build_deck(pool, 10, rng=create_rng("py_random", 7))
    assert "FREEBIE" not in deck
    assert len(deck) == 10
    deck_all = build_deck(pool, 9, exclude_free=False, rng=create_rng("py_random", 7))
    assert sorted(deck_all[:3]) == ["A", "B", "FREEBIE"]


def test_seeded_deck_is_reproducible():
    pool = LabelPool(list("ABCDEFG"))
    d1 = build_deck(pool, 24, rng=create_rng("py_random", 99))
    d2 = build_deck(pool, 24, rng=create_rng("py_random", 99))
    assert d1 == d2


def test_shuffle_does_not_mutate_input():
    labels = ["A", "B", "C", "D"]
    out = shuffled(labels, create_rng("py_random", 1))
    assert labels == ["A", "B", "C", "D"]
    assert sorted(out) == labels


@given(
    labels=st.lists(st.text(alphabet=string.ascii_letters, min_size=1, max_size=4), min_size=1, max_size=12),
    cell_count=st.integers(min_value=0, max_value=120),
    seed=st.integers(min_value=0, max_value=2**32),
)
def test_every_block_is_a_permutation(labels, cell_count, seed):
    pool = LabelPool(list(labels))
    deck = build_deck(pool, cell_count, exclude_free=False, rng=create_rng("py_random", seed))
    assert len(deck) == cell_count
    assert blocks_are_permutations(deck, labels)
