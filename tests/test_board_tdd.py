from __future__ import annotations

from collections import Counter

import pytest
from hypothesis import given, strategies as st

from bingo_board.board import assemble, build_board, free_cell_index
from bingo_board.errors import EmptyPool, InsufficientLabels, OutOfRange
from bingo_board.labels import FREE_LABEL, LabelPool
from bingo_board.rng import create_rng


@given(
    size=st.integers(min_value=1, max_value=9),
    n_labels=st.integers(min_value=1, max_value=30),
    policy=st.sampled_from(["center", "random"]),
    seed=st.integers(min_value=0, max_value=10_000),
)
def test_shape_and_single_checked_free_square(size, n_labels, policy, seed):
    pool = LabelPool([f"L{i}" for i in range(n_labels)])
    board = build_board(pool, size, policy, rng=create_rng("py_random", seed))
    assert len(board.squares) == size * size
    free = [sq for sq in board.squares if sq.free]
    assert len(free) == 1
    assert free[0].checked is True
    assert all(not sq.checked for sq in board.squares if not sq.free)
    for i, sq in enumerate(board.squares):
        assert (sq.row, sq.col) == divmod(i, size)


def test_abc_scenario_center_free():
    pool = LabelPool(["A", "B", "C"])
    board = build_board(pool, 5, "center", rng=create_rng("py_random", 2024))
    free = board.squares[12]
    assert (free.row, free.col) == (2, 2)
    assert free.free and free.checked
    assert free.label == FREE_LABEL
    counts = Counter(sq.label for sq in board.squares if not sq.free)
    assert set(counts) == {"A", "B", "C"}
    assert all(c == 8 for c in counts.values())


def test_designated_free_label_placed_and_not_dealt():
    pool = LabelPool(["A", "B", "C", "Star"], free_index=3)
    board = build_board(pool, 3, "center", rng=create_rng("py_random", 5))
    assert board.squares[4].label == "Star"
    assert all(sq.label != "Star" for sq in board.squares if not sq.free)


def test_even_size_center_is_deterministic():
    rng = create_rng("py_random", 0)
    assert free_cell_index(4, "center", rng) == 8
    assert free_cell_index(5, "center", rng) == 12


def test_random_policy_stays_in_range():
    rng = create_rng("py_random", 3)
    seen = {free_cell_index(3, "random", rng) for _ in range(200)}
    assert seen <= set(range(9))
    assert len(seen) > 1


def test_unknown_policy_rejected():
    with pytest.raises(ValueError):
        build_board(LabelPool(["A"]), 3, "corner")


def test_errors_for_degenerate_pools_and_sizes():
    with pytest.raises(EmptyPool):
        build_board(LabelPool(), 5)
    with pytest.raises(EmptyPool):
        assemble(LabelPool(), [], 1)
    with pytest.raises(InsufficientLabels):
        build_board(LabelPool(["only"], free_index=0), 3)
    with pytest.raises(ValueError):
        build_board(LabelPool(["A"]), 0)


def test_assemble_walks_deck_in_grid_order():
    pool = LabelPool(["X"], free_index=0)
    deck = list("abcdefgh")
    board = assemble(pool, deck, 3, "center")
    assert [sq.label for sq in board.squares] == ["a", "b", "c", "d", "X", "e", "f", "g", "h"]
    with pytest.raises(ValueError):
        assemble(pool, deck[:-1], 3)


def test_build_does_not_touch_pool_or_prior_board():
    pool = LabelPool(["A", "B", "C"], free_index=0)
    first = build_board(pool, 3)
    first.toggle(0, 0)
    snapshot = [(sq.label, sq.checked) for sq in first.squares]
    build_board(pool, 3)
    assert [(sq.label, sq.checked) for sq in first.squares] == snapshot
    assert pool.labels == ["A", "B", "C"]
    assert pool.free_index == 0


def test_board_toggle_bounds():
    board = build_board(LabelPool(["A", "B"]), 3)
    with pytest.raises(OutOfRange):
        board.toggle(3, 0)
    with pytest.raises(OutOfRange):
        board.toggle(0, -1)
