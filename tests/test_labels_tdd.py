from __future__ import annotations

import pytest

from bingo_board.errors import InvalidLabel, OutOfRange
from bingo_board.labels import FREE_LABEL, LabelPool


def test_add_strips_and_rejects_blank():
    pool = LabelPool()
    pool.add("  coffee ")
    assert pool.labels == ["coffee"]
    with pytest.raises(InvalidLabel):
        pool.add("")
    with pytest.raises(InvalidLabel):
        pool.add("   \t")
    assert len(pool) == 1


def test_remove_out_of_range():
    pool = LabelPool(["A", "B"])
    with pytest.raises(OutOfRange):
        pool.remove(2)
    with pytest.raises(OutOfRange):
        pool.remove(-1)
    with pytest.raises(OutOfRange):
        LabelPool().remove()


def test_remove_without_index_pops_last():
    pool = LabelPool(["A", "B", "C"])
    assert pool.remove() == "C"
    assert pool.labels == ["A", "B"]


def test_removing_free_label_clears_designation():
    pool = LabelPool(["A", "B", "C"], free_index=1)
    assert pool.free_label == "B"
    pool.remove(1)
    assert pool.free_index is None
    assert pool.free_label == FREE_LABEL


def test_removing_earlier_label_keeps_same_free_label():
    pool = LabelPool(["A", "B", "C"], free_index=2)
    pool.remove(0)
    assert pool.free_index == 1
    assert pool.free_label == "C"
    pool.remove(1)
    assert pool.free_index is None


def test_set_free_designation():
    pool = LabelPool(["A", "B"])
    pool.set_free_designation(1)
    assert pool.body_labels() == ["A"]
    assert pool.body_labels(exclude_free=False) == ["A", "B"]
    with pytest.raises(OutOfRange):
        pool.set_free_designation(5)
    assert pool.free_index == 1
    pool.set_free_designation(None)
    assert pool.body_labels() == ["A", "B"]


def test_invalid_initial_free_index():
    with pytest.raises(OutOfRange):
        LabelPool(["A"], free_index=3)


def test_constructor_validates_labels_like_add():
    assert LabelPool([" A ", "B"]).labels == ["A", "B"]
    with pytest.raises(InvalidLabel):
        LabelPool(["A", ""])
    with pytest.raises(InvalidLabel):
        LabelPool(["  "])
