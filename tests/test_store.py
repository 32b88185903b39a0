# tests/test_store.py
"""
Tests for the boundary store primitives.
"""

import pytest

from intervalmap.store import Boundary, BoundaryStore
from tests.conftest import OrderOnlyKey


def _store(*pairs):
    store = BoundaryStore()
    for k, v in pairs:
        store.insert_or_overwrite(k, v)
    return store


class TestSearches:

    def test_empty(self):
        store = BoundaryStore()
        assert store.is_empty()
        assert len(store) == 0
        assert store.first_not_less(5) == 0
        assert store.first_greater(5) == 0
        assert store.predecessor(0) is None

    def test_first_not_less_and_first_greater(self):
        store = _store((0, "a"), (5, "b"), (9, "c"))
        assert store.first_not_less(5) == 1
        assert store.first_greater(5) == 2
        assert store.first_not_less(6) == 2
        assert store.first_greater(6) == 2
        assert store.first_not_less(-1) == 0
        assert store.first_greater(9) == 3

    def test_predecessor(self):
        store = _store((0, "a"), (5, "b"))
        assert store.predecessor(0) is None
        assert store.predecessor(1).as_tuple() == (0, "a")
        assert store.predecessor(2).as_tuple() == (5, "b")

    def test_at_past_end_raises(self):
        store = _store((0, "a"))
        with pytest.raises(IndexError):
            store.at(1)


class TestMutation:

    def test_insert_keeps_key_order(self):
        store = _store((5, "b"), (0, "a"), (9, "c"), (3, "x"))
        assert list(store.items()) == [(0, "a"), (3, "x"), (5, "b"), (9, "c")]

    def test_overwrite_in_place(self):
        store = _store((0, "a"), (5, "b"))
        position = store.insert_or_overwrite(5, "z")
        assert position == 1
        assert len(store) == 2
        assert list(store.items()) == [(0, "a"), (5, "z")]

    def test_insert_returns_rank(self):
        store = _store((0, "a"), (5, "b"))
        assert store.insert_or_overwrite(3, "m", store.first_not_less(3)) == 1
        assert store.at(1).as_tuple() == (3, "m")

    def test_erase_range(self):
        store = _store(*[(k, k) for k in range(10)])
        assert store.erase_range(2, 5) == 3
        assert [k for k, _ in store.items()] == [0, 1, 5, 6, 7, 8, 9]

    def test_erase_empty_range_is_noop(self):
        store = _store((0, "a"), (1, "b"))
        assert store.erase_range(1, 1) == 0
        assert store.erase_range(2, 1) == 0
        assert len(store) == 2

    def test_erase_everything(self):
        store = _store(*[(k, k) for k in range(4)])
        assert store.erase_range(0, 4) == 4
        assert store.is_empty()


class TestOrderOnlyKeys:
    """The store must never hash keys or compare them with anything but <."""

    def test_insert_overwrite_erase(self):
        store = BoundaryStore()
        for n in (7, 1, 4, 9):
            store.insert_or_overwrite(OrderOnlyKey(n), n)
        store.insert_or_overwrite(OrderOnlyKey(4), 40)
        assert [(k.n, v) for k, v in store.items()] == [(1, 1), (4, 40), (7, 7), (9, 9)]
        store.erase_range(1, 3)
        assert [(k.n, v) for k, v in store.items()] == [(1, 1), (9, 9)]

    def test_searches(self):
        store = BoundaryStore()
        for n in (0, 5, 10):
            store.insert_or_overwrite(OrderOnlyKey(n), n)
        assert store.first_not_less(OrderOnlyKey(5)) == 1
        assert store.first_greater(OrderOnlyKey(5)) == 2


def test_boundary_repr():
    assert repr(Boundary(1, "x")) == "Boundary(1, 'x')"
