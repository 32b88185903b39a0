# tests/conftest.py
"""
Shared helpers for the intervalmap test-suite.

- ``OrderOnlyKey``   a key type that supports ``<`` and nothing else
- ``EqOnlyValue``    a value type that supports ``==`` and nothing else
- ``DenseReference`` one slot per key; the obvious (slow) model of a map
"""

from typing import Any, Dict, Iterable, List

import pytest

from intervalmap import IntervalMap


class OrderOnlyKey:
    """Integer-backed key; any comparison other than ``<`` fails loudly."""

    __slots__ = ("n",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, n: int) -> None:
        self.n = n

    def __lt__(self, other: "OrderOnlyKey") -> bool:
        return self.n < other.n

    def __eq__(self, other: object) -> bool:
        raise AssertionError("key compared with ==")

    def __le__(self, other: object) -> bool:
        raise AssertionError("key compared with <=")

    def __gt__(self, other: object) -> bool:
        raise AssertionError("key compared with >")

    def __ge__(self, other: object) -> bool:
        raise AssertionError("key compared with >=")

    def __repr__(self) -> str:
        return f"K{self.n}"


class EqOnlyValue:
    """Value type with equality only (no order, no hash)."""

    __slots__ = ("v",)

    def __init__(self, v: Any) -> None:
        self.v = v

    def __eq__(self, other: object) -> bool:
        return isinstance(other, EqOnlyValue) and self.v == other.v

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        raise AssertionError("value compared with <")

    def __repr__(self) -> str:
        return f"V({self.v!r})"


class DenseReference:
    """One slot per key of a finite universe."""

    def __init__(self, default: Any, universe: Iterable[int]) -> None:
        self.cells: Dict[int, Any] = {k: default for k in universe}

    def assign(self, begin: int, end: int, value: Any) -> None:
        for k in self.cells:
            if begin <= k < end:
                self.cells[k] = value

    def value_at(self, key: int) -> Any:
        return self.cells[key]


def assert_canonical(imap: Any) -> None:
    """Adjacent stored values differ; the first differs from the default."""
    previous = imap.default
    for key, value in imap.boundaries():
        assert not (previous == value), f"{key!r} restates {value!r}"
        previous = value


def snapshot(imap: IntervalMap, keys: Iterable[int]) -> List[Any]:
    return [imap.value_at(k) for k in keys]


@pytest.fixture
def demo_map() -> IntervalMap:
    """The map from the command-line demo: default 'A', three assignments."""
    imap: IntervalMap = IntervalMap("A")
    imap.assign(0, 6, "B")
    imap.assign(2, 5, "C")
    imap.assign(4, 7, "A")
    return imap
