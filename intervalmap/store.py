"""
intervalmap/store.py
════════════════════

The boundary store: an ordered collection of ``Boundary`` records, one
per point where the piecewise-constant function changes value.

A stored ``Boundary(k, v)`` means "``v`` holds for every key in
``[k, next stored key)``".  Records are kept in a
``sortedcontainers.SortedKeyList`` keyed on ``Boundary.key``.  The list
only ever bisects on keys, which uses ``<`` and nothing else, so keys
need not be hashable or support ``==``.

Positions handed out by the store are integer ranks in key order:

    0 .................. len(store)
    ^ first boundary     ^ "end" (no boundary)

An insertion at rank ``p`` shifts every rank ``>= p`` up by one; callers
holding positions across an insertion must adjust them.
"""

from __future__ import annotations

from operator import attrgetter
from typing import Any, Generic, Iterator, Optional, Tuple

from sortedcontainers import SortedKeyList

from .protocols import K, V, keys_equal


class Boundary(Generic[K, V]):
    """A (key, value) pair marking the start of a constant-value run.

    The key is fixed for the lifetime of the record; the value may be
    overwritten in place, which never disturbs the ordering.
    """

    __slots__ = ("key", "value")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value

    def as_tuple(self) -> Tuple[K, V]:
        return (self.key, self.value)

    def __repr__(self) -> str:
        return f"Boundary({self.key!r}, {self.value!r})"


class BoundaryStore(Generic[K, V]):
    """Ordered key -> value container with rank-based primitives."""

    def __init__(self) -> None:
        self._boundaries: SortedKeyList = SortedKeyList(key=attrgetter("key"))

    # ---- size / iteration -------------------------------------------------

    def __len__(self) -> int:
        return len(self._boundaries)

    def is_empty(self) -> bool:
        return not self._boundaries

    def __iter__(self) -> Iterator[Boundary[K, V]]:
        return iter(self._boundaries)

    def items(self) -> Iterator[Tuple[K, V]]:
        for boundary in self._boundaries:
            yield boundary.key, boundary.value

    def at(self, position: int) -> Boundary[K, V]:
        """The boundary at ``position``; ``IndexError`` past the end."""
        return self._boundaries[position]

    # ---- searches (O(log n)) ----------------------------------------------

    def first_not_less(self, key: K) -> int:
        """Rank of the first boundary whose key is ``>= key``."""
        return self._boundaries.bisect_key_left(key)

    def first_greater(self, key: K) -> int:
        """Rank of the first boundary whose key is ``> key``."""
        return self._boundaries.bisect_key_right(key)

    def predecessor(self, position: int) -> Optional[Boundary[K, V]]:
        """The boundary just before ``position``, or ``None`` at the start."""
        if position <= 0:
            return None
        return self._boundaries[position - 1]

    # ---- mutation ---------------------------------------------------------

    def insert_or_overwrite(
        self, key: K, value: V, position: Optional[int] = None
    ) -> int:
        """Insert ``(key, value)`` or overwrite the value already at ``key``.

        ``position`` is an optional hint, the result of
        ``first_not_less(key)`` on the current contents.  Returns the rank
        of the written boundary.
        """
        if position is None:
            position = self.first_not_less(key)
        if position < len(self._boundaries):
            existing = self._boundaries[position]
            if keys_equal(existing.key, key):
                existing.value = value
                return position
        self._boundaries.add(Boundary(key, value))
        return position

    def erase_range(self, start: int, stop: int) -> int:
        """Remove the boundaries at ranks ``[start, stop)``.

        Returns the number of boundaries removed.
        """
        if not start < stop:
            return 0
        del self._boundaries[start:stop]
        return stop - start

    def __repr__(self) -> str:
        pairs: Any = [b.as_tuple() for b in self._boundaries]
        return f"{type(self).__name__}({pairs!r})"
