"""
intervalmap/interval_map.py
═══════════════════════════

``IntervalMap`` — a total function from an ordered key domain to a value
domain, stored as the sparse set of points where the value changes.

    default ──────┐ k₀        k₁        k₂
    ··············│─────────│─────────│──────────····
      default     │   v₀    │   v₁    │   v₂  …

Every key before the first boundary maps to the default value; every key
``k`` at or after a boundary maps to the value of the greatest boundary
``<= k``.

Canonical form
--------------
No two adjacent boundaries hold equal values, and the first boundary
differs from the default.  ``assign`` restores this after every call by
editing only the boundaries at and between the two ends of the painted
range.  Keys are compared with ``<`` only (equality is derived as
``not a < b and not b < a``) and values with ``==`` only.

Thread safety
-------------
None.  Wrap the map in ``SynchronizedIntervalMap`` (``intervalmap.sync``)
or guard it with one external lock.
"""

from __future__ import annotations

import logging
from typing import Generic, Iterator, List, Optional, Tuple

from .config import MapConfig
from .errors import CanonicalFormError
from .protocols import K, V, keys_equal, values_differ
from .runs import Run, iter_runs
from .store import BoundaryStore

logger = logging.getLogger(__name__)


class IntervalMap(Generic[K, V]):
    """Compressed interval map over half-open key ranges.

    Usage::

        m = IntervalMap("A")
        m.assign(0, 6, "B")
        m.assign(2, 5, "C")
        m[3]            # 'C'
        m[10]           # 'A'
        m.boundaries()  # [(0, 'B'), (2, 'C'), (5, 'B'), (6, 'A')]
    """

    def __init__(self, default: V, config: Optional[MapConfig] = None) -> None:
        self._default = default
        self._store: BoundaryStore[K, V] = BoundaryStore()
        self._config = config or MapConfig()

        for w in self._config.validate():
            logger.warning("MapConfig: %s", w)

    # ---- properties -------------------------------------------------------

    @property
    def default(self) -> V:
        """The value in force before the first boundary."""
        return self._default

    @property
    def config(self) -> MapConfig:
        return self._config

    # ---- assignment -------------------------------------------------------

    def assign(self, key_begin: K, key_end: K, value: V) -> None:
        """Set every key in ``[key_begin, key_end)`` to ``value``.

        Keys outside the range keep their current value.  A range with
        ``not key_begin < key_end`` is silently ignored.
        """
        if not (key_begin < key_end):
            logger.debug("assign [%r, %r): empty range, ignored", key_begin, key_end)
            return

        store = self._store
        default = self._default

        if store.is_empty():
            if not values_differ(value, default) and not self._config.seed_default_boundaries:
                return
            store.insert_or_overwrite(key_begin, value, 0)
            store.insert_or_overwrite(key_end, default, 1)
            logger.debug("assign [%r, %r) -> %r: seeded", key_begin, key_end, value)
            self._after_assign()
            return

        at_or_after_begin = store.first_not_less(key_begin)
        before_begin = store.predecessor(at_or_after_begin)
        after_end = store.first_greater(key_end)
        before_end = store.predecessor(after_end)

        # The whole range sits before the first boundary and is already default.
        if before_end is None and not values_differ(value, default):
            return

        # Right edge: keep whatever was in force at key_end from key_end on.
        right_value = default if before_end is None else before_end.value
        stop = after_end
        right_inserted = False
        if values_differ(right_value, value):
            if before_end is not None and keys_equal(before_end.key, key_end):
                stop = after_end - 1
            else:
                stop = store.insert_or_overwrite(key_end, right_value, after_end)
                right_inserted = True

        # Left edge: erasing starts just past the boundary that governs key_begin.
        size = len(store)
        if before_begin is not None:
            if values_differ(before_begin.value, value):
                start = store.insert_or_overwrite(key_begin, value, at_or_after_begin) + 1
            else:
                start = at_or_after_begin
        elif values_differ(value, default):
            start = store.insert_or_overwrite(key_begin, value, at_or_after_begin) + 1
        else:
            start = at_or_after_begin
        # A fresh left boundary lands at or before the right edge marker.
        stop += len(store) - size

        erased = store.erase_range(start, stop)
        logger.debug(
            "assign [%r, %r) -> %r: right edge %s, erased %d, %d boundaries",
            key_begin, key_end, value,
            "inserted" if right_inserted else "kept", erased, len(store),
        )
        self._after_assign()

    def _after_assign(self) -> None:
        if self._config.check_invariants:
            self.check_canonical()

    # ---- lookup -----------------------------------------------------------

    def value_at(self, key: K) -> V:
        """The value in force at ``key``.  Total; never raises."""
        boundary = self._store.predecessor(self._store.first_greater(key))
        if boundary is None:
            return self._default
        return boundary.value

    def __getitem__(self, key: K) -> V:
        return self.value_at(key)

    def floor_boundary(self, key: K) -> Optional[Tuple[K, V]]:
        """The last boundary with key ``<= key``, or ``None``."""
        boundary = self._store.predecessor(self._store.first_greater(key))
        return None if boundary is None else boundary.as_tuple()

    def ceiling_boundary(self, key: K) -> Optional[Tuple[K, V]]:
        """The first boundary with key ``>= key``, or ``None``."""
        position = self._store.first_not_less(key)
        if position >= len(self._store):
            return None
        return self._store.at(position).as_tuple()

    # ---- inspection -------------------------------------------------------

    def __len__(self) -> int:
        return len(self._store)

    def boundaries(self) -> List[Tuple[K, V]]:
        """Snapshot of the stored ``(key, value)`` boundaries in key order."""
        return list(self._store.items())

    def runs(self) -> Iterator[Run]:
        """The constant-value runs in key order, unbounded ends as ``None``."""
        return iter_runs(self._default, self._store.items())

    def check_canonical(self) -> None:
        """Raise ``CanonicalFormError`` if two adjacent boundaries (or the
        first boundary and the default) hold equal values."""
        previous = self._default
        previous_key: Optional[K] = None
        for position, (key, value) in enumerate(self._store.items()):
            if not values_differ(previous, value):
                where = "the default value" if position == 0 else f"boundary {previous_key!r}"
                logger.error(
                    "canonical form violated at position %d: %r restates %s",
                    position, key, where,
                )
                raise CanonicalFormError(
                    f"boundary {key!r} repeats value {value!r} of {where}",
                    position=position,
                    previous=(previous_key, previous),
                    current=(key, value),
                    hint="adjacent boundaries must hold different values",
                )
            previous, previous_key = value, key

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._default!r}, {self.boundaries()!r})"
