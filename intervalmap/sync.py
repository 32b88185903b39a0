"""
intervalmap/sync.py — a lock-guarded ``IntervalMap`` for shared use.

``IntervalMap`` itself assumes a single owner.  This wrapper holds one
re-entrant lock for the full duration of every operation; lookups and
assignments are therefore serialised, never interleaved.
"""

from __future__ import annotations

import threading
from typing import Generic, List, Optional, Tuple

from .config import MapConfig
from .interval_map import IntervalMap
from .protocols import K, V
from .runs import Run


class SynchronizedIntervalMap(Generic[K, V]):
    """Thread-safe facade over one privately owned ``IntervalMap``."""

    def __init__(self, default: V, config: Optional[MapConfig] = None) -> None:
        self._map: IntervalMap[K, V] = IntervalMap(default, config)
        self._lock = threading.RLock()

    @property
    def default(self) -> V:
        return self._map.default

    def assign(self, key_begin: K, key_end: K, value: V) -> None:
        with self._lock:
            self._map.assign(key_begin, key_end, value)

    def value_at(self, key: K) -> V:
        with self._lock:
            return self._map.value_at(key)

    def __getitem__(self, key: K) -> V:
        return self.value_at(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._map)

    def boundaries(self) -> List[Tuple[K, V]]:
        with self._lock:
            return self._map.boundaries()

    def runs(self) -> List[Run]:
        """Snapshot of the runs, taken under the lock."""
        with self._lock:
            return list(self._map.runs())

    def __repr__(self) -> str:
        with self._lock:
            return f"{type(self).__name__}({self._map!r})"
