"""
intervalmap/runs.py — piecewise-constant runs of a boundary sequence.
"""

from __future__ import annotations

from typing import Iterable, Iterator, NamedTuple, Optional, Tuple

from .protocols import K, V


class Run(NamedTuple):
    """A maximal half-open run ``[begin, end)`` holding one value.

    ``begin is None`` means unbounded below; ``end is None`` means
    unbounded above.
    """
    begin: Optional[object]
    end: Optional[object]
    value: object

    def contains(self, key: object) -> bool:
        """``begin <= key < end`` using ``<`` only."""
        if self.begin is not None and key < self.begin:  # type: ignore[operator]
            return False
        if self.end is not None and not (key < self.end):  # type: ignore[operator]
            return False
        return True


def iter_runs(default: V, pairs: Iterable[Tuple[K, V]]) -> Iterator[Run]:
    """Expand ordered ``(key, value)`` boundaries into runs.

    The leading run carries ``default``; it is always emitted, even when
    the first boundary restates the default value.
    """
    begin: Optional[K] = None
    value = default
    for key, next_value in pairs:
        yield Run(begin, key, value)
        begin, value = key, next_value
    yield Run(begin, None, value)
