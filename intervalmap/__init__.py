"""
intervalmap — compressed interval maps over ordered keys
=========================================================

A piecewise-constant function over an ordered key domain, stored as the
sparse set of points where its value changes.

Core modules
------------
interval_map
    ``IntervalMap``: ``assign`` a value to a half-open range, ``value_at``
    a key.  Keeps its boundary set minimal after every call.
store
    ``BoundaryStore`` / ``Boundary``: the ordered boundary container.
protocols
    ``SupportsLessThan`` / ``SupportsEquality`` capability protocols.
config
    ``MapConfig`` tuning knobs.
errors
    ``IntervalMapError`` hierarchy.

Helpers
-------
runs
    ``Run`` records and run iteration.
report
    Plain / coloured text dumps.
sync
    ``SynchronizedIntervalMap``, a lock-guarded wrapper.

Quick start
-----------
>>> from intervalmap import IntervalMap
>>> m = IntervalMap("A")
>>> m.assign(0, 6, "B")
>>> m.assign(2, 5, "C")
>>> m.assign(4, 7, "A")
>>> [m[i] for i in range(-1, 8)]
['A', 'B', 'B', 'C', 'C', 'A', 'A', 'A', 'A']
>>> m.boundaries()
[(0, 'B'), (2, 'C'), (4, 'A')]
"""

from __future__ import annotations

import logging
from typing import List

__version__ = "0.1.0"
__license__ = "MIT"

_log = logging.getLogger(__name__)
_log.addHandler(logging.NullHandler())

from .config import MapConfig  # noqa: E402
from .errors import CanonicalFormError, ConfigError, IntervalMapError  # noqa: E402
from .interval_map import IntervalMap  # noqa: E402
from .protocols import SupportsEquality, SupportsLessThan, keys_equal  # noqa: E402
from .runs import Run  # noqa: E402
from .store import Boundary, BoundaryStore  # noqa: E402
from .sync import SynchronizedIntervalMap  # noqa: E402

__all__: List[str] = [
    "Boundary",
    "BoundaryStore",
    "CanonicalFormError",
    "ConfigError",
    "IntervalMap",
    "IntervalMapError",
    "MapConfig",
    "Run",
    "SupportsEquality",
    "SupportsLessThan",
    "SynchronizedIntervalMap",
    "keys_equal",
]
