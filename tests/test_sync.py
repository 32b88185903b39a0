# tests/test_sync.py
"""
Tests for SynchronizedIntervalMap.
"""

import threading

from intervalmap import MapConfig, Run, SynchronizedIntervalMap
from tests.conftest import assert_canonical


def test_delegates_to_inner_map():
    smap = SynchronizedIntervalMap("A")
    smap.assign(0, 6, "B")
    smap.assign(2, 5, "C")
    smap.assign(4, 7, "A")
    assert smap.default == "A"
    assert smap[3] == "C"
    assert smap.value_at(5) == "A"
    assert len(smap) == 3
    assert smap.boundaries() == [(0, "B"), (2, "C"), (4, "A")]
    assert smap.runs()[0] == Run(None, 0, "A")
    assert repr(smap).startswith("SynchronizedIntervalMap(IntervalMap('A'")


def test_concurrent_disjoint_writers():
    smap = SynchronizedIntervalMap(0, MapConfig(check_invariants=True))
    errors = []

    def writer(slot):
        try:
            for _ in range(50):
                smap.assign(slot * 10, slot * 10 + 5, slot + 1)
                smap.assign(slot * 10 + 2, slot * 10 + 3, 0)
        except Exception as exc:  # surfaced below
            errors.append(exc)

    threads = [threading.Thread(target=writer, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    for slot in range(8):
        base = slot * 10
        assert [smap[base + d] for d in range(6)] == [slot + 1, slot + 1, 0, slot + 1, slot + 1, 0]

    assert_canonical(smap)
