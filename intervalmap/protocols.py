"""
intervalmap/protocols.py
════════════════════════

Capability protocols for the key and value domains.

Keys are only ever compared with ``<``; values are only ever compared
with ``==``.  Everything else (equality of keys, "not equal" on values)
is derived from those two operations so that any type exposing them
plugs in, without hashing, arithmetic or a full ordering suite.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class SupportsLessThan(Protocol):
    """A key type with a strict total order exposed as ``<``."""

    def __lt__(self, other: Any) -> bool:
        ...


@runtime_checkable
class SupportsEquality(Protocol):
    """A value type with an equality predicate."""

    def __eq__(self, other: object) -> bool:
        ...


K = TypeVar("K", bound=SupportsLessThan)
V = TypeVar("V", bound=SupportsEquality)


def keys_equal(a: SupportsLessThan, b: SupportsLessThan) -> bool:
    """Key equality derived from the strict order: ``!(a<b) && !(b<a)``."""
    return not (a < b) and not (b < a)


def values_differ(a: Any, b: Any) -> bool:
    """Negated ``==``; ``!=`` is never called on values."""
    return not (a == b)
