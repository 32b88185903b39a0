"""
intervalmap/report.py
═════════════════════

Plain-text dumps of an ``IntervalMap`` for terminals and logs.

Three views are offered:

    format_boundaries   Key: 0  Val: B        one line per stored boundary
    format_lookups      Key: -1  Value: A     one line per queried key
    format_runs         [0, 2) -> B           one line per constant run

With ``color=True`` keys are cyan, values bold green, and anything equal
to the map's default value is dimmed.  ``color=True`` always emits ANSI
codes (via ``termcolor``); whether the stream can show them is the
caller's call.
"""

from __future__ import annotations

from typing import Any, Iterable, List

from termcolor import colored

from .interval_map import IntervalMap
from .protocols import values_differ


def _key(key: Any, color: bool) -> str:
    text = str(key)
    return colored(text, "cyan", force_color=True) if color else text


def _value(imap: IntervalMap, value: Any, color: bool) -> str:
    text = str(value)
    if not color:
        return text
    if values_differ(value, imap.default):
        return colored(text, "green", attrs=["bold"], force_color=True)
    return colored(text, attrs=["dark"], force_color=True)


def format_boundaries(imap: IntervalMap, color: bool = False) -> str:
    """One ``Key: k  Val: v`` line per stored boundary, then a blank line."""
    lines: List[str] = [
        f"Key: {_key(k, color)}  Val: {_value(imap, v, color)}"
        for k, v in imap.boundaries()
    ]
    lines.append("")
    return "\n".join(lines) + "\n"


def format_lookups(imap: IntervalMap, keys: Iterable[Any], color: bool = False) -> str:
    """One ``Key: k  Value: v`` line per key in ``keys``."""
    lines = [
        f"Key: {_key(k, color)}  Value: {_value(imap, imap.value_at(k), color)}"
        for k in keys
    ]
    return "\n".join(lines) + "\n" if lines else ""


def format_runs(imap: IntervalMap, color: bool = False) -> str:
    """One ``[begin, end) -> value`` line per run; open ends print as
    ``-inf`` / ``+inf``."""
    lines = []
    for run in imap.runs():
        begin = "-inf" if run.begin is None else _key(run.begin, color)
        end = "+inf" if run.end is None else _key(run.end, color)
        lines.append(f"[{begin}, {end}) -> {_value(imap, run.value, color)}")
    return "\n".join(lines) + "\n"
