#!/usr/bin/env python3
"""intervalmap/main.py — command-line front end.

Usage examples
--------------
    # Replay the built-in example and dump the result
    python -m intervalmap demo

    # Paint ranges over integer keys, then query keys -5..12
    python -m intervalmap paint --default A 0:6:B 2:5:C 4:7:A --query=-5..12

    # Show the constant runs instead of raw boundaries
    python -m intervalmap paint --default . 10:20:x 15:30:y --runs

    # Nearest boundaries around a key
    python -m intervalmap bounds --default A 3 0:6:B 2:5:C

Exit codes
----------
    0     Success.
    2     Bad arguments or an internal failure.
    130   Interrupted.

``python -m intervalmap`` goes through ``intervalmap/__main__.py``,
which simply calls :func:`main`.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import textwrap
from typing import Optional, Sequence, TextIO, Tuple

from . import __version__
from .config import MapConfig
from .errors import IntervalMapError
from .interval_map import IntervalMap
from .report import format_boundaries, format_lookups, format_runs

_log = logging.getLogger("intervalmap")

EXIT_OK: int = 0
EXIT_INFRA: int = 2

DEMO_DEFAULT = "A"
DEMO_ASSIGNMENTS: Tuple[Tuple[int, int, str], ...] = (
    (0, 6, "B"),
    (2, 5, "C"),
    (4, 7, "A"),
)
DEMO_QUERY = range(-5, 13)


# ===========================================================================
# Utility helpers
# ===========================================================================

def _configure_logging(verbosity: int) -> None:
    """Set up the ``intervalmap`` logger.

    0 → WARNING, 1 → INFO, 2+ → DEBUG.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)-5.5s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root = logging.getLogger("intervalmap")
    root.setLevel(level)
    root.addHandler(handler)


def _use_color(mode: str, stream: TextIO) -> bool:
    if mode == "always":
        return True
    if mode == "never":
        return False
    try:
        is_tty = hasattr(stream, "isatty") and stream.isatty()
    except ValueError:
        is_tty = False
    return is_tty and os.environ.get("NO_COLOR") is None


def parse_assignment(text: str) -> Tuple[int, int, str]:
    """Parse ``BEGIN:END:VALUE`` with integer keys.

    The value is everything after the second colon, so it may itself
    contain colons.
    """
    parts = text.split(":", 2)
    if len(parts) != 3:
        raise IntervalMapError(
            f"malformed range {text!r}",
            hint="expected BEGIN:END:VALUE, e.g. 0:6:B",
        )
    try:
        return int(parts[0]), int(parts[1]), parts[2]
    except ValueError:
        raise IntervalMapError(
            f"non-integer key in range {text!r}",
            hint="keys must be integers",
        ) from None


def parse_query(text: str) -> range:
    """Parse ``LO..HI`` (inclusive) into a ``range``."""
    lo, sep, hi = text.partition("..")
    if not sep:
        raise IntervalMapError(f"malformed query {text!r}", hint="expected LO..HI, e.g. -5..12")
    try:
        return range(int(lo), int(hi) + 1)
    except ValueError:
        raise IntervalMapError(f"non-integer bound in query {text!r}") from None


def _paint(default: str, specs: Sequence[str], config: MapConfig) -> IntervalMap:
    imap: IntervalMap = IntervalMap(default, config)
    for spec in specs:
        begin, end, value = parse_assignment(spec)
        _log.info("assign [%d, %d) = %r", begin, end, value)
        imap.assign(begin, end, value)
    return imap


# ===========================================================================
# Sub-command implementations
# ===========================================================================

def _cmd_demo(args: argparse.Namespace) -> int:
    out: TextIO = sys.stdout
    color = _use_color(args.color, out)
    imap: IntervalMap = IntervalMap(DEMO_DEFAULT, MapConfig.from_env())
    for begin, end, value in DEMO_ASSIGNMENTS:
        imap.assign(begin, end, value)

    out.write(format_boundaries(imap, color=color))
    out.write("\n")
    out.write(format_lookups(imap, DEMO_QUERY, color=color))
    out.write("\n")
    out.write("End of demo\n")
    return EXIT_OK


def _cmd_paint(args: argparse.Namespace) -> int:
    out: TextIO = sys.stdout
    color = _use_color(args.color, out)
    imap = _paint(args.default, args.ranges, MapConfig.from_env())

    out.write(format_boundaries(imap, color=color))
    if args.runs:
        out.write(format_runs(imap, color=color))
    if args.query:
        out.write(format_lookups(imap, parse_query(args.query), color=color))
    return EXIT_OK


def _cmd_bounds(args: argparse.Namespace) -> int:
    out: TextIO = sys.stdout
    imap = _paint(args.default, args.ranges, MapConfig.from_env())

    ceiling = imap.ceiling_boundary(args.key)
    floor = imap.floor_boundary(args.key)
    out.write(f"Lower bound of {args.key}: {'none' if ceiling is None else ceiling[0]}\n")
    out.write(f"Upper bound of {args.key}: {'none' if floor is None else floor[0]}\n")
    return EXIT_OK


# ===========================================================================
# Argument parser
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="intervalmap",
        description="Paint half-open ranges onto a compressed interval map.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""\
            examples:
              intervalmap demo
              intervalmap paint --default A 0:6:B 2:5:C 4:7:A --query=-5..12
              intervalmap bounds --default A 3 0:6:B 2:5:C
        """),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v info, -vv debug).",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    def _add_color_arg(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--color",
            choices=["auto", "always", "never"],
            default="auto",
            help="Colourise output (default: auto).",
        )

    def _add_paint_args(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--default",
            required=True,
            metavar="VALUE",
            help="Value held everywhere before any range is painted.",
        )
        p.add_argument(
            "ranges",
            nargs="*",
            metavar="BEGIN:END:VALUE",
            help="Half-open ranges to paint, applied left to right.",
        )

    p_demo = subparsers.add_parser("demo", help="Run the built-in example.")
    _add_color_arg(p_demo)
    p_demo.set_defaults(func=_cmd_demo)

    p_paint = subparsers.add_parser(
        "paint",
        help="Paint ranges and dump the resulting map.",
    )
    _add_paint_args(p_paint)
    p_paint.add_argument(
        "--query",
        default=None,
        metavar="LO..HI",
        help="Print the value of every key in LO..HI (inclusive).",
    )
    p_paint.add_argument(
        "--runs",
        action="store_true",
        help="Also print the constant runs.",
    )
    _add_color_arg(p_paint)
    p_paint.set_defaults(func=_cmd_paint)

    p_bounds = subparsers.add_parser(
        "bounds",
        help="Print the boundaries at/after and at/before a key.",
    )
    p_bounds.add_argument("key", type=int, help="Key to look around.")
    _add_paint_args(p_bounds)
    p_bounds.set_defaults(func=_cmd_bounds)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return its exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    if not hasattr(args, "func"):
        parser.print_help(sys.stderr)
        return EXIT_INFRA

    try:
        return args.func(args)
    except KeyboardInterrupt:
        _log.info("Interrupted by user.")
        return 130
    except IntervalMapError as exc:
        _log.error("%s", exc)
        return EXIT_INFRA
    except Exception as exc:
        _log.error("Unhandled exception: %s", exc, exc_info=True)
        return EXIT_INFRA


if __name__ == "__main__":
    raise SystemExit(main())
