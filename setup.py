#!/usr/bin/env python3
# =============================================================================
#  intervalmap — setup.py  (legacy compatibility shim)
#
#  All other metadata lives in pyproject.toml; the version is declared
#  dynamic there and supplied from here.
#  This file exists so that:
#
#    1.  `pip install -e .` works on older pip / setuptools that pre-date
#        PEP 660 editable installs.
#    2.  `python setup.py sdist bdist_wheel` still works for CI scripts
#        that haven't migrated to `python -m build`.
#
#  For new tooling, prefer:
#      pip install -e ".[dev]"
#      python -m build
#      python -m pytest
# =============================================================================

from __future__ import annotations

import re
from pathlib import Path

from setuptools import setup

# ---------------------------------------------------------------------------
#  Read version from intervalmap/__init__.py so we have a single source
#  of truth.
# ---------------------------------------------------------------------------
_HERE = Path(__file__).resolve().parent


def _read_version() -> str:
    """Extract ``__version__`` from the package."""
    init = _HERE / "intervalmap" / "__init__.py"
    text = init.read_text(encoding="utf-8")
    match = re.search(r'^__version__\s*=\s*"([^"]+)"', text, re.MULTILINE)
    if match:
        return match.group(1)
    return "0.0.0"


# ---------------------------------------------------------------------------
#  Everything else (dependencies, extras, entry points) comes from
#  pyproject.toml; setuptools merges the two.
# ---------------------------------------------------------------------------
setup(
    version=_read_version(),
    zip_safe=False,
)
