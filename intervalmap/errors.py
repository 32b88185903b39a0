# intervalmap/errors.py
"""
Exception types for the intervalmap package.

Error Hierarchy:
────────────────
    IntervalMapError (base)
    ├── CanonicalFormError  - stored boundaries violate the canonical form
    └── ConfigError         - invalid MapConfig / environment setting

A degenerate interval passed to ``assign`` is *not* an error: it is a
defined no-op.  Lookup is total and raises nothing.  ``MemoryError``
from the underlying container is left to propagate untouched.
"""

from __future__ import annotations

from typing import Any, Optional


class IntervalMapError(Exception):
    """
    Base exception for all intervalmap errors.

    Carries a human readable ``message`` and an optional ``hint``.
    """

    def __init__(self, message: str, hint: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint

    def with_hint(self, hint: str) -> "IntervalMapError":
        """Attach a hint to this error."""
        self.hint = hint
        return self

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message


class CanonicalFormError(IntervalMapError):
    """Two adjacent boundaries (or the first boundary and the default)
    carry equal values."""

    def __init__(
        self,
        message: str,
        position: int,
        previous: Optional[Any] = None,
        current: Optional[Any] = None,
        hint: str = "",
    ) -> None:
        super().__init__(message, hint=hint)
        self.position = position
        self.previous = previous
        self.current = current


class ConfigError(IntervalMapError):
    """Invalid configuration value."""

    def __init__(self, message: str, option: str = "", hint: str = "") -> None:
        super().__init__(message, hint=hint)
        self.option = option
