"""
intervalmap/config.py — tuning knobs for ``IntervalMap``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from typing import List, Mapping, Optional

from .errors import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "INTERVALMAP_"

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def _parse_bool(option: str, raw: str) -> bool:
    text = raw.strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError(
        f"invalid boolean for {option}: {raw!r}",
        option=option,
        hint="use one of 1/0, true/false, yes/no, on/off",
    )


@dataclass(frozen=True)
class MapConfig:
    """Behavioural options for an ``IntervalMap``.

    check_invariants:
        Verify the canonical form after every effective ``assign``.
        Costs O(n) per call; meant for debugging and tests.
    seed_default_boundaries:
        On an empty map, insert the ``(begin, value)`` / ``(end, default)``
        pair even when ``value`` equals the default.  This reproduces the
        legacy seeding behaviour and leaves a redundant pair behind.
    """
    check_invariants: bool = False
    seed_default_boundaries: bool = False

    def validate(self) -> List[str]:
        """Return a list of validation warnings (empty if valid)."""
        warnings: List[str] = []
        if self.check_invariants and self.seed_default_boundaries:
            warnings.append(
                "seed_default_boundaries can produce a non-canonical store; "
                "check_invariants will reject it"
            )
        return warnings

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MapConfig":
        """Build a config from ``INTERVALMAP_*`` environment variables.

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        values = {}
        for f in fields(cls):
            name = ENV_PREFIX + f.name.upper()
            raw = env.get(name)
            if raw is None:
                continue
            values[f.name] = _parse_bool(name, raw)
            logger.debug("config %s=%r from environment", f.name, values[f.name])
        return cls(**values)
