"""Fail-soft parsing of user-entered values.

Every helper here is total: input that is not a valid non-negative number
becomes 0 instead of raising.
"""

from __future__ import annotations

import math
import re
from typing import Any

__all__ = ["coerce_bool", "coerce_non_negative", "coerce_optional", "coerce_wall_count"]

# Leading numeric prefix, the way a browser number field reads "3.5m" as 3.5.
_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})

MAX_WALL_COUNT = 4


def _to_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _NUMBER_PREFIX.match(value)
        if match is None:
            return None
        number = float(match.group(0))
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def coerce_non_negative(value: Any) -> float:
    """Parse a non-negative real, using 0 for anything else.

    Examples:
        >>> coerce_non_negative("3.5m")
        3.5
        >>> coerce_non_negative(-2)
        0.0
        >>> coerce_non_negative("abc")
        0.0
    """
    number = _to_float(value)
    if number is None or number < 0:
        return 0.0
    return number


def coerce_optional(value: Any) -> float | None:
    """Like coerce_non_negative, but keeps ``None`` as "not set"."""
    if value is None:
        return None
    return coerce_non_negative(value)


def coerce_wall_count(value: Any) -> int:
    """Parse a wall count, truncated to an integer and clamped to [0, 4]."""
    return min(MAX_WALL_COUNT, int(coerce_non_negative(value)))


def coerce_bool(value: Any) -> bool:
    """Parse a checkbox-style flag."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)
