"""Coercion of user-supplied quantities to non-negative integers."""

from __future__ import annotations

import math
import re
from typing import Any

# Plain ASCII decimal text only; Python-specific forms like "1_000" or
# non-ASCII digits are treated as garbage.
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def sanitize_quantity(value: Any) -> int:
    """Clamp any input to a non-negative int.

    Numeric strings are parsed, floats are truncated. Anything else
    (None, NaN, infinities, booleans, garbage text, negatives) becomes 0.
    """
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return max(0, value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return max(0, int(value))
    if isinstance(value, str):
        s = value.strip()
        if _INT_RE.fullmatch(s):
            return max(0, int(s))
        if _FLOAT_RE.fullmatch(s):
            return sanitize_quantity(float(s))
        return 0
    return 0


def normalize_order_quantity(value: Any) -> int:
    """Build quantity for one template in an order; non-positive means skip."""
    return sanitize_quantity(value)
