"""
Numeric normalization for raw CSV cell values.

Cells arrive as strings. These helpers convert them to numbers or return None
when the text is not a plain finite decimal number, so callers can turn a None
into a validation error instead of catching exceptions.
"""

from __future__ import annotations

import math
from typing import Optional


def to_float(value) -> Optional[float]:
    """Convert int/float or numeric-like strings to float. Return None if not possible."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        v = float(value)
        return v if math.isfinite(v) else None

    s = str(value).strip()
    # float() accepts digit separators ("1_000") which a CSV cell should not contain
    if not s or "_" in s:
        return None
    try:
        v = float(s)
    except ValueError:
        return None
    return v if math.isfinite(v) else None


def to_int(value) -> Optional[int]:
    """Convert a whole-number value ("2", "2.0", 2.0) to int. Return None for fractions or junk."""
    v = to_float(value)
    if v is None or not v.is_integer():
        return None
    return int(v)


def is_non_negative(value: Optional[float]) -> bool:
    return value is not None and value >= 0
