"""Normalization helpers.

Centralizes single-precision rounding and the NaN placeholder rule.
"""

from __future__ import annotations

import math
import struct

_FLOAT32 = struct.Struct("<f")


def round_to_float32(value: float) -> float:
    """Return the IEEE-754 binary32 value nearest to *value*.

    The result is a Python float (binary64) holding exactly the 32-bit
    bit pattern, so widening it back is lossless. Finite values beyond
    the binary32 range become infinity of the same sign; NaN and
    infinities pass through.
    """
    try:
        packed = _FLOAT32.pack(value)
    except OverflowError:
        return math.copysign(math.inf, value)
    result: float = _FLOAT32.unpack(packed)[0]
    return result


def nan_to_none(value: float | None) -> float | None:
    """Collapse the NaN "no value" sentinel to ``None``."""
    if value is None or math.isnan(value):
        return None
    return value
