"""Math utilities for common operations."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def round_half_up(x: float) -> int:
    """Round to the nearest integer, with halves rounded toward +infinity.

    Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``),
    which makes neighbouring animation steps jitter. This always rounds
    ``.5`` upward, so ``2.5 -> 3`` and ``-2.5 -> -2``.

    Args:
        x: Finite value to round

    Returns:
        Rounded integer

    Raises:
        ValueError: If x is NaN
        OverflowError: If x is infinite
    """
    return math.floor(x + 0.5)


def split_sign(value: Number) -> tuple[Number, int]:
    """Split a signed value into its magnitude and direction.

    Args:
        value: Signed value

    Returns:
        Tuple of (abs(value), sign) where sign is -1 for negative values and 1 otherwise

    Example:
        >>> split_sign(-12.5)
        (12.5, -1)
    """
    sign = -1 if value < 0 else 1
    return abs(value), sign


def magnitude_or_default(value: Number, default: Number) -> Number:
    """Coerce a tuning parameter to a positive magnitude.

    Zero falls back to the default, negative values lose their sign.

    Args:
        value: Requested parameter value
        default: Value used when value is zero

    Returns:
        Positive magnitude
    """
    if value == 0:
        return default
    return abs(value)
