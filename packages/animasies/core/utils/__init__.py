"""Shared utilities for Animasies."""

from animasies.core.utils.json import read_json
from animasies.core.utils.math import magnitude_or_default, round_half_up, split_sign

__all__ = [
    "magnitude_or_default",
    "read_json",
    "round_half_up",
    "split_sign",
]
