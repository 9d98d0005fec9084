"""Curve generator functions."""

from animasies.core.curves.functions.bell import generate_bell
from animasies.core.curves.functions.bounce import generate_bounce
from animasies.core.curves.functions.monotonic import (
    generate_constant_motion,
    generate_curtain_close,
    generate_fall,
)
from animasies.core.curves.functions.oscillation import generate_damped_oscillation
from animasies.core.curves.functions.sinusoidal import generate_half_moon, generate_pie

__all__ = [
    "generate_bell",
    "generate_bounce",
    "generate_constant_motion",
    "generate_curtain_close",
    "generate_damped_oscillation",
    "generate_fall",
    "generate_half_moon",
    "generate_pie",
]
