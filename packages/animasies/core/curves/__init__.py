"""Motion curve generators.

Each generator is a pure function returning the positions an animated
value should take at successive fixed time steps.
"""

from animasies.core.curves.errors import (
    CurveError,
    CurveValidationError,
    StepLimitExceededError,
)
from animasies.core.curves.functions import (
    generate_bell,
    generate_bounce,
    generate_constant_motion,
    generate_curtain_close,
    generate_damped_oscillation,
    generate_fall,
    generate_half_moon,
    generate_pie,
)
from animasies.core.curves.sampling import Positions

__all__ = [
    "CurveError",
    "CurveValidationError",
    "Positions",
    "StepLimitExceededError",
    "generate_bell",
    "generate_bounce",
    "generate_constant_motion",
    "generate_curtain_close",
    "generate_damped_oscillation",
    "generate_fall",
    "generate_half_moon",
    "generate_pie",
]
