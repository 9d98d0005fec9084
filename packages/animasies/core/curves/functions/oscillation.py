"""Damped oscillation generator."""

import logging
import math

from animasies.core.curves.defaults import (
    DEFAULT_OSCILLATION_PARAMS,
    OSCILLATION_DECAY_THRESHOLD,
    OSCILLATION_TIME_STEP,
)
from animasies.core.curves.sampling import Positions, StepGuard, require_finite, to_position
from animasies.core.utils.math import magnitude_or_default, split_sign

logger = logging.getLogger(__name__)


def generate_damped_oscillation(
    height: float,
    attenuation: float = DEFAULT_OSCILLATION_PARAMS["attenuation"],
    frequency: float = DEFAULT_OSCILLATION_PARAMS["frequency"],
    *,
    max_steps: int | None = None,
) -> Positions:
    """Generate a settling oscillation around zero.

    Models an object released at ``height`` that swings back and forth with
    exponentially shrinking amplitude. Sampled every 0.1 time units starting
    at t=0.1 until the amplitude drops below 0.005.

    Formula:
        r(t) = height * e^(-attenuation * t) * cos(frequency * t + π)

    Unlike the point-to-point generators, the last element is not snapped to
    a target: the sequence settles at zero and alternates sign on the way.

    Args:
        height: Signed initial amplitude. Zero yields an empty sequence.
        attenuation: Decay rate. Sign is ignored; zero means the default.
        frequency: Angular frequency. Sign is ignored; zero means the default.
        max_steps: Optional step limit (defaults to ``curves.max_steps``).

    Returns:
        Positions oscillating around zero with a decaying envelope.

    Raises:
        CurveValidationError: If inputs are not finite.
        StepLimitExceededError: If the decay is too slow to settle within
            ``max_steps`` samples.
    """
    require_finite(
        "damped_oscillation", height=height, attenuation=attenuation, frequency=frequency
    )
    if height == 0:
        return []

    decay = -magnitude_or_default(attenuation, DEFAULT_OSCILLATION_PARAMS["attenuation"])
    frequency = magnitude_or_default(frequency, DEFAULT_OSCILLATION_PARAMS["frequency"])
    magnitude, sign = split_sign(height)
    guard = StepGuard("damped_oscillation", max_steps)

    positions: Positions = []
    t = 0.0
    while True:
        guard.tick()
        t += OSCILLATION_TIME_STEP
        r = magnitude * math.exp(decay * t) * math.cos(frequency * t + math.pi)
        positions.append(to_position("damped_oscillation", r, sign))
        if abs(r) < OSCILLATION_DECAY_THRESHOLD:
            break

    logger.debug(f"Generated damped oscillation with {len(positions)} steps")
    return positions
