"""Bell (Gaussian) curve generator."""

import logging
import math

import numpy as np

from animasies.core.curves.defaults import (
    BELL_SPREAD_DIVISOR,
    BELL_STEP_K1,
    BELL_STEP_K2,
    DEFAULT_BELL_PARAMS,
    GAUSSIAN_NORM,
)
from animasies.core.curves.errors import CurveValidationError
from animasies.core.curves.sampling import (
    Positions,
    StepGuard,
    land_on_target,
    require_finite,
    to_position,
)
from animasies.core.utils.logging import log_performance
from animasies.core.utils.math import split_sign

logger = logging.getLogger(__name__)


@log_performance
def generate_bell(
    length: float,
    position: float = DEFAULT_BELL_PARAMS["position"],
    *,
    max_steps: int | None = None,
) -> Positions:
    """Generate a move whose speed follows a normal distribution.

    The move starts slowly, reaches peak speed at ``position`` and slows
    down again before landing on ``length``. Step sizes are the Gaussian
    density sampled along the path; positions are its cumulative sum,
    rescaled so the sum maps onto ``[0, length]``.

    Formula:
        h = length / (k1 * length + k2)      (sample spacing)
        s = length / 10                      (spread)
        y(x) = h / (s * sqrt(2π)) * exp(-(x - j)² / (2s)²),  j = length * position

    Args:
        length: Signed distance to travel. Zero yields an empty sequence.
        position: Where along the move the speed peaks, as a fraction of the
            length (0.5 = middle). Values outside [0, 1] are accepted and put
            the peak off the path. Zero means the default of 0.5, like every
            other tuning parameter.
        max_steps: Optional step limit. Unbounded when omitted, since the step
            count follows from the distance.

    Returns:
        Positions in playback order, ending exactly at ``length``.

    Raises:
        CurveValidationError: If inputs are not finite, or ``position`` is so
            far off the path that every density sample underflows to zero.
        StepLimitExceededError: If the sample count exceeds ``max_steps``.

    Example:
        >>> curve = generate_bell(100)
        >>> curve[0], curve[-1]
        (0, 100)
    """
    require_finite("bell", length=length, position=position)
    if length == 0:
        return []

    if position == 0:
        position = DEFAULT_BELL_PARAMS["position"]
    magnitude, sign = split_sign(length)
    guard = StepGuard("bell", max_steps, open_ended=False)

    h = magnitude / (BELL_STEP_K1 * magnitude + BELL_STEP_K2)
    s = magnitude / BELL_SPREAD_DIVISOR
    j = magnitude * position

    # Whole steps only; the path always ends on the exact length
    last_full_step = magnitude - math.fmod(magnitude, h)
    guard.check(math.ceil(last_full_step / h) + 1)
    x = np.append(np.arange(0.0, last_full_step, h), magnitude)

    y = (h / (s * GAUSSIAN_NORM)) * np.exp(-((x - j) ** 2) / (2 * s) ** 2)
    z = np.cumsum(y)

    if not z[-1] > 0:
        raise CurveValidationError(
            f"bell: position {position!r} puts the peak too far from the path"
        )
    scale = magnitude / z[-1]

    positions: Positions = [to_position("bell", float(value), sign) for value in scale * z]

    logger.debug(f"Generated bell curve with {len(positions)} steps")
    return land_on_target(positions, length)
