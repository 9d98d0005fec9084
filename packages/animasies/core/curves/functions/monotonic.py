"""Simple accumulating motion generators (fall, curtain close, constant motion)."""

import logging

from animasies.core.curves.defaults import CURTAIN_PULL_STEP, DEFAULT_SPEED, FALL_TIME_STEP
from animasies.core.curves.sampling import (
    Positions,
    StepGuard,
    land_on_target,
    require_finite,
    to_position,
)
from animasies.core.utils.math import magnitude_or_default, split_sign

logger = logging.getLogger(__name__)


def generate_fall(distance: float, *, max_steps: int | None = None) -> Positions:
    """Generate a free fall: position grows with the square of time.

    Formula:
        value = t², t += 0.8 per step

    Args:
        distance: Signed distance to fall. Zero yields an empty sequence.
        max_steps: Optional step limit. Unbounded when omitted, since the step
            count follows from the distance.

    Returns:
        Accelerating positions ending exactly at ``distance``.

    Raises:
        CurveValidationError: If distance is not finite.
        StepLimitExceededError: If the fall needs more than ``max_steps`` steps.

    Example:
        >>> generate_fall(10)
        [1, 3, 6, 10]
    """
    require_finite("fall", distance=distance)
    if distance == 0:
        return []

    magnitude, sign = split_sign(distance)
    guard = StepGuard("fall", max_steps, open_ended=False)

    positions: Positions = []
    value = 0.0
    t = 0.0
    while value < magnitude:
        guard.tick()
        t += FALL_TIME_STEP
        value = t * t
        positions.append(to_position("fall", value, sign))

    logger.debug(f"Generated fall curve with {len(positions)} steps")
    return land_on_target(positions, distance)


def generate_curtain_close(distance: float, *, max_steps: int | None = None) -> Positions:
    """Generate a roller-blind pull: a short dip backwards, then a fast climb.

    A constant pull is subtracted from a quadratic climb, so early positions
    go against the direction of travel before overtaking it.

    Formula:
        value = t² - pull, t += 0.8 and pull += 10 per step

    Args:
        distance: Signed distance to travel. Zero yields an empty sequence.
        max_steps: Optional step limit. Unbounded when omitted, since the step
            count follows from the distance.

    Returns:
        Positions ending exactly at ``distance``.

    Raises:
        CurveValidationError: If distance is not finite.
        StepLimitExceededError: If the move needs more than ``max_steps`` steps.
    """
    require_finite("curtain_close", distance=distance)
    if distance == 0:
        return []

    magnitude, sign = split_sign(distance)
    guard = StepGuard("curtain_close", max_steps, open_ended=False)

    positions: Positions = []
    value = 0.0
    t = 0.0
    pull = 0.0
    while value < magnitude:
        guard.tick()
        t += FALL_TIME_STEP
        pull += CURTAIN_PULL_STEP
        value = t * t - pull
        positions.append(to_position("curtain_close", value, sign))

    logger.debug(f"Generated curtain close curve with {len(positions)} steps")
    return land_on_target(positions, distance)


def generate_constant_motion(
    distance: float,
    speed: float = DEFAULT_SPEED,
    *,
    max_steps: int | None = None,
) -> Positions:
    """Generate a linear move advancing ``speed`` units per step.

    Args:
        distance: Signed distance to travel. Zero yields an empty sequence.
        speed: Units per step. Sign is ignored; zero means the default of 1.
        max_steps: Optional step limit. Unbounded when omitted, since the step
            count follows from the distance.

    Returns:
        Evenly spaced positions ending exactly at ``distance``.

    Raises:
        CurveValidationError: If inputs are not finite.
        StepLimitExceededError: If the move needs more than ``max_steps`` steps.

    Example:
        >>> generate_constant_motion(10, 2)
        [2, 4, 6, 8, 10]
    """
    require_finite("constant_motion", distance=distance, speed=speed)
    if distance == 0:
        return []

    speed = magnitude_or_default(speed, DEFAULT_SPEED)
    magnitude, sign = split_sign(distance)
    guard = StepGuard("constant_motion", max_steps, open_ended=False)
    guard.check(magnitude / speed)

    positions: Positions = []
    value = 0.0
    while value < magnitude:
        guard.tick()
        value += speed
        positions.append(to_position("constant_motion", value, sign))

    logger.debug(f"Generated constant motion with {len(positions)} steps")
    return land_on_target(positions, distance)
