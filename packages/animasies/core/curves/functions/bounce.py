"""Bouncing ball simulation."""

import logging
import math

from animasies.core.curves.defaults import BOUNCE_TIME_STEP, DEFAULT_BOUNCE_PARAMS
from animasies.core.curves.sampling import (
    Positions,
    StepGuard,
    land_on_target,
    require_finite,
    to_position,
)
from animasies.core.utils.logging import log_performance
from animasies.core.utils.math import magnitude_or_default, round_half_up, split_sign

logger = logging.getLogger(__name__)


@log_performance
def generate_bounce(
    height: float,
    gravity: float = DEFAULT_BOUNCE_PARAMS["gravity"],
    remaining_force: float = DEFAULT_BOUNCE_PARAMS["remaining_force"],
    max_bounces: float = DEFAULT_BOUNCE_PARAMS["max_bounces"],
    *,
    max_steps: int | None = None,
) -> Positions:
    """Generate the fall of an object dropped from ``height`` that bounces to rest.

    Each bounce integrates ``y(t) = y0 + v0*t - g*t²/2`` in 0.1 steps while the
    object is above ground, emitting its displacement from the drop point.
    On impact the velocity is inverted and scaled by ``remaining_force``.
    Simulation stops after ``max_bounces`` bounces, or as soon as a rebound
    is faster than the bounce before it (the bounces would no longer decay).

    Args:
        height: Signed drop height. Zero yields an empty sequence.
        gravity: Gravitational acceleration. Sign is ignored; zero means the default.
        remaining_force: Fraction of impact velocity kept on rebound.
            Sign is ignored; zero means the default.
        max_bounces: Maximum number of bounces, rounded up when fractional.
            Sign is ignored; zero means the default.
        max_steps: Optional step limit (defaults to ``curves.max_steps``).

    Returns:
        Positions in playback order, ending exactly at ``height``.

    Raises:
        CurveValidationError: If inputs are not finite.
        StepLimitExceededError: If the simulation exceeds ``max_steps`` samples.
    """
    require_finite(
        "bounce",
        height=height,
        gravity=gravity,
        remaining_force=remaining_force,
        max_bounces=max_bounces,
    )
    if height == 0:
        return []

    gravity = magnitude_or_default(gravity, DEFAULT_BOUNCE_PARAMS["gravity"])
    remaining_force = magnitude_or_default(
        remaining_force, DEFAULT_BOUNCE_PARAMS["remaining_force"]
    )
    max_bounces = math.ceil(
        magnitude_or_default(max_bounces, DEFAULT_BOUNCE_PARAMS["max_bounces"])
    )
    magnitude, sign = split_sign(height)
    guard = StepGuard("bounce", max_steps)

    positions: Positions = []
    y0 = magnitude
    v0 = 0.0
    v = 0.0

    for bounce_index in range(max_bounces):
        incoming_v0 = v0
        t = 0.0
        y = 0
        while y >= 0:
            guard.tick()
            y = to_position("bounce", y0 + v0 * t - 0.5 * gravity * t * t, 1)
            v = v0 - gravity * t
            t += BOUNCE_TIME_STEP
            positions.append(round_half_up(magnitude - max(0, y)) * sign)

        # Rebound from the ground
        y0 = 0.0
        v0 = -v * remaining_force

        if bounce_index > 0 and incoming_v0 < v0:
            logger.debug(f"Bounce stopped after {bounce_index + 1} bounces: rebound not decaying")
            break

    logger.debug(f"Generated bounce curve with {len(positions)} steps")
    return land_on_target(positions, height)
