"""Sine sweep generators (pie and half-moon)."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

from animasies.core.curves.defaults import DEFAULT_SPEED, SINE_TICK_DIVISOR
from animasies.core.curves.sampling import (
    Positions,
    StepGuard,
    land_on_target,
    require_finite,
    to_position,
)
from animasies.core.utils.math import magnitude_or_default, split_sign

logger = logging.getLogger(__name__)


def _sweep_to_peak(
    curve: str,
    distance: float,
    speed: float,
    start: float,
    wave: Callable[[float], float],
    max_steps: int | None,
) -> Positions:
    """Advance a ticker through ``wave`` until it stops rising.

    The previous value starts at 0, so a wave that begins above zero
    is still accepted on its first sample.
    """
    require_finite(curve, distance=distance, speed=speed)
    if distance == 0:
        return []

    step = magnitude_or_default(speed, DEFAULT_SPEED) / SINE_TICK_DIVISOR
    magnitude, sign = split_sign(distance)
    guard = StepGuard(curve, max_steps)

    positions: Positions = []
    former = 0.0
    ticker = start
    while True:
        guard.tick()
        ticker += step
        value = wave(ticker)
        if former >= value:
            break
        former = value
        positions.append(to_position(curve, value * magnitude, sign))

    logger.debug(f"Generated {curve} curve with {len(positions)} steps")
    return land_on_target(positions, distance)


def _half_moon_wave(ticker: float) -> float:
    return (math.sin(ticker) + 1) / 2


def generate_pie(
    distance: float,
    speed: float = DEFAULT_SPEED,
    *,
    max_steps: int | None = None,
) -> Positions:
    """Generate a quarter sine sweep: fast start, easing into the target.

    Formula:
        value = sin(ticker), ticker = 0 + k * speed / 10

    Args:
        distance: Signed distance to travel. Zero yields an empty sequence.
        speed: Ticker speed. Sign is ignored; zero means the default of 1.
        max_steps: Optional step limit (defaults to ``curves.max_steps``).

    Returns:
        Non-decreasing (in magnitude) positions ending exactly at ``distance``.

    Raises:
        CurveValidationError: If inputs are not finite.
        StepLimitExceededError: If ``speed`` is so small the peak is not
            reached within ``max_steps`` steps.
    """
    return _sweep_to_peak("pie", distance, speed, 0.0, math.sin, max_steps)


def generate_half_moon(
    distance: float,
    speed: float = DEFAULT_SPEED,
    *,
    max_steps: int | None = None,
) -> Positions:
    """Generate a half sine sweep from trough to crest: ease in and ease out.

    Formula:
        value = (sin(ticker) + 1) / 2, ticker = -π/2 + k * speed / 10

    Args:
        distance: Signed distance to travel. Zero yields an empty sequence.
        speed: Ticker speed. Sign is ignored; zero means the default of 1.
        max_steps: Optional step limit (defaults to ``curves.max_steps``).

    Returns:
        Non-decreasing (in magnitude) positions ending exactly at ``distance``.

    Raises:
        CurveValidationError: If inputs are not finite.
        StepLimitExceededError: If ``speed`` is so small the peak is not
            reached within ``max_steps`` steps.
    """
    return _sweep_to_peak("half_moon", distance, speed, -math.pi / 2, _half_moon_wave, max_steps)
