"""Shared sampling helpers for position sequence generators.

Every generator simulates on the magnitude of its target, converts each
sample to an integer position in the target's direction, and lands the
final element exactly on the signed target.
"""

from __future__ import annotations

import logging
import math

from animasies.core.curves.errors import CurveValidationError, StepLimitExceededError
from animasies.core.utils.math import round_half_up

logger = logging.getLogger(__name__)

# Ordered playback positions. All elements are ints except a non-integer
# target, which is placed verbatim in the final slot.
Positions = list[int | float]


def require_finite(curve: str, **values: float) -> None:
    """Validate that all numeric inputs are finite.

    Args:
        curve: Curve name for error messages.
        **values: Parameter name to value.

    Raises:
        CurveValidationError: If any value is NaN or infinite.
    """
    for name, value in values.items():
        if not math.isfinite(value):
            raise CurveValidationError(f"{curve}: {name} must be finite, got {value!r}")


def to_position(curve: str, value: float, sign: int) -> int:
    """Round a simulated magnitude to a signed integer position.

    Args:
        curve: Curve name for error messages.
        value: Simulated value.
        sign: Direction of travel (1 or -1).

    Returns:
        Rounded position in the direction of travel.

    Raises:
        CurveValidationError: If value is not finite.
    """
    if not math.isfinite(value):
        raise CurveValidationError(f"{curve}: simulation produced non-finite value {value!r}")
    return round_half_up(value) * sign


def land_on_target(positions: Positions, target: float) -> Positions:
    """Force the final position to exactly the signed target.

    A run that produced no samples still moves to the target in one step.

    Args:
        positions: Generated positions (modified in place).
        target: Signed target value.

    Returns:
        The same list, ending at target.
    """
    if not positions:
        positions.append(target)
    else:
        positions[-1] = target
    return positions


def resolve_max_steps(max_steps: int | None) -> int:
    """Return an explicit step limit or the configured default.

    Args:
        max_steps: Caller override, or None to use configuration.

    Returns:
        Positive step limit.

    Raises:
        ValueError: If max_steps is not positive.
    """
    if max_steps is None:
        # Local import: config models import curve defaults
        from animasies.core.config.loader import load_app_config

        return load_app_config().curves.max_steps
    if max_steps <= 0:
        raise ValueError(f"max_steps must be > 0, got {max_steps}")
    return max_steps


class StepGuard:
    """Counts simulation steps and aborts runaway loops.

    Loops that stop on decay or peak detection fall back to the configured
    ``curves.max_steps``. Loops whose length follows from the target alone
    pass ``open_ended=False`` and are only limited by an explicit ``max_steps``.
    """

    def __init__(
        self, curve: str, max_steps: int | None = None, *, open_ended: bool = True
    ) -> None:
        self.curve = curve
        self.limit: int | None
        if max_steps is None and not open_ended:
            self.limit = None
        else:
            self.limit = resolve_max_steps(max_steps)
        self.steps = 0

    def tick(self) -> None:
        self.steps += 1
        if self.limit is not None and self.steps > self.limit:
            self.fail()

    def check(self, planned_steps: float) -> None:
        """Fail up front when a known step count exceeds the limit."""
        if self.limit is not None and planned_steps > self.limit:
            self.fail()

    def fail(self) -> None:
        logger.warning(f"{self.curve} curve aborted after exceeding {self.limit} steps")
        raise StepLimitExceededError(self.curve, self.limit)
