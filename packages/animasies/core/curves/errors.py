"""Exceptions raised by curve generators."""

from __future__ import annotations


class CurveError(Exception):
    """Base class for curve generation failures."""


class CurveValidationError(CurveError, ValueError):
    """Input or intermediate value cannot produce a valid position sequence."""


class StepLimitExceededError(CurveError, RuntimeError):
    """A generator needed more simulated steps than allowed.

    Attributes:
        curve: Name of the curve being generated.
        limit: Step limit that was exceeded.
    """

    def __init__(self, curve: str, limit: int) -> None:
        self.curve = curve
        self.limit = limit
        super().__init__(
            f"{curve} curve exceeded {limit} steps; "
            "check tuning parameters or raise curves.max_steps"
        )
