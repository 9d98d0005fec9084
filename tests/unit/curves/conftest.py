"""Shared pytest fixtures for curve tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from animasies.core.curves import (
    Positions,
    generate_bell,
    generate_bounce,
    generate_constant_motion,
    generate_curtain_close,
    generate_fall,
    generate_half_moon,
    generate_pie,
)

# Generators that land exactly on their target
LANDING_GENERATORS: dict[str, Callable[..., Positions]] = {
    "bell": generate_bell,
    "bounce": generate_bounce,
    "fall": generate_fall,
    "curtain_close": generate_curtain_close,
    "constant_motion": generate_constant_motion,
    "pie": generate_pie,
    "half_moon": generate_half_moon,
}

# Landing generators whose outputs never point against the direction of travel
SAME_SIGN_GENERATORS = {
    name: fn for name, fn in LANDING_GENERATORS.items() if name != "curtain_close"
}


@pytest.fixture(params=sorted(LANDING_GENERATORS))
def landing_generator(request) -> Callable[..., Positions]:
    """Each generator that must finish on its target."""
    return LANDING_GENERATORS[request.param]


@pytest.fixture(params=sorted(SAME_SIGN_GENERATORS))
def same_sign_generator(request) -> Callable[..., Positions]:
    """Each generator whose outputs share the sign of the target."""
    return SAME_SIGN_GENERATORS[request.param]


@pytest.fixture
def deltas() -> Callable[[Positions], list[float]]:
    """Step sizes between consecutive positions."""

    def _deltas(positions: Positions) -> list[float]:
        return [b - a for a, b in zip(positions, positions[1:], strict=False)]

    return _deltas
