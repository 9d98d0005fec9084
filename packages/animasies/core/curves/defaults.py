"""Default parameters and simulation constants for curve generation.

Defined separately to avoid circular imports between the curve functions
and the configuration models.
"""

import math

# Upper bound on simulated steps for a single curve (overridable via config)
DEFAULT_MAX_STEPS = 100_000

# Bell curve: step size h = length / (K1 * length + K2)
BELL_STEP_K1 = 180 / 3395
BELL_STEP_K2 = 84.09425626
BELL_SPREAD_DIVISOR = 10.0
GAUSSIAN_NORM = math.sqrt(2 * math.pi)

DEFAULT_BELL_PARAMS = {
    "position": 0.5,  # Peak velocity at the middle of the move
}

# Damped oscillation
OSCILLATION_TIME_STEP = 0.1
OSCILLATION_DECAY_THRESHOLD = 0.005

DEFAULT_OSCILLATION_PARAMS = {
    "attenuation": 0.7,
    "frequency": 1.8,
}

# Bounce
BOUNCE_TIME_STEP = 0.1

DEFAULT_BOUNCE_PARAMS = {
    "gravity": 125.0,
    "remaining_force": 0.6,  # Fraction of impact velocity kept on rebound
    "max_bounces": 15,
}

# Fall / curtain close
FALL_TIME_STEP = 0.8
CURTAIN_PULL_STEP = 10.0

# Constant motion, pie and half-moon
DEFAULT_SPEED = 1.0
SINE_TICK_DIVISOR = 10.0
