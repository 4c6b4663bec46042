"""Default configuration for filter design and zero-phase application."""
from dataclasses import dataclass

NUMERATOR_EPS = 1e-6
LENGTH_GUARD_FACTOR = 3
RESPONSE_POINTS_PER_HZ = 4


@dataclass
class FilterConfig:
    """Thresholds shared by the designers, the zero-phase filter, and diagnostics."""

    # Butterworth redesigns at a lower order while every |numerator coef| is below this
    numerator_eps: float = NUMERATOR_EPS
    # Signals of length <= factor * n are not filtered (empty output)
    length_guard_factor: int = LENGTH_GUARD_FACTOR
    # Frequency response resolution: fs * points_per_hz points
    response_points_per_hz: int = RESPONSE_POINTS_PER_HZ
    validate: bool = True


DEFAULT_CONFIG = FilterConfig()
