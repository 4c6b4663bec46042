"""Zero-phase (forward-backward) application of an IIR filter."""
import numpy as np
from scipy.signal import filtfilt

from ..config import LENGTH_GUARD_FACTOR


def zero_phase_filter(
    coef_num: np.ndarray,
    coef_den: np.ndarray,
    signal: np.ndarray,
    order: int,
    guard_factor: int = LENGTH_GUARD_FACTOR,
) -> np.ndarray:
    """Filter forward then backward so the phase cancels and the magnitude is squared.

    Args:
        coef_num: Numerator coefficients, highest power first.
        coef_den: Denominator coefficients, coef_den[0] == 1.
        signal: 1D signal.
        order: Resolved filter order.
        guard_factor: Signals of length <= guard_factor * order are not filtered.

    Returns:
        Filtered signal, same length as input, or an empty array when the
        signal is too short for the filter order.
    """
    x = np.asarray(signal, dtype=float)
    if len(x) <= guard_factor * order:
        return np.empty(0, dtype=float)
    nfilt = max(len(coef_num), len(coef_den))
    padlen = min(3 * (nfilt - 1), len(x) - 1)
    return filtfilt(coef_num, coef_den, x, padlen=padlen)
