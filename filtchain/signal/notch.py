"""Harmonic notch filter by pole/zero placement (Challis & Kitney, 1982)."""
import numpy as np
from scipy.signal import zpk2tf

# Relative slack so k*wn == 1 survives float round-off (e.g. wn=0.2 keeps the 5th harmonic)
_HARMONIC_TOL = 1e-10


def harmonic_frequencies(wn: float) -> np.ndarray:
    """Normalized harmonics wn, 2*wn, ... up to and including Nyquist (1.0)."""
    count = int(np.floor(1.0 / wn + _HARMONIC_TOL))
    return wn * np.arange(1, count + 1, dtype=float)


def design_notch(wn: float, b: float) -> tuple[np.ndarray, np.ndarray]:
    """Coefficients of a filter nulling wn and all its harmonics, with unity gain at DC.

    Zeros sit on the unit circle at each harmonic angle, poles at the same angle
    with radius b; b closer to 1 gives narrower notches. There is no fallback
    when the expansion is numerically poor (many harmonics at small wn).

    Returns:
        (coef_num, coef_den), real, coef_den[0] == 1.
    """
    harmonics = harmonic_frequencies(wn)
    upper = np.exp(1j * np.pi * harmonics)
    zeros = np.concatenate([upper, np.conj(upper)])
    poles = b * zeros
    # force unit gain at 0 Hz
    k0 = np.prod(np.abs(1 - zeros)) / np.prod(np.abs(1 - poles))
    coef_num, coef_den = zpk2tf(zeros, poles, 1.0 / k0)
    return np.real(coef_num).astype(float), np.real(coef_den).astype(float)
