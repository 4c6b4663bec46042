"""Cutoff normalization relative to the Nyquist frequency."""
from typing import Sequence, Union

import numpy as np


def normalize_cutoff(fc: Union[float, Sequence[float]], sample_rate: float) -> np.ndarray:
    """Return fc / (sample_rate / 2) as a 1-D float array (one or two entries)."""
    nyq = 0.5 * sample_rate
    return np.atleast_1d(np.asarray(fc, dtype=float)) / nyq
