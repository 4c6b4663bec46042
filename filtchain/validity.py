"""Precondition checks on the sampling rate, signal, and filter specs."""
import numbers

import numpy as np

from .data.types import FilterName, FilterSpec, FilterType
from .errors import InvalidParameterError
from .signal.cutoff import normalize_cutoff


def check_signal(samples: np.ndarray, sample_rate: float) -> None:
    """Raise InvalidParameterError unless samples is a non-empty 1D array and sample_rate > 0."""
    if not np.isfinite(sample_rate) or sample_rate <= 0:
        raise InvalidParameterError(f"Sampling rate must be positive, got {sample_rate}")
    if samples.ndim != 1:
        raise InvalidParameterError(f"Signal must be 1D, got shape {samples.shape}")
    if samples.size == 0:
        raise InvalidParameterError("Signal is empty")


def check_spec(spec: FilterSpec, sample_rate: float) -> None:
    """Raise InvalidParameterError if a Butterworth or notch spec cannot be designed as given.

    Passthrough specs are always valid.
    """
    if spec.name == FilterName.NONE:
        return

    if spec.name == FilterName.BUTTER:
        if spec.type is None:
            raise InvalidParameterError("Butterworth filter requires a type")
        if not isinstance(spec.type, FilterType):
            raise InvalidParameterError(f"Unknown Butterworth filter type: {spec.type!r}")
        n = spec.n
        if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 1:
            raise InvalidParameterError(f"Butterworth order must be a positive integer, got {n!r}")
        expected = 2 if spec.type.is_band else 1
        if len(spec.fc) != expected:
            raise InvalidParameterError(
                f"Butterworth {spec.type.value} filter requires {expected} cutoff(s), got {len(spec.fc)}"
            )
        if expected == 2 and spec.fc[0] >= spec.fc[1]:
            raise InvalidParameterError(f"Band edges must be increasing, got {spec.fc}")
    else:
        if len(spec.fc) != 1:
            raise InvalidParameterError(f"Notch filter requires a single cutoff, got {len(spec.fc)}")
        b = spec.b
        if isinstance(b, bool) or not isinstance(b, numbers.Real) or not 0.0 < b < 1.0:
            raise InvalidParameterError(f"Notch pole radius b must lie in (0, 1), got {spec.b!r}")

    wn = normalize_cutoff(spec.fc, sample_rate)
    if np.any(wn <= 0.0) or np.any(wn >= 1.0):
        raise InvalidParameterError(
            f"Normalized cutoff {wn.tolist()} outside (0, 1) for fc={list(spec.fc)} Hz at fs={sample_rate} Hz"
        )
