from .butterworth import design_butterworth
from .cutoff import normalize_cutoff
from .notch import design_notch, harmonic_frequencies
from .zero_phase import zero_phase_filter

__all__ = [
    "design_butterworth",
    "design_notch",
    "harmonic_frequencies",
    "normalize_cutoff",
    "zero_phase_filter",
]
