"""Diagnostic charts: filter frequency response and raw vs filtered traces."""
from pathlib import Path
from typing import Optional

import numpy as np
from scipy.signal import freqz

from ..config import RESPONSE_POINTS_PER_HZ


def frequency_response(
    coef_num: np.ndarray,
    coef_den: np.ndarray,
    sample_rate: float,
    n_points: Optional[int] = None,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return (freqs_hz, magnitude_db, phase_deg) over [0, Nyquist).

    n_points defaults to sample_rate * RESPONSE_POINTS_PER_HZ.
    """
    if n_points is None:
        n_points = max(int(sample_rate * RESPONSE_POINTS_PER_HZ), 8)
    freqs, h = freqz(coef_num, coef_den, worN=n_points, fs=sample_rate)
    with np.errstate(divide="ignore"):
        magnitude_db = 20 * np.log10(np.abs(h))
    phase_deg = np.degrees(np.unwrap(np.angle(h)))
    return freqs, magnitude_db, phase_deg


def _pyplot(output_path: Optional[Path]):
    try:
        import matplotlib
        if output_path is not None:
            matplotlib.use("Agg")  # no display when saving to file
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError("matplotlib is required for plotting. Install with: pip install matplotlib") from None
    return plt


def _finish(fig, plt, output_path: Optional[Path]) -> None:
    fig.tight_layout()
    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=150)
        plt.close(fig)
    else:
        plt.show()


def plot_filter_response(
    coef_num: np.ndarray,
    coef_den: np.ndarray,
    sample_rate: float,
    title: str,
    output_path: Optional[Path] = None,
    n_points: Optional[int] = None,
) -> None:
    """Plot magnitude (dB) and phase (deg) of one filter stage.

    Args:
        coef_num, coef_den: Filter coefficients.
        sample_rate: Sampling frequency in Hz (frequency axis in Hz).
        title: Figure title, e.g. 'butter lowpass (n=4; Fc=10.0000)'.
        output_path: If provided, save figure here; otherwise display.
        n_points: Frequency resolution (default sample_rate * 4).
    """
    plt = _pyplot(output_path)
    freqs, magnitude_db, phase_deg = frequency_response(coef_num, coef_den, sample_rate, n_points)

    fig, (ax_mag, ax_phase) = plt.subplots(2, 1, figsize=(10, 6), sharex=True)
    ax_mag.plot(freqs, magnitude_db, color="black", linewidth=1.2)
    ax_mag.set_ylabel("Magnitude (dB)")
    ax_mag.set_title(title)
    ax_mag.grid(True, alpha=0.3)
    ax_phase.plot(freqs, phase_deg, color="blue", linewidth=1)
    ax_phase.set_xlabel("Frequency (Hz)")
    ax_phase.set_ylabel("Phase (degrees)")
    ax_phase.grid(True, alpha=0.3)
    _finish(fig, plt, output_path)


def plot_filtered_signal(
    raw: np.ndarray,
    filtered: np.ndarray,
    sample_rate: float,
    title: str = "Filtered signal",
    output_path: Optional[Path] = None,
) -> None:
    """Plot raw and filtered traces vs time. An empty filtered signal is noted in the title."""
    plt = _pyplot(output_path)
    raw = np.asarray(raw, dtype=float)
    t = np.arange(len(raw), dtype=float) / sample_rate

    fig, ax = plt.subplots(figsize=(12, 5))
    ax.plot(t, raw, color="gray", linewidth=1, alpha=0.7, label="Raw")
    if len(filtered) == len(raw):
        ax.plot(t, filtered, color="black", linewidth=1.5, label="Filtered")
    else:
        title += "  [signal too short to filter]"
    ax.set_xlabel("Time (s)")
    ax.set_ylabel("Amplitude")
    ax.set_title(title)
    ax.legend(loc="upper right", fontsize=9)
    ax.grid(True, alpha=0.3)
    _finish(fig, plt, output_path)
