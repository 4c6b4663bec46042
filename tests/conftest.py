import numpy as np
import pytest


@pytest.fixture
def sine_mix():
    """1000 samples at 100 Hz: 2 Hz + 30 Hz components."""
    fs = 100.0
    t = np.arange(1000) / fs
    return np.sin(2 * np.pi * 2.0 * t) + 0.5 * np.sin(2 * np.pi * 30.0 * t), fs


class RecordingPlotter:
    def __init__(self):
        self.calls = []

    def __call__(self, coef_num, coef_den, sample_rate, title):
        self.calls.append((coef_num, coef_den, sample_rate, title))


@pytest.fixture
def plotter():
    return RecordingPlotter()
