import numpy as np
import pytest
from scipy.signal import butter

from filtchain.signal import zero_phase_filter


@pytest.mark.parametrize("length, n", [(12, 4), (13, 4), (3, 1), (4, 1), (0, 2), (30, 10), (31, 10)])
def test_length_guard(length, n):
    b, a = butter(n, 0.2)
    out = zero_phase_filter(b, a, np.ones(length), n)
    if length > 3 * n:
        assert len(out) == length
    else:
        assert len(out) == 0


def test_no_phase_shift():
    fs = 200.0
    t = np.arange(2000) / fs
    x = np.sin(2 * np.pi * 2.0 * t)
    b, a = butter(4, 20.0 / (fs / 2))
    y = zero_phase_filter(b, a, x, 4)
    # interior of a passband sine comes through without delay
    np.testing.assert_allclose(y[200:-200], x[200:-200], atol=1e-3)


def test_band_filter_just_above_guard():
    # 2n+1 coefficients, but only L > 3n is required
    b, a = butter(4, [0.1, 0.4], btype="bandpass")
    out = zero_phase_filter(b, a, np.random.default_rng(0).normal(size=13), 4)
    assert len(out) == 13


def test_input_not_modified():
    b, a = butter(2, 0.3)
    x = np.random.default_rng(1).normal(size=100)
    x_copy = x.copy()
    zero_phase_filter(b, a, x, 2)
    np.testing.assert_array_equal(x, x_copy)


def test_guard_factor():
    b, a = butter(2, 0.3)
    assert len(zero_phase_filter(b, a, np.ones(20), 2, guard_factor=10)) == 0
    assert len(zero_phase_filter(b, a, np.ones(21), 2, guard_factor=10)) == 21
