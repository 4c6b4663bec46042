import warnings

import numpy as np
import pytest
from scipy.signal import butter

from filtchain.data.types import FilterType
from filtchain.errors import DesignError, FilterOrderWarning
from filtchain.signal import design_butterworth, normalize_cutoff


def test_normalize_cutoff():
    np.testing.assert_allclose(normalize_cutoff(10.0, 100.0), [0.2])
    np.testing.assert_allclose(normalize_cutoff([5.0, 20.0], 100.0), [0.1, 0.4])


@pytest.mark.parametrize(
    "ftype, wn",
    [
        ("low", 0.2),
        ("high", 0.2),
        ("bandpass", [0.1, 0.4]),
        ("stop", [0.1, 0.4]),
    ],
)
def test_matches_scipy_when_well_scaled(ftype, wn):
    with warnings.catch_warnings():
        warnings.simplefilter("error", FilterOrderWarning)
        b, a, n = design_butterworth(4, wn, ftype)
    ref_b, ref_a = butter(4, wn, btype=FilterType.parse(ftype).value)
    assert n == 4
    np.testing.assert_allclose(b, ref_b)
    np.testing.assert_allclose(a, ref_a)
    assert a[0] == pytest.approx(1.0)


def test_band_filter_has_2n_poles():
    b, a, n = design_butterworth(3, [0.1, 0.4], FilterType.BANDPASS)
    assert n == 3
    assert len(a) == 7


def test_order_reduced_on_numerator_underflow():
    with pytest.warns(FilterOrderWarning, match=r"adjusted to n=\d+"):
        b, a, n = design_butterworth(20, 0.01, "low")
    assert 1 <= n < 20
    assert np.max(np.abs(b)) >= 1e-6
    # the resolved order is the highest well-scaled one
    ref_b, _ = butter(n + 1, 0.01)
    assert np.all(np.abs(ref_b) < 1e-6)


def test_design_error_when_order_collapses():
    with pytest.raises(DesignError, match="bad Butterworth design"):
        design_butterworth(2, 1e-7, "low")


def test_eps_threshold_is_configurable():
    b, _, n = design_butterworth(4, 0.2, "low", eps=1e-12)
    assert n == 4
    with pytest.raises(DesignError):
        design_butterworth(2, 0.2, "low", eps=10.0)
