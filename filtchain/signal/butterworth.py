"""Butterworth IIR design with adaptive order reduction."""
import warnings
from typing import Sequence, Union

import numpy as np
from scipy.signal import butter

from ..config import NUMERATOR_EPS
from ..data.types import FilterType
from ..errors import DesignError, FilterOrderWarning


def design_butterworth(
    n: int,
    wn: Union[float, Sequence[float], np.ndarray],
    ftype: Union[str, FilterType] = FilterType.LOWPASS,
    eps: float = NUMERATOR_EPS,
) -> tuple[np.ndarray, np.ndarray, int]:
    """Digital Butterworth filter coefficients, lowering the order until the design is usable.

    At high orders and extreme cutoffs every numerator coefficient can collapse
    below eps, which leaves the filter badly scaled. In that case the order is
    decremented and the filter redesigned, at most n times.

    Args:
        n: Requested order.
        wn: Normalized cutoff in (0, 1), or (low, high) for band-pass/band-stop.
        ftype: Band characteristic (FilterType or alias such as "low", "stop").
        eps: Numerator magnitude threshold.

    Returns:
        (coef_num, coef_den, n_used); coef_den[0] == 1.

    Raises:
        DesignError: If no order down to 1 gives a usable numerator.
    """
    ftype = FilterType.parse(ftype)
    wn = np.atleast_1d(np.asarray(wn, dtype=float))
    wn_arg = wn if ftype.is_band else float(wn[0])

    order = int(n)
    coef_num = coef_den = None
    while order > 0:
        coef_num, coef_den = butter(order, wn_arg, btype=ftype.value, analog=False)
        if not np.all(np.abs(coef_num) < eps):
            break
        order -= 1

    if order == 0:
        raise DesignError("bad Butterworth design")
    if order != n:
        warnings.warn(f"Butterworth filter order adjusted to n={order}", FilterOrderWarning, stacklevel=2)
    return coef_num, coef_den, order
