"""Apply an ordered list of filter specs to a signal."""
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from .config import DEFAULT_CONFIG, FilterConfig
from .data.types import (
    ButterworthResult,
    FilterName,
    FilterResult,
    FilterSpec,
    NotchResult,
    PassthroughResult,
)
from .signal import design_butterworth, design_notch, normalize_cutoff, zero_phase_filter
from .validity import check_signal, check_spec

Plotter = Callable[[np.ndarray, np.ndarray, float, str], None]


def design_stage(spec: FilterSpec, sample_rate: float, config: FilterConfig = DEFAULT_CONFIG) -> FilterResult:
    """Resolve a spec into a result carrying the coefficients actually used.

    Raises:
        DesignError: If Butterworth order reduction reaches 0.
    """
    if spec.name == FilterName.BUTTER:
        wn = normalize_cutoff(spec.fc, sample_rate)
        coef_num, coef_den, n = design_butterworth(spec.n, wn, spec.type, eps=config.numerator_eps)
        return ButterworthResult(
            type=spec.type,
            n=n,
            fc=spec.fc,
            coef_num=coef_num,
            coef_den=coef_den,
            requested_n=spec.n,
        )
    if spec.name == FilterName.NOTCH:
        wn = float(normalize_cutoff(spec.fc, sample_rate)[0])
        coef_num, coef_den = design_notch(wn, spec.b)
        return NotchResult(
            b=float(spec.b),
            n=max(len(coef_num), len(coef_den)) - 1,
            fc=spec.fc,
            coef_num=coef_num,
            coef_den=coef_den,
        )
    return PassthroughResult()


def apply_stage(
    signal: np.ndarray,
    spec: FilterSpec,
    sample_rate: float,
    config: FilterConfig = DEFAULT_CONFIG,
) -> Tuple[np.ndarray, FilterResult]:
    """One pipeline step: (signal, spec) -> (signal', result).

    Passthrough stages return the input array itself. Otherwise the signal is
    zero-phase filtered with the resolved order; a signal too short for that
    order (including an already empty one) comes back empty.
    """
    result = design_stage(spec, sample_rate, config)
    if isinstance(result, PassthroughResult):
        return signal, result
    filtered = zero_phase_filter(
        result.coef_num,
        result.coef_den,
        signal,
        result.n,
        guard_factor=config.length_guard_factor,
    )
    return filtered, result


def stage_title(result: FilterResult) -> str:
    """Diagnostic title, e.g. 'butter lowpass (n=4; Fc=10.0000)'."""
    ftype = result.type.value if result.type is not None else ""
    return f"{result.name.value} {ftype} (n={result.n}; Fc={float(np.mean(result.fc)):0.4f})"


def filter_pipeline(
    samples: Sequence[float],
    sample_rate: float,
    specs: Sequence[FilterSpec],
    diagnostics: bool = False,
    config: FilterConfig = DEFAULT_CONFIG,
    plotter: Optional[Plotter] = None,
) -> Tuple[np.ndarray, List[FilterResult]]:
    """Run every spec in order, each stage filtering the previous stage's output.

    Args:
        samples: Raw 1D signal; cast to float64 before any design step.
        sample_rate: Sampling frequency in Hz.
        specs: Ordered filter specs. An empty list returns the signal unchanged.
        diagnostics: If True, call plotter for every designed stage.
        config: Thresholds and the validation switch.
        plotter: Called as plotter(coef_num, coef_den, sample_rate, title).
                 Defaults to viz.plot_filter_response.

    Returns:
        (filtered signal, one result per spec). The signal is empty if any
        stage had fewer than length_guard_factor * n + 1 samples to work with.

    Raises:
        DesignError: If a Butterworth design collapses; no partial results are returned.
        InvalidParameterError: If config.validate and a precondition fails.
    """
    signal = np.asarray(samples, dtype=float)
    specs = list(specs)
    if config.validate:
        check_signal(signal, sample_rate)
        for spec in specs:
            check_spec(spec, sample_rate)

    if diagnostics and plotter is None:
        from .viz import plot_filter_response

        plotter = plot_filter_response

    results: List[FilterResult] = []
    for spec in specs:
        signal, result = apply_stage(signal, spec, sample_rate, config)
        if diagnostics and not isinstance(result, PassthroughResult):
            plotter(result.coef_num, result.coef_den, sample_rate, stage_title(result))
        results.append(result)
    return signal, results
