"""Run filtering from in-memory data (API entry point). No file I/O or plotting."""
from typing import Any, Dict

from .config import DEFAULT_CONFIG, FilterConfig
from .data import load_signal_from_dict
from .export_viz import build_filter_payload
from .pipeline import filter_pipeline


def run_filtering(data: Dict[str, Any], config: FilterConfig = DEFAULT_CONFIG) -> Dict[str, Any]:
    """Run the filter pipeline on in-memory data and return the JSON-ready payload.

    Args:
        data: Dict with "samples", "fs" and "filters" (list of dicts with
              name, type, b, n, fc).
        config: Filter thresholds and validation switch.

    Returns:
        Payload dict: sample_rate, time_s, raw, filtered, is_empty, and one
        "filters" entry per stage with coefficients and frequency response.

    Raises:
        ValueError: If required keys are missing or data is invalid.
        DesignError: If a Butterworth design collapses.
    """
    samples, fs, specs = load_signal_from_dict(data)
    filtered, results = filter_pipeline(samples, fs, specs, diagnostics=False, config=config)
    return build_filter_payload(samples, filtered, fs, results, config=config)
