"""Export filtered signal and resolved filter stages to a single JSON payload."""
import json
from pathlib import Path
from typing import Any, Dict, List, Sequence

import numpy as np

from .config import DEFAULT_CONFIG, FilterConfig
from .data.types import FilterResult, PassthroughResult
from .viz.chart import frequency_response


def _to_list(arr: np.ndarray) -> List[float]:
    return np.asarray(arr, dtype=float).tolist()


def _finite_or_none(values: np.ndarray) -> List[Any]:
    # -inf dB at exact nulls is not valid JSON
    return [float(v) if np.isfinite(v) else None for v in values]


def build_filter_payload(
    samples: np.ndarray,
    filtered: np.ndarray,
    sample_rate: float,
    results: Sequence[FilterResult],
    config: FilterConfig = DEFAULT_CONFIG,
) -> Dict[str, Any]:
    """Build a dict with time, raw and filtered traces, and one entry per filter stage.

    Each designed stage carries its coefficients and frequency response
    (freqs_hz, magnitude_db, phase_deg); passthrough stages carry name only.
    """
    samples = np.asarray(samples, dtype=float)
    t = np.arange(len(samples), dtype=float) / sample_rate

    filters: List[Dict[str, Any]] = []
    for i, result in enumerate(results):
        entry = result.to_dict()
        entry["stage"] = i
        if not isinstance(result, PassthroughResult):
            freqs, magnitude_db, phase_deg = frequency_response(
                result.coef_num,
                result.coef_den,
                sample_rate,
                n_points=max(int(sample_rate * config.response_points_per_hz), 8),
            )
            entry["response"] = {
                "freqs_hz": _to_list(freqs),
                "magnitude_db": _finite_or_none(magnitude_db),
                "phase_deg": _finite_or_none(phase_deg),
            }
        if getattr(result, "order_reduced", False):
            entry["requested_n"] = int(result.requested_n)
        filters.append(entry)

    return {
        "sample_rate": float(sample_rate),
        "sample_count": int(len(samples)),
        "is_empty": bool(len(filtered) == 0),
        "time_s": _to_list(t),
        "raw": _to_list(samples),
        "filtered": _to_list(filtered),
        "filters": filters,
    }


def export_filter_json(
    payload: Dict[str, Any],
    path: Path,
) -> None:
    """Write the filter payload to a JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
