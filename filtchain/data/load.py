"""Load signals and filter specs from JSON exports or in-memory dicts."""
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

import numpy as np

from .types import FilterName, FilterSpec

REQUIRED_KEYS = {"samples", "fs"}
SPEC_KEYS = {"name", "type", "b", "n", "fc"}


def load_spec_from_dict(data: Dict[str, Any]) -> FilterSpec:
    """Build a FilterSpec from a dict with keys name, type, b, n, fc (all optional).

    Unknown names map to a passthrough spec and their other keys are ignored;
    type is only kept for Butterworth specs, b only for notch specs.
    """
    name = FilterName.parse(data.get("name"))
    if name == FilterName.NONE:
        return FilterSpec.none()
    unknown = set(data.keys()) - SPEC_KEYS
    if unknown:
        raise ValueError(f"Unknown filter keys: {unknown}")

    n = data.get("n")
    if n is not None:
        if float(n) != int(n):
            raise ValueError(f"Filter order must be an integer, got {n!r}")
        n = int(n)
    return FilterSpec(
        name=name,
        type=data.get("type"),
        b=data.get("b"),
        n=n,
        fc=data.get("fc"),
    )


def load_specs_from_dicts(items: Iterable[Dict[str, Any]]) -> List[FilterSpec]:
    """Build an ordered list of FilterSpec from dicts (see load_spec_from_dict)."""
    return [load_spec_from_dict(item) for item in items]


def load_signal_from_dict(data: Dict[str, Any]) -> tuple[np.ndarray, float, List[FilterSpec]]:
    """Build (samples, fs, specs) from an in-memory dict (e.g. from an API request).

    Args:
        data: Dict with "samples" (1D array) and "fs" (Hz). Optional: "filters",
              a list of filter dicts.

    Returns:
        (samples as float64, sampling rate, filter specs; empty if "filters" absent).

    Raises:
        ValueError: If required keys are missing or samples is not 1D.
    """
    missing = REQUIRED_KEYS - set(data.keys())
    if missing:
        raise ValueError(f"Missing required keys: {missing}")

    samples = np.asarray(data["samples"], dtype=float)
    if samples.ndim != 1:
        raise ValueError(f"samples must be 1D, got shape {samples.shape}")
    fs = float(data["fs"])
    specs = load_specs_from_dicts(data.get("filters") or [])
    return samples, fs, specs


def load_signal(path: Union[str, Path]) -> tuple[np.ndarray, float, List[FilterSpec]]:
    """Load a signal JSON file ({"samples": [...], "fs": ..., "filters": [...]}).

    Raises:
        FileNotFoundError: If path does not exist.
        ValueError: If required keys are missing or samples is not 1D.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return load_signal_from_dict(data)


def load_specs(path: Union[str, Path]) -> List[FilterSpec]:
    """Load a JSON file holding a list of filter dicts, or a dict with a "filters" list."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        if "filters" not in data:
            raise ValueError(f"Missing required key 'filters' in {path}")
        data = data["filters"]
    return load_specs_from_dicts(data)
