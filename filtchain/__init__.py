from .config import DEFAULT_CONFIG, FilterConfig
from .data import (
    ButterworthResult,
    FilterName,
    FilterResult,
    FilterSpec,
    FilterType,
    NotchResult,
    PassthroughResult,
    load_signal,
    load_signal_from_dict,
    load_specs,
)
from .errors import DesignError, FiltChainError, FilterOrderWarning, InvalidParameterError
from .pipeline import apply_stage, filter_pipeline
from .run_analysis import run_filtering

__all__ = [
    "DEFAULT_CONFIG",
    "FilterConfig",
    "ButterworthResult",
    "FilterName",
    "FilterResult",
    "FilterSpec",
    "FilterType",
    "NotchResult",
    "PassthroughResult",
    "load_signal",
    "load_signal_from_dict",
    "load_specs",
    "DesignError",
    "FiltChainError",
    "FilterOrderWarning",
    "InvalidParameterError",
    "apply_stage",
    "filter_pipeline",
    "run_filtering",
]
