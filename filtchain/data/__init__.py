from .load import load_signal, load_signal_from_dict, load_spec_from_dict, load_specs, load_specs_from_dicts
from .types import (
    ButterworthResult,
    FilterName,
    FilterResult,
    FilterSpec,
    FilterType,
    NotchResult,
    PassthroughResult,
)

__all__ = [
    "load_signal",
    "load_signal_from_dict",
    "load_spec_from_dict",
    "load_specs",
    "load_specs_from_dicts",
    "ButterworthResult",
    "FilterName",
    "FilterResult",
    "FilterSpec",
    "FilterType",
    "NotchResult",
    "PassthroughResult",
]
