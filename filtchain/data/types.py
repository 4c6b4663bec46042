"""Typed structures for filter requests and resolved filter stages."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple, Union

import numpy as np

from ..errors import InvalidParameterError


class FilterName(str, Enum):
    """Filter family of a stage. Anything unrecognized is a passthrough."""

    NONE = "none"
    BUTTER = "butter"
    NOTCH = "notch"

    @classmethod
    def parse(cls, value: Union[str, "FilterName", None]) -> "FilterName":
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.NONE
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.NONE


class FilterType(str, Enum):
    """Butterworth band characteristic. Values are the scipy ``btype`` names."""

    LOWPASS = "lowpass"
    HIGHPASS = "highpass"
    BANDPASS = "bandpass"
    BANDSTOP = "bandstop"

    @property
    def is_band(self) -> bool:
        return self in (FilterType.BANDPASS, FilterType.BANDSTOP)

    @classmethod
    def parse(cls, value: Union[str, "FilterType"]) -> "FilterType":
        """Parse a type name, accepting the short aliases ('low', 'high', 'band', 'stop', ...)."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key not in _TYPE_ALIASES:
            raise InvalidParameterError(f"Unknown Butterworth filter type: {value!r}")
        return _TYPE_ALIASES[key]


_TYPE_ALIASES = {
    "low": FilterType.LOWPASS,
    "lowpass": FilterType.LOWPASS,
    "high": FilterType.HIGHPASS,
    "highpass": FilterType.HIGHPASS,
    "band": FilterType.BANDPASS,
    "pass": FilterType.BANDPASS,
    "bandpass": FilterType.BANDPASS,
    "stop": FilterType.BANDSTOP,
    "bandstop": FilterType.BANDSTOP,
}


def _as_fc(fc: Union[float, Sequence[float], np.ndarray, None]) -> Tuple[float, ...]:
    if fc is None:
        return ()
    return tuple(float(f) for f in np.atleast_1d(np.asarray(fc, dtype=float)).ravel())


@dataclass(frozen=True)
class FilterSpec:
    """One requested filter stage.

    - name: filter family; unrecognized names become FilterName.NONE (passthrough).
    - type: Butterworth band characteristic (dropped for other names).
    - b: notch pole radius in (0, 1); closer to 1 gives a narrower notch (dropped for other names).
    - n: requested Butterworth order.
    - fc: cutoff frequency in Hz, or (low, high) for band-pass/band-stop.
    """

    name: FilterName = FilterName.NONE
    type: Union[FilterType, str, None] = None
    b: Optional[float] = None
    n: Optional[int] = None
    fc: Tuple[float, ...] = ()

    def __post_init__(self) -> None:
        name = FilterName.parse(self.name)
        object.__setattr__(self, "name", name)

        # type only applies to Butterworth, b only to notch; passthrough keeps nothing
        ftype = self.type if name == FilterName.BUTTER else None
        if ftype is None or ftype == "":
            ftype = None
        elif not isinstance(ftype, FilterType):
            # unknown types are kept as given; check_spec or the designer rejects them
            ftype = _TYPE_ALIASES.get(str(ftype).strip().lower(), ftype)
        object.__setattr__(self, "type", ftype)

        b = self.b if name == FilterName.NOTCH else None
        if b is not None and not isinstance(b, bool):
            try:
                b = float(b)
            except (TypeError, ValueError):
                pass  # non-numeric b is left for check_spec to report
        object.__setattr__(self, "b", b)
        if name == FilterName.NONE:
            object.__setattr__(self, "n", None)
            object.__setattr__(self, "fc", ())
        else:
            object.__setattr__(self, "fc", _as_fc(self.fc))

    @classmethod
    def butter(cls, n: int, fc: Union[float, Sequence[float]], type: Union[str, FilterType] = FilterType.LOWPASS) -> "FilterSpec":
        return cls(name=FilterName.BUTTER, type=type, n=n, fc=fc)

    @classmethod
    def notch(cls, fc: float, b: float) -> "FilterSpec":
        return cls(name=FilterName.NOTCH, b=b, fc=fc)

    @classmethod
    def none(cls) -> "FilterSpec":
        return cls(name=FilterName.NONE)


def _coefs_to_list(arr: np.ndarray) -> list:
    return [float(c) for c in arr]


@dataclass(frozen=True)
class PassthroughResult:
    """Stage that left the signal untouched."""

    name: FilterName = field(default=FilterName.NONE, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name.value, "type": None, "b": None, "n": None, "fc": None,
                "coef_num": None, "coef_den": None}


@dataclass
class ButterworthResult:
    """Resolved Butterworth stage. n may be lower than requested (adaptive order reduction)."""

    type: FilterType
    n: int
    fc: Tuple[float, ...]
    coef_num: np.ndarray
    coef_den: np.ndarray
    requested_n: Optional[int] = None
    name: FilterName = field(default=FilterName.BUTTER, init=False)

    @property
    def b(self) -> None:
        return None

    @property
    def order_reduced(self) -> bool:
        return self.requested_n is not None and self.requested_n != self.n

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name.value,
            "type": self.type.value,
            "b": None,
            "n": int(self.n),
            "fc": list(self.fc),
            "coef_num": _coefs_to_list(self.coef_num),
            "coef_den": _coefs_to_list(self.coef_den),
        }


@dataclass
class NotchResult:
    """Resolved harmonic notch stage. n is derived from the coefficient lengths."""

    b: float
    n: int
    fc: Tuple[float, ...]
    coef_num: np.ndarray
    coef_den: np.ndarray
    name: FilterName = field(default=FilterName.NOTCH, init=False)

    @property
    def type(self) -> None:
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name.value,
            "type": None,
            "b": float(self.b),
            "n": int(self.n),
            "fc": list(self.fc),
            "coef_num": _coefs_to_list(self.coef_num),
            "coef_den": _coefs_to_list(self.coef_den),
        }


FilterResult = Union[PassthroughResult, ButterworthResult, NotchResult]
