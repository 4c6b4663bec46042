"""Exceptions and warnings raised while designing or applying filters."""


class FiltChainError(Exception):
    """Base class for filtchain errors."""


class DesignError(FiltChainError, ValueError):
    """Filter coefficients could not be designed (e.g. Butterworth order collapsed to 0)."""


class InvalidParameterError(FiltChainError, ValueError):
    """A filter parameter, sampling rate, or signal violates a precondition."""


class FilterOrderWarning(UserWarning):
    """The resolved filter order differs from the requested one."""
