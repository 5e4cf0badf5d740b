"""Exception types raised by estimators and the resampling engine."""

from __future__ import annotations


class ZeroDispersionError(ValueError):
    """Raised when an estimator needs a scale estimate and the data has none.

    Subclasses ``ValueError`` so callers that only guard against bad input keep
    working.
    """
