"""Tau measures of location and scale (Yohai and Zamar, 1988)."""

from __future__ import annotations

import numpy as np

from robuststats.config import Config
from robuststats.errors import ZeroDispersionError
from robuststats.estimators.scale import mad, NORMAL_Q75
from robuststats.utils import as_sample


def _raw_mad(arr: np.ndarray) -> float:
    s = NORMAL_Q75 * mad(arr)
    if s == 0.0:
        raise ZeroDispersionError("tau estimators: median absolute deviation is zero")
    return s


def tauloc(x: np.ndarray, cval: float = Config.TAU_LOCATION_CVAL) -> float:
    """Tau measure of location of ``x``.

    A weighted mean with biweight weights ``(1 - (y/cval)^2)^2`` for
    standardized values ``|y| <= cval`` and zero weight beyond.
    """

    arr = as_sample(x)
    s = _raw_mad(arr)
    y = (arr - np.median(arr)) / s
    w = np.where(np.abs(y) <= cval, (1.0 - (y / cval) ** 2) ** 2, 0.0)
    return float(np.sum(w * arr) / np.sum(w))


def tauvar(x: np.ndarray, cval: float = Config.TAU_SCALE_CVAL) -> float:
    """Tau measure of dispersion (variance scale) of ``x``."""

    arr = as_sample(x)
    s = _raw_mad(arr)
    loc = tauloc(arr)
    r = ((arr - loc) / s) ** 2
    return float(s * s * np.sum(np.minimum(r, cval * cval)) / arr.size)
