"""Winsorizing and the Winsorized moments built on it.

Winsorizing replaces the lowest and highest ``tr`` fraction of the data with
the nearest retained order statistic rather than discarding them. The
Winsorized variance also drives the standard error of the trimmed mean.
"""

from __future__ import annotations

import math

import numpy as np

from robuststats.config import Config
from robuststats.utils import as_sample, check_trim


def winval(x: np.ndarray, tr: float = Config.DEFAULT_TRIM) -> np.ndarray:
    """Return a Winsorized copy of ``x``.

    With ``g = floor(tr * n)``, values at or below the ``(g+1)``-th smallest
    observation are set to it, and values at or above the ``(g+1)``-th largest
    are set to that one. Order of the input is preserved.
    """

    arr = as_sample(x)
    tr = check_trim(tr)
    n = arr.size
    ordered = np.sort(arr)
    g = math.floor(tr * n)
    xbot, xtop = ordered[g], ordered[n - g - 1]
    return np.where(arr <= xbot, xbot, np.where(arr >= xtop, xtop, arr))


def winmean(x: np.ndarray, tr: float = Config.DEFAULT_TRIM) -> float:
    """Winsorized mean of ``x``."""

    return float(np.mean(winval(x, tr)))


def winvar(x: np.ndarray, tr: float = Config.DEFAULT_TRIM) -> float:
    """Winsorized variance of ``x`` (denominator ``n - 1``)."""

    w = winval(x, tr)
    if w.size < 2:
        raise ValueError("Winsorized variance requires at least 2 values")
    return float(np.var(w, ddof=1))


def winstd(x: np.ndarray, tr: float = Config.DEFAULT_TRIM) -> float:
    """Winsorized standard deviation of ``x``."""

    return math.sqrt(winvar(x, tr))


def trimse(x: np.ndarray, tr: float = Config.DEFAULT_TRIM) -> float:
    """Estimated standard error of the ``tr``-trimmed mean.

    ``sqrt(winvar(x, tr)) / ((1 - 2 tr) sqrt(n))``; undefined for ``tr = 0.5``.
    """

    arr = as_sample(x, min_size=2)
    tr = check_trim(tr)
    if tr >= 0.5:
        raise ValueError("trimse is undefined for tr = 0.5")
    return math.sqrt(winvar(arr, tr)) / ((1.0 - 2.0 * tr) * math.sqrt(arr.size))
