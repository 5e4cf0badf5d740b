"""Robust measures of location.

Trimmed means, Huber-type M-estimators (one-step and modified one-step), the
percentage bend location, the Harrell-Davis quantile estimator and the
McKean-Schrader standard error of the median. Every function leaves its input
untouched and works on a sorted copy when order statistics are needed.
"""

from __future__ import annotations

import math
import warnings

import numpy as np
from scipy import stats

from robuststats.config import Config
from robuststats.errors import ZeroDispersionError
from robuststats.estimators.scale import mad
from robuststats.utils import as_sample, check_trim


def tmean(x: np.ndarray, tr: float = Config.DEFAULT_TRIM) -> float:
    """Trimmed mean of ``x``.

    Omits the lowest and highest ``tr`` fraction of the data, ``0 <= tr <= 0.5``.
    ``tr = 0`` gives the mean and ``tr = 0.5`` the median.
    """

    arr = as_sample(x)
    tr = check_trim(tr)
    if tr == 0.0:
        return float(np.mean(arr))
    if tr == 0.5:
        return float(np.median(arr))
    n = arr.size
    lo = math.floor(n * tr)
    return float(np.mean(np.sort(arr)[lo : n - lo]))


def median(x: np.ndarray) -> float:
    """Sample median of ``x``."""

    return float(np.median(as_sample(x)))


def hpsi(x: np.ndarray, bend: float = Config.ONESTEP_BEND) -> np.ndarray:
    """Huber's psi function, ``max(min(x, bend), -bend)``, elementwise."""

    return np.clip(np.asarray(x, dtype=float), -bend, bend)


def onestep(x: np.ndarray, bend: float = Config.ONESTEP_BEND) -> float:
    """One-step M-estimator of location using Huber's psi.

    Raises
    ------
    ZeroDispersionError
        If the MAD of ``x`` is zero.
    """

    arr = as_sample(x)
    med = float(np.median(arr))
    scale = mad(arr)
    if scale == 0.0:
        raise ZeroDispersionError("onestep: median absolute deviation is zero")
    y = (arr - med) / scale
    a = float(np.sum(hpsi(y, bend)))
    b = int(np.count_nonzero(np.abs(y) <= bend))
    return med + scale * a / b


def mom(x: np.ndarray, bend: float = Config.MOM_BEND) -> float:
    """Modified one-step M-estimator (MOM).

    The unweighted mean of all values within ``bend * mad(x)`` of the median.
    """

    arr = as_sample(x)
    med = float(np.median(arr))
    scale = mad(arr)
    keep = np.abs(arr - med) <= bend * scale
    return float(np.mean(arr[keep]))


def pbos(x: np.ndarray, beta: float = Config.PB_BETA) -> float:
    """Percentage bend measure of location.

    Raises
    ------
    ZeroDispersionError
        If the ``(1 - beta)`` quantile of the absolute deviations is zero.
    """

    arr = as_sample(x, min_size=2)
    n = arr.size
    med = float(np.median(arr))
    absdev = np.sort(np.abs(arr - med))
    omhat = float(absdev[max(math.floor((1.0 - beta) * n), 1) - 1])
    if omhat == 0.0:
        raise ZeroDispersionError("pbos: percentage bend scale is zero")
    psi = (arr - med) / omhat
    i1 = int(np.count_nonzero(psi < -1.0))
    i2 = int(np.count_nonzero(psi > 1.0))
    sx = float(np.sum(arr[(psi >= -1.0) & (psi <= 1.0)]))
    return (sx + omhat * (i2 - i1)) / (n - i1 - i2)


def hd(x: np.ndarray, q: float = 0.5) -> float:
    """Harrell-Davis estimate of the ``q``-th quantile of ``x``."""

    if not (0.0 < q < 1.0):
        raise ValueError(f"q must be in (0, 1), got {q}")
    y = np.sort(as_sample(x))
    n = y.size
    m1 = (n + 1) * q
    m2 = (n + 1) * (1.0 - q)
    grid = np.arange(n + 1) / n
    w = np.diff(stats.beta.cdf(grid, m1, m2))
    return float(np.sum(w * y))


def msmedse(x: np.ndarray) -> float:
    """Standard error of the median (McKean and Schrader, 1984).

    Emits a ``RuntimeWarning`` when ``x`` has tied values, in which case the
    estimate can be highly inaccurate even for large ``n``.
    """

    y = np.sort(as_sample(x, min_size=2))
    n = y.size
    if np.any(y[1:] == y[:-1]):
        warnings.warn(
            "Tied values detected. Estimate of standard error might be highly inaccurate, even with n large",
            RuntimeWarning,
        )
    q995 = float(stats.norm.ppf(0.995))
    av = max(int(round((n + 1) / 2.0 - q995 * math.sqrt(n / 4.0))), 1)
    top = n - av + 1
    return abs(float(y[top - 1] - y[av - 1])) / (2.0 * q995)
