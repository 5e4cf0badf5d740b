"""Robust measures of scale (dispersion).

Includes the normalized median absolute deviation and inter-quartile range,
the ideal fourths, the percentage bend and biweight midvariances, and an
ordered fallback that returns the first non-zero dispersion estimate.

References
----------
- Wilcox, R. R. (2012). Introduction to Robust Estimation and Hypothesis
  Testing (3rd ed.). Academic Press.
"""

from __future__ import annotations

import math
from typing import Callable, Sequence

import numpy as np
from scipy import stats

from robuststats.config import Config
from robuststats.errors import ZeroDispersionError
from robuststats.estimators.winsor import winvar
from robuststats.utils import as_sample

# Phi^{-1}(0.75); rescales a raw MAD so it estimates sigma under normality.
NORMAL_Q75 = float(stats.norm.ppf(0.75))


def mad(x: np.ndarray) -> float:
    """Median absolute deviation, normalized to estimate sigma for normal data."""

    arr = as_sample(x)
    return float(stats.median_abs_deviation(arr, scale="normal"))


def iqrn(x: np.ndarray) -> float:
    """Inter-quartile range normalized to estimate sigma for normal data."""

    arr = as_sample(x)
    return float(stats.iqr(arr, scale="normal"))


def idealf(x: np.ndarray) -> tuple[float, float]:
    """Ideal fourths (interpolated lower and upper quartiles) of ``x``.

    Returns
    -------
    tuple
        ``(lower_quartile, upper_quartile)``
    """

    y = np.sort(as_sample(x))
    n = y.size
    h = n / 4.0 + 5.0 / 12.0
    j = math.floor(h)
    if j < 1:
        raise ValueError("idealf requires at least 3 values")
    g = h - j
    k = n - j + 1
    # 1-based positions j, j+1 (lower) and k, k-1 (upper)
    lower = (1.0 - g) * y[j - 1] + g * y[j]
    upper = (1.0 - g) * y[k - 1] + g * y[k - 2]
    return float(lower), float(upper)


def pbvar(x: np.ndarray, beta: float = Config.PB_BETA) -> float:
    """Percentage bend midvariance of ``x``.

    Lower values of ``beta`` increase efficiency but reduce robustness.
    Returns 0.0 when at least a fraction ``1 - beta`` of the values coincide
    with the median.
    """

    arr = as_sample(x)
    if beta < 0.0 or beta > 0.5:
        raise ValueError(f"beta must be in [0, 0.5], got {beta}")
    n = arr.size
    absdev = np.sort(np.abs(arr - np.median(arr)))
    m = math.floor((1.0 - beta) * n + 0.5)
    omega = absdev[max(m, 1) - 1]
    if omega <= 0.0:
        return 0.0
    psi = absdev / omega
    inside = psi < 1.0
    z = float(np.sum(psi[inside] ** 2)) + float(np.count_nonzero(~inside))
    counter = int(np.count_nonzero(inside))
    if counter == 0:
        raise ZeroDispersionError("pbvar: no absolute deviations fall inside the bend")
    return n * omega**2 * z / counter**2


def bivar(x: np.ndarray) -> float:
    """Biweight midvariance of ``x``.

    Raises
    ------
    ZeroDispersionError
        If the MAD of ``x`` is zero.
    """

    arr = as_sample(x)
    n = arr.size
    med = float(np.median(arr))
    scale = mad(arr)
    if scale == 0.0:
        raise ZeroDispersionError("bivar: median absolute deviation is zero")
    dev = arr - med
    u = np.abs(dev) / (9.0 * NORMAL_Q75 * scale)
    keep = u < 1.0
    top = n * float(np.sum(dev[keep] ** 2 * (1.0 - u[keep] ** 2) ** 4))
    bot = float(np.sum((1.0 - u[keep] ** 2) * (1.0 - 5.0 * u[keep] ** 2)))
    return top / bot**2


def _winsorized_dispersion(x: np.ndarray) -> float:
    return math.sqrt(winvar(x) / Config.WINVAR_NORMALIZER)


DISPERSION_STRATEGIES: tuple[Callable[[np.ndarray], float], ...] = (
    mad,
    iqrn,
    _winsorized_dispersion,
)
"""Scale estimators tried in order by :func:`estimate_dispersion`."""


def estimate_dispersion(
    x: np.ndarray,
    strategies: Sequence[Callable[[np.ndarray], float]] = DISPERSION_STRATEGIES,
) -> float:
    """Return the first non-zero dispersion estimate among ``strategies``.

    The default order is the normalized MAD, the normalized inter-quartile
    range, then the normalized Winsorized standard deviation; each estimates
    sigma for Gaussian data.

    Raises
    ------
    ZeroDispersionError
        If every strategy returns zero.
    """

    arr = as_sample(x, min_size=2)
    for strategy in strategies:
        value = strategy(arr)
        if value > 0.0:
            return float(value)
    raise ZeroDispersionError("All measures of dispersion are equal to 0")
