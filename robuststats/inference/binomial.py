"""Confidence intervals for a binomial probability of success.

Both procedures accept either ``(s, n)`` counts or a single 0/1 vector, and
use closed-form bounds when ``s`` is 0, 1, ``n - 1`` or ``n``.
"""

from __future__ import annotations

import math
from typing import Any, Optional

import numpy as np
from scipy import stats

from robuststats.config import Config
from robuststats.results import NOT_COMPUTED, ConfidenceInterval, TestResult
from robuststats.utils import check_alpha


def _counts(s: Any, n: Optional[int], name: str) -> tuple[int, int]:
    if n is None:
        arr = np.asarray(s)
        if arr.ndim != 1:
            raise ValueError(f"{name}: x must be a one-dimensional 0/1 vector")
        if np.any((arr != 0) & (arr != 1)):
            raise ValueError("x vector must contain only values 0 or 1.")
        s, n = int(np.sum(arr)), int(arr.size)
    if int(s) != s or int(n) != n:
        raise ValueError(f"{name}: s and n must be integers")
    s, n = int(s), int(n)
    if s > n:
        raise ValueError(f"{name} requires s <= n (no more successes than trials)")
    if s < 0:
        raise ValueError(f"{name} requires s >= 0")
    if n <= 1:
        raise ValueError(f"{name} requires n >= 2 (at least 2 trials)")
    return s, n


def _edge_case(s: int, n: int, alpha: float) -> Optional[ConfidenceInterval]:
    if s == 0:
        return ConfidenceInterval(0.0, 1.0 - alpha ** (1.0 / n))
    if s == 1:
        return ConfidenceInterval(1.0 - (1.0 - alpha / 2.0) ** (1.0 / n), 1.0 - (alpha / 2.0) ** (1.0 / n))
    if s == n - 1:
        return ConfidenceInterval((alpha / 2.0) ** (1.0 / n), (1.0 - alpha / 2.0) ** (1.0 / n))
    if s == n:
        return ConfidenceInterval(alpha ** (1.0 / n), 1.0)
    return None


def binomci(
    s: Any,
    n: Optional[int] = None,
    alpha: float = Config.DEFAULT_ALPHA,
    describe: bool = True,
) -> TestResult:
    """Pratt's ``1 - alpha`` confidence interval for a binomial probability.

    Parameters
    ----------
    s:
        Number of successes, or a vector of 0s and 1s when ``n`` is omitted.
    n:
        Number of trials (at least 2).

    Returns
    -------
    TestResult
        ``estimate`` is the observed proportion ``s / n``.
    """

    s, n = _counts(s, n, "binomci")
    alpha = check_alpha(alpha)
    ci = _edge_case(s, n, alpha)
    if ci is None:
        z = float(stats.norm.ppf(1.0 - alpha / 2.0))

        a = ((s + 1.0) / (n - s)) ** 2
        b = 81.0 * (s + 1) * (n - s) - 9.0 * n - 8.0
        c = -3.0 * z * math.sqrt(9.0 * (s + 1) * (n - s) * (9.0 * n + 5.0 - z * z) + n + 1.0)
        d = 81.0 * (s + 1) ** 2 - 9.0 * (s + 1) * (2.0 + z * z) + 1.0
        upper = 1.0 / (1.0 + a * ((b + c) / d) ** 3)

        a = (s / (n - s - 1.0)) ** 2
        b = 81.0 * s * (n - s - 1) - 9.0 * n - 8.0
        c = 3.0 * z * math.sqrt(9.0 * s * (n - s - 1) * (9.0 * n + 5.0 - z * z) + n + 1.0)
        d = 81.0 * s**2 - 9.0 * s * (2.0 + z * z) + 1.0
        lower = 1.0 / (1.0 + a * ((b + c) / d) ** 3)
        ci = ConfidenceInterval(lower, upper)
    return TestResult(
        method="Pratt's confidence interval for a binomial probability" if describe else NOT_COMPUTED,
        estimate=s / n,
        ci=ci,
        n=n,
    )


def acbinomci(
    s: Any,
    n: Optional[int] = None,
    alpha: float = Config.DEFAULT_ALPHA,
    describe: bool = True,
) -> TestResult:
    """Agresti-Coull ``1 - alpha`` interval for a binomial probability.

    Uses the generalization studied by Brown, Cai and DasGupta; arguments are
    as for :func:`binomci`.
    """

    s, n = _counts(s, n, "acbinomci")
    alpha = check_alpha(alpha)
    ci = _edge_case(s, n, alpha)
    if ci is None:
        cr = float(stats.norm.ppf(1.0 - alpha / 2.0))
        ntil = n + cr * cr
        ptil = (s + cr * cr / 2.0) / ntil
        half = cr * math.sqrt(ptil * (1.0 - ptil) / ntil)
        ci = ConfidenceInterval(ptil - half, ptil + half)
    return TestResult(
        method="Agresti-Coull confidence interval for a binomial probability" if describe else NOT_COMPUTED,
        estimate=s / n,
        ci=ci,
        n=n,
    )
