"""Comparison of two dependent groups."""

from __future__ import annotations

import math

import numpy as np
from scipy import stats

from robuststats.config import Config
from robuststats.errors import ZeroDispersionError
from robuststats.estimators.location import tmean
from robuststats.estimators.winsor import winval, winvar
from robuststats.results import NOT_COMPUTED, ConfidenceInterval, TestResult
from robuststats.utils import as_paired, check_alpha, check_trim


def yuend(
    x: np.ndarray,
    y: np.ndarray,
    tr: float = Config.DEFAULT_TRIM,
    alpha: float = Config.DEFAULT_ALPHA,
    describe: bool = True,
) -> TestResult:
    """Yuen's test comparing the trimmed means of two dependent variables.

    Returns a ``1 - alpha`` interval for ``tmean(x) - tmean(y)`` together with
    the t statistic, its degrees of freedom ``h - 1`` (``h`` observations left
    after trimming) and the two-sided p-value.
    """

    xa, ya = as_paired(x, y)
    tr = check_trim(tr)
    alpha = check_alpha(alpha)
    if tr >= 0.5:
        raise ValueError("yuend requires tr < 0.5")
    n = xa.size
    h = n - 2 * math.floor(tr * n)
    if h < 2:
        raise ValueError("yuend needs at least 2 observations left after trimming")
    q1 = (n - 1) * winvar(xa, tr)
    q2 = (n - 1) * winvar(ya, tr)
    q3 = (n - 1) * float(np.cov(winval(xa, tr), winval(ya, tr), ddof=1)[0, 1])
    df = h - 1
    se = math.sqrt(max(q1 + q2 - 2.0 * q3, 0.0) / (h * (h - 1)))
    if se == 0.0:
        raise ZeroDispersionError("yuend: standard error of the trimmed mean difference is zero")
    crit = float(stats.t.ppf(1.0 - alpha / 2.0, df))
    dif = tmean(xa, tr) - tmean(ya, tr)
    statistic = dif / se
    return TestResult(
        method="Comparing the trimmed means of two dependent variables" if describe else NOT_COMPUTED,
        estimate=dif,
        ci=ConfidenceInterval(dif - crit * se, dif + crit * se),
        statistic=statistic,
        df=df,
        p_value=float(2.0 * stats.t.sf(abs(statistic), df)),
        n=n,
        se=se,
    )
