"""Confidence intervals and tests for a single measure of location.

Closed-form procedures (Tukey-McLaughlin trimmed-mean interval, the
Hettmansperger-Sheather median interval) sit next to the bootstrap ones, which
are thin wrappers binding an estimator to the generic engine in
:mod:`robuststats.resampling`.

Examples
--------
>>> import numpy as np
>>> from robuststats.inference import trimci, bootstrapci
>>> from robuststats.estimators import tmean
>>> x = np.arange(1.0, 11.0)
>>> trimci(x).estimate
5.5
>>> res = bootstrapci(x, est=np.mean, nboot=500, seed=2)
>>> res.ci.low < 5.5 < res.ci.high
True
"""

from __future__ import annotations

import dataclasses
import logging
import math
from typing import Callable, Optional, Union

import numpy as np
from scipy import stats

from robuststats.config import Config
from robuststats.errors import ZeroDispersionError
from robuststats.estimators.base import bind, estimator_name
from robuststats.estimators.location import median, mom, onestep, tmean
from robuststats.estimators.winsor import trimse, winval
from robuststats.resampling.distribution import bootstrap_distribution
from robuststats.resampling.intervals import percentile_bootstrap, studentized_ci
from robuststats.resampling.resampler import Resampler
from robuststats.resampling.seeding import SeedLike, resolve_seed_policy
from robuststats.results import NOT_COMPUTED, ConfidenceInterval, TestResult
from robuststats.utils import as_sample, check_alpha, check_trim


_LOGGER = logging.getLogger(__name__)


def trimci(
    x: np.ndarray,
    tr: float = Config.DEFAULT_TRIM,
    alpha: float = Config.DEFAULT_ALPHA,
    null_value: float = 0.0,
    describe: bool = True,
) -> TestResult:
    """Tukey-McLaughlin ``1 - alpha`` confidence interval for the trimmed mean.

    Uses Student's t with ``n - 2 floor(tr n) - 1`` degrees of freedom and the
    Winsorized-variance standard error. The p-value tests
    ``trimmed mean == null_value``.
    """

    arr = as_sample(x, min_size=2)
    tr = check_trim(tr)
    alpha = check_alpha(alpha)
    n = arr.size
    se = trimse(arr, tr)
    if se == 0.0:
        raise ZeroDispersionError("trimci: standard error of the trimmed mean is zero")
    df = n - 2 * math.floor(tr * n) - 1
    estimate = tmean(arr, tr)
    crit = float(stats.t.ppf(1.0 - alpha / 2.0, df))
    statistic = (estimate - null_value) / se
    return TestResult(
        method="1-alpha confidence interval for the trimmed mean" if describe else NOT_COMPUTED,
        estimate=estimate,
        ci=ConfidenceInterval(estimate - crit * se, estimate + crit * se),
        statistic=statistic,
        df=df,
        p_value=float(2.0 * stats.t.sf(abs(statistic), df)),
        n=n,
        se=se,
    )


def bootstrapci(
    x: np.ndarray,
    est: Callable[[np.ndarray], float] = onestep,
    alpha: float = Config.DEFAULT_ALPHA,
    nboot: int = Config.DEFAULT_NBOOT,
    seed: SeedLike = True,
    null_value: Optional[float] = None,
    resampler: Optional[Resampler] = None,
    describe: bool = True,
) -> TestResult:
    """Percentile bootstrap ``1 - alpha`` confidence interval for ``est``.

    Parameters
    ----------
    x:
        Sample of at least 2 values.
    est:
        Location estimator; the one-step M-estimator by default.
    null_value:
        If given, also compute the two-sided bootstrap p-value of
        ``est == null_value``.
    seed:
        ``True`` (default seed), ``False``/``None`` (no reseeding), an integer
        or a seed policy.

    Raises
    ------
    ZeroDispersionError
        If ``est`` fails on any resample. With the one-step M-estimator a
        resample whose MAD is zero aborts the call, which is common for
        samples of about ten values or fewer.
    """

    arr = as_sample(x, min_size=2)
    result = percentile_bootstrap(
        arr,
        estimator=est,
        nboot=nboot,
        alpha=alpha,
        null_value=null_value,
        seed=resolve_seed_policy(seed),
        resampler=resampler,
    )
    _LOGGER.debug("bootstrapci: %s over n=%d, nboot=%d", estimator_name(est), arr.size, nboot)
    if describe:
        result = dataclasses.replace(
            result,
            method=f"Percentile bootstrap 1-alpha confidence interval for {estimator_name(est)}",
        )
    return result


def momci(
    x: np.ndarray,
    bend: float = Config.MOM_BEND,
    alpha: float = Config.DEFAULT_ALPHA,
    nboot: int = Config.DEFAULT_NBOOT,
    seed: SeedLike = True,
    null_value: Optional[float] = None,
    resampler: Optional[Resampler] = None,
    describe: bool = True,
) -> TestResult:
    """Bootstrap confidence interval for the modified one-step M-estimator (MOM)."""

    return bootstrapci(
        x,
        est=bind(mom, bend=bend),
        alpha=alpha,
        nboot=nboot,
        seed=seed,
        null_value=null_value,
        resampler=resampler,
        describe=describe,
    )


def trimpb(
    x: np.ndarray,
    tr: float = Config.DEFAULT_TRIM,
    alpha: float = Config.DEFAULT_ALPHA,
    nboot: int = Config.DEFAULT_NBOOT,
    win: Union[bool, float] = False,
    null_value: float = 0.0,
    seed: SeedLike = True,
    resampler: Optional[Resampler] = None,
    describe: bool = True,
) -> TestResult:
    """Percentile bootstrap interval and p-value for the trimmed mean.

    Parameters
    ----------
    win:
        Amount of Winsorizing applied before bootstrapping. ``True`` means
        ``0.1``; a number must not exceed ``tr``. ``False`` disables it.
    null_value:
        Hypothesized trimmed mean for the p-value.
    """

    arr = as_sample(x, min_size=2)
    tr = check_trim(tr)
    if isinstance(win, bool):
        if win:
            arr = winval(arr, Config.TRIMPB_WIN)
    else:
        win = check_trim(win, name="win")
        if win > tr:
            raise ValueError("The amount of Winsorizing must be <= to the amount of trimming")
        arr = winval(arr, win)

    result = percentile_bootstrap(
        arr,
        estimator=bind(tmean, tr=tr),
        nboot=nboot,
        alpha=alpha,
        null_value=null_value,
        seed=resolve_seed_policy(seed),
        resampler=resampler,
    )
    if describe:
        result = dataclasses.replace(
            result,
            method="Compute a 1-alpha confidence interval for a trimmed mean using the bootstrap percentile method",
        )
    return result


def trimcibt(
    x: np.ndarray,
    tr: float = Config.DEFAULT_TRIM,
    alpha: float = Config.DEFAULT_ALPHA,
    nboot: int = Config.DEFAULT_NBOOT,
    symmetric: bool = True,
    null_value: float = 0.0,
    seed: SeedLike = True,
    resampler: Optional[Resampler] = None,
    describe: bool = True,
) -> TestResult:
    """Bootstrap percentile-t confidence interval for the trimmed mean.

    ``symmetric=True`` gives the symmetric two-sided interval together with a
    p-value for ``trimmed mean == null_value``; ``symmetric=False`` gives an
    equal-tailed interval and no p-value.

    Raises
    ------
    ZeroDispersionError
        If the trimmed-mean standard error of the sample is 0.
    """

    tr = check_trim(tr)
    if tr >= 0.5:
        raise ValueError("trimcibt requires tr < 0.5")
    result = studentized_ci(
        x,
        point_estimator=bind(tmean, tr=tr),
        scale_estimator=bind(trimse, tr=tr),
        nboot=nboot,
        alpha=alpha,
        symmetric=symmetric,
        null_value=null_value,
        seed=resolve_seed_policy(seed),
        resampler=resampler,
    )
    if describe:
        method = f"Bootstrap {1 - alpha:g} confidence interval for the trimmed mean using a bootstrap percentile t method"
        if not symmetric:
            method += " (p value is computed only for the symmetric interval)"
        result = dataclasses.replace(result, method=method)
    return result


def bootse(
    x: np.ndarray,
    nboot: int = Config.BOOTSE_NBOOT,
    est: Callable[[np.ndarray], float] = median,
    seed: SeedLike = True,
    resampler: Optional[Resampler] = None,
) -> float:
    """Bootstrap estimate of the standard error of ``est``.

    The sample standard deviation (denominator ``nboot - 1``) of the bootstrap
    distribution of ``est``.
    """

    dist = bootstrap_distribution(
        as_sample(x, min_size=2),
        estimator=est,
        nboot=nboot,
        seed=resolve_seed_policy(seed),
        resampler=resampler,
    )
    return dist.std()


def _sint_bounds(xsort: np.ndarray, alpha: float) -> tuple[float, float]:
    n = xsort.size
    k = int(stats.binom.ppf(alpha / 2.0, n, 0.5))
    gk = stats.binom.cdf(n - k, n, 0.5) - stats.binom.cdf(k - 1, n, 0.5)
    if gk < 1.0 - alpha:
        k -= 1
        gk = stats.binom.cdf(n - k, n, 0.5) - stats.binom.cdf(k - 1, n, 0.5)
    if k < 1:
        # too few observations for this alpha: the interval is the sample range
        return float(xsort[0]), float(xsort[-1])
    gkp1 = stats.binom.cdf(n - k - 1, n, 0.5) - stats.binom.cdf(k, n, 0.5)
    ival = (gk - 1.0 + alpha) / (gk - gkp1)
    lam = ((n - k) * ival) / (k + (n - 2 * k) * ival)
    # 1-based order statistics k, k+1 and n-k, n-k+1
    low = lam * xsort[k] + (1.0 - lam) * xsort[k - 1]
    high = lam * xsort[n - k - 1] + (1.0 - lam) * xsort[n - k]
    return float(low), float(high)


def _sint_method(arr: np.ndarray, base: str) -> str:
    if np.unique(arr).size < arr.size:
        return base + "; duplicate values detected, a Harrell-Davis based method might have more power"
    return base


def sint(x: np.ndarray, alpha: float = Config.DEFAULT_ALPHA, describe: bool = True) -> TestResult:
    """Hettmansperger-Sheather ``1 - alpha`` confidence interval for the median.

    Interpolates between adjacent order statistics so the coverage is close to
    the nominal level even though the binomial distribution is discrete.
    """

    arr = as_sample(x, min_size=2)
    alpha = check_alpha(alpha)
    low, high = _sint_bounds(np.sort(arr), alpha)
    return TestResult(
        method=_sint_method(arr, "Confidence interval for the median") if describe else NOT_COMPUTED,
        estimate=float(np.median(arr)),
        ci=ConfidenceInterval(low, high),
        n=int(arr.size),
    )


def sint_test(
    x: np.ndarray,
    test_median: float,
    alpha: float = Config.DEFAULT_ALPHA,
    describe: bool = True,
) -> TestResult:
    """Median confidence interval plus the p-value of ``median == test_median``.

    The p-value is the ``alpha`` at which the Hettmansperger-Sheather interval
    just excludes ``test_median``, found by bisection on ``log(alpha)`` over
    ``[-8, -0.001]`` to a tolerance of ``1e-4``.
    """

    arr = as_sample(x, min_size=2)
    alpha = check_alpha(alpha)
    xsort = np.sort(arr)
    med = float(np.median(arr))
    # lower bound when the hypothesized median is below the sample median
    side = 0 if test_median < med else 1

    def _gap(loga: float) -> float:
        return _sint_bounds(xsort, math.exp(loga))[side] - test_median

    min_loga, max_loga = -8.0, -0.001
    ci_b = _gap(max_loga)
    if _gap(min_loga) * ci_b > 0:
        # never crosses: inside every interval or outside the widest one
        inside = ci_b > 0 if side else ci_b < 0
        p_value = 1.0 if inside else 0.0
    else:
        while max_loga - min_loga > 1e-4:
            new_loga = 0.5 * (max_loga + min_loga)
            new_gap = _gap(new_loga)
            if new_gap * ci_b >= 0:
                ci_b = new_gap
                max_loga = new_loga
            else:
                min_loga = new_loga
        p_value = math.exp(0.5 * (max_loga + min_loga))

    low, high = _sint_bounds(xsort, alpha)
    return TestResult(
        method=_sint_method(arr, "Confidence interval for the median with p-value") if describe else NOT_COMPUTED,
        estimate=med,
        ci=ConfidenceInterval(low, high),
        p_value=p_value,
        n=int(arr.size),
    )
