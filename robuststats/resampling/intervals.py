"""Confidence intervals from bootstrap distributions.

Two conventions are provided:

- **Percentile**: the interval is two order statistics of the sorted
  bootstrap distribution, ``low = round(alpha/2 * nboot) + 1`` and
  ``high = nboot - low + 1`` (1-based).
- **Percentile-t**: resamples are standardized with a per-resample scale
  estimate, ``t_i = (est(resample) - est(data)) / scale(resample)``, and the
  quantiles of ``t`` are mapped back onto the estimator's scale, either
  symmetrically (using ``|t|``) or with equal tails (using signed ``t``).

Index positions are rounded with Python's built-in :func:`round`, which rounds
exact halves to the nearest even integer, and are clamped to ``[1, nboot]``.

References
----------
- Efron, B., & Tibshirani, R. J. (1993). An Introduction to the Bootstrap.
- Wilcox, R. R. (2012). Introduction to Robust Estimation and Hypothesis
  Testing, sections 4.4 and 4.5.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional

import numpy as np

from robuststats.config import Config
from robuststats.errors import ZeroDispersionError
from robuststats.estimators.base import estimator_name
from robuststats.resampling.distribution import (
    BootstrapDistribution,
    bootstrap_distribution,
    compute_replicates,
    gather_samples,
)
from robuststats.resampling.pvalue import bootstrap_pvalue
from robuststats.resampling.resampler import Resampler, get_resampler
from robuststats.resampling.seeding import SeedLike, resolve_seed_policy
from robuststats.results import NOT_COMPUTED, ConfidenceInterval, TestResult
from robuststats.utils import as_sample, check_alpha, check_nboot


_LOGGER = logging.getLogger(__name__)


def _clamp(position: int, nboot: int) -> int:
    return min(max(int(position), 1), nboot)


def percentile_indices(nboot: int, alpha: float) -> tuple[int, int]:
    """Return the 1-based ``(low, high)`` order statistics of a percentile CI.

    For tiny ``nboot`` with ``alpha`` near 1 the two positions can cross; they
    are returned in ascending order.
    """

    nboot = check_nboot(nboot)
    alpha = check_alpha(alpha)
    low = _clamp(round(alpha / 2.0 * nboot) + 1, nboot)
    high = _clamp(nboot - low + 1, nboot)
    return min(low, high), max(low, high)


def percentile_ci(dist: BootstrapDistribution, alpha: float = Config.DEFAULT_ALPHA) -> ConfidenceInterval:
    """Percentile confidence interval read directly off a sorted distribution.

    Both bounds are elements of ``dist``; the interval never shrinks as
    ``alpha`` decreases.
    """

    low, high = percentile_indices(dist.nboot, alpha)
    return ConfidenceInterval(dist.at(low), dist.at(high))


def percentile_bootstrap(
    *samples: np.ndarray,
    estimator: Callable[..., float],
    nboot: int = Config.DEFAULT_NBOOT,
    alpha: float = Config.DEFAULT_ALPHA,
    null_value: Optional[float] = None,
    seed: SeedLike = True,
    resampler: Optional[Resampler] = None,
    max_workers: Optional[int] = None,
) -> TestResult:
    """Percentile bootstrap CI for ``estimator``, with an optional p-value.

    The p-value against ``null_value`` uses the tie-splitting convention of
    :func:`bootstrap_pvalue`; it is left as ``NOT_COMPUTED`` when no null value
    is given.
    """

    arrays = gather_samples(samples)
    alpha = check_alpha(alpha)
    dist = bootstrap_distribution(
        *arrays,
        estimator=estimator,
        nboot=nboot,
        seed=resolve_seed_policy(seed),
        resampler=resampler,
        max_workers=max_workers,
    )
    p_value = NOT_COMPUTED if null_value is None else bootstrap_pvalue(dist, null_value)
    return TestResult(
        estimate=float(estimator(*arrays)),
        ci=percentile_ci(dist, alpha),
        p_value=p_value,
        n=int(arrays[0].size),
    )


def studentized_indices(nboot: int, alpha: float) -> tuple[int, int, int]:
    """Return 1-based ``(icrit, ibot, itop)`` positions for percentile-t intervals.

    ``icrit`` indexes the sorted ``|t|`` distribution (symmetric intervals);
    ``ibot`` and ``itop`` index the sorted signed ``t`` distribution
    (equal-tailed intervals). ``itop`` is never below ``ibot``.
    """

    nboot = check_nboot(nboot)
    alpha = check_alpha(alpha)
    icrit = _clamp(math.floor((1.0 - alpha) * nboot + 0.5), nboot)
    ibot = _clamp(round(alpha * nboot / 2.0) + 1, nboot)
    itop = _clamp(max(nboot - ibot - 1, ibot), nboot)
    return icrit, ibot, itop


def studentized_ci(
    data: np.ndarray,
    *,
    point_estimator: Callable[[np.ndarray], float],
    scale_estimator: Callable[[np.ndarray], float],
    nboot: int = Config.DEFAULT_NBOOT,
    alpha: float = Config.DEFAULT_ALPHA,
    symmetric: bool = True,
    null_value: float = 0.0,
    seed: SeedLike = True,
    resampler: Optional[Resampler] = None,
    max_workers: Optional[int] = None,
) -> TestResult:
    """Percentile-t (studentized bootstrap) confidence interval.

    Parameters
    ----------
    data:
        Sample of at least 2 values.
    point_estimator:
        Location estimator, e.g. the trimmed mean.
    scale_estimator:
        Matching standard-error estimator, e.g. the trimmed-mean standard
        error.
    symmetric:
        If True, use the distribution of ``|t|`` and return a symmetric
        interval plus a p-value. If False, use signed ``t`` quantiles for an
        equal-tailed interval; no p-value is produced in this mode.
    null_value:
        Hypothesized value for the test statistic
        ``(estimate - null_value) / scale(data)``.

    Returns
    -------
    TestResult
        ``estimate``, ``ci``, ``statistic``, ``n``, ``se`` and, for symmetric
        intervals, ``p_value``.

    Raises
    ------
    ZeroDispersionError
        If the scale estimate of the original sample is zero. A resample with
        zero scale contributes an infinite studentized value instead, which
        widens the interval rather than aborting the call.
    """

    x = as_sample(data, min_size=2)
    alpha = check_alpha(alpha)
    nboot = check_nboot(nboot)
    policy = resolve_seed_policy(seed)

    estimate = float(point_estimator(x))
    scale = float(scale_estimator(x))
    if scale == 0.0:
        raise ZeroDispersionError(f"{estimator_name(scale_estimator)} of the sample is zero")
    statistic = (estimate - null_value) / scale

    def _standardized(resample: np.ndarray) -> float:
        s = float(scale_estimator(resample))
        diff = float(point_estimator(resample)) - estimate
        if s == 0.0:
            return math.copysign(math.inf, diff)
        return diff / s

    indices = (resampler or get_resampler()).draw(x.size, nboot, policy)
    t = compute_replicates((x,), indices, _standardized, max_workers)
    n_degenerate = int(np.count_nonzero(np.isinf(t)))
    if n_degenerate:
        _LOGGER.warning(
            "%d of %d resamples have zero %s; their studentized values are infinite",
            n_degenerate,
            nboot,
            estimator_name(scale_estimator),
        )
    icrit, ibot, itop = studentized_indices(nboot, alpha)

    if symmetric:
        tabs = BootstrapDistribution(np.abs(t))
        crit = tabs.at(icrit)
        ci = ConfidenceInterval(estimate - crit * scale, estimate + crit * scale)
        p_value = bootstrap_pvalue(tabs, abs(statistic))
    else:
        tdist = BootstrapDistribution(t)
        ci = ConfidenceInterval(estimate - tdist.at(itop) * scale, estimate - tdist.at(ibot) * scale)
        p_value = NOT_COMPUTED

    _LOGGER.debug(
        "Percentile-t interval (%s): estimate=%.6g, se=%.6g, nboot=%d",
        "symmetric" if symmetric else "equal-tailed",
        estimate,
        scale,
        nboot,
    )
    return TestResult(
        estimate=estimate,
        ci=ci,
        statistic=statistic,
        p_value=p_value,
        n=int(x.size),
        se=scale,
    )
