"""Bootstrap test of an indirect (mediated) effect.

For the model ``iv -> m -> dv`` the indirect effect is the product ``a * b`` of
the slope of ``m`` on ``iv`` and the coefficient of ``m`` in the regression of
``dv`` on ``iv`` and ``m``. Its sampling distribution is approximated by
resampling the ``(dv, iv, m)`` rows jointly; the Sobel test (Aroian's variant
of the standard error) is reported alongside.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np
from scipy import stats

from robuststats.config import Config
from robuststats.estimators.regression import indirect_effect, ols
from robuststats.resampling.distribution import bootstrap_distribution, gather_samples
from robuststats.resampling.intervals import percentile_ci
from robuststats.resampling.pvalue import bootstrap_pvalue
from robuststats.resampling.resampler import Resampler
from robuststats.resampling.seeding import SeedLike, resolve_seed_policy
from robuststats.results import NOT_COMPUTED, MediationResult
from robuststats.utils import check_alpha


_LOGGER = logging.getLogger(__name__)


def _path_table(dv: np.ndarray, iv: np.ndarray, m: np.ndarray) -> np.ndarray:
    total = ols(iv, dv)
    a_path = ols(iv, m)
    direct = ols(np.column_stack([iv, m]), dv)
    # rows: c, a, c', b
    return np.vstack([total[1], a_path[1], direct[1], direct[2]])


def _sobel(regfit: np.ndarray, alpha: float) -> dict[str, float]:
    a, se_a = regfit[1, 0], regfit[1, 1]
    b, se_b = regfit[3, 0], regfit[3, 1]
    estimate = float(a * b)
    se = float(math.sqrt(b * b * se_a * se_a + a * a * se_b * se_b + se_a * se_a * se_b * se_b))
    z = estimate / se
    crit = float(stats.norm.ppf(1.0 - alpha / 2.0))
    return {
        "estimate": estimate,
        "se": se,
        "z": z,
        "ci_low": estimate - crit * se,
        "ci_high": estimate + crit * se,
        "p_value": float(2.0 * stats.norm.sf(abs(z))),
    }


def indirect_test(
    dv: np.ndarray,
    iv: np.ndarray,
    m: np.ndarray,
    nboot: int = Config.INDIRECT_NBOOT,
    alpha: float = Config.DEFAULT_ALPHA,
    seed: SeedLike = True,
    resampler: Optional[Resampler] = None,
    describe: bool = True,
) -> MediationResult:
    """Test the indirect effect of ``iv`` on ``dv`` through the mediator ``m``.

    Parameters
    ----------
    dv:
        Dependent variable.
    iv:
        Independent variable.
    m:
        Mediator, same length as ``dv`` and ``iv``.
    nboot:
        Number of bootstrap resamples of the rows.

    Returns
    -------
    MediationResult
        Percentile bootstrap interval, bootstrap p-value against zero, mean
        and standard error of the bootstrap distribution, the regression path
        table and the Sobel test.
    """

    dv_a, iv_a, m_a = gather_samples((dv, iv, m), min_size=4)
    alpha = check_alpha(alpha)
    n = iv_a.size

    dist = bootstrap_distribution(
        iv_a,
        m_a,
        dv_a,
        estimator=indirect_effect,
        nboot=nboot,
        seed=resolve_seed_policy(seed),
        resampler=resampler,
    )
    regfit = _path_table(dv_a, iv_a, m_a)
    _LOGGER.debug("indirect_test: n=%d, nboot=%d", n, nboot)
    return MediationResult(
        nboot=dist.nboot,
        n=n,
        estimate=float(regfit[1, 0] * regfit[3, 0]),
        boot_estimate=dist.mean(),
        boot_ci=percentile_ci(dist, alpha),
        boot_se=dist.std(),
        p_value=bootstrap_pvalue(dist, 0.0),
        regfit=regfit,
        sobel=_sobel(regfit, alpha),
        method="Bootstrap test of the indirect effect of iv on dv through m" if describe else NOT_COMPUTED,
    )
