"""Regression kernels used as estimator plug-ins.

Only what the inference procedures need: the single-predictor Theil-Sen
estimator, an ordinary least squares coefficient table, and the
product-of-coefficients indirect effect used in mediation analysis.
"""

from __future__ import annotations

import numpy as np
from scipy import stats

from robuststats.errors import ZeroDispersionError
from robuststats.estimators.location import hd
from robuststats.utils import as_paired, as_sample


def theil_sen(x: np.ndarray, y: np.ndarray, harrell_davis: bool = False) -> tuple[float, float]:
    """Theil-Sen regression of ``y`` on a single predictor ``x``.

    The slope is the median of all pairwise slopes with distinct ``x``. The
    intercept is ``median(y) - slope * median(x)``, or the same expression with
    Harrell-Davis medians when ``harrell_davis`` is True.

    Returns
    -------
    tuple
        ``(intercept, slope)``
    """

    xa, ya = as_paired(x, y)
    dx = xa[None, :] - xa[:, None]
    dy = ya[None, :] - ya[:, None]
    valid = dx > 0
    if not valid.any():
        raise ZeroDispersionError("theil_sen: all predictor values are identical")
    slope = float(np.median(dy[valid] / dx[valid]))
    if harrell_davis:
        intercept = hd(ya) - slope * hd(xa)
    else:
        intercept = float(np.median(ya)) - slope * float(np.median(xa))
    return intercept, slope


def ols(predictors: np.ndarray, y: np.ndarray) -> np.ndarray:
    """Least squares fit of ``y`` on ``predictors`` plus an intercept.

    Parameters
    ----------
    predictors:
        Array of shape ``(n,)`` or ``(n, p)``.
    y:
        Response of length ``n``.

    Returns
    -------
    numpy.ndarray
        Coefficient table of shape ``(p + 1, 4)``; the first row is the
        intercept, columns are estimate, standard error, t statistic and
        two-sided p-value.
    """

    ya = as_sample(y, name="y", min_size=2)
    xmat = np.asarray(predictors, dtype=float)
    if xmat.ndim == 1:
        xmat = xmat[:, None]
    n, p = xmat.shape
    if n != ya.size:
        raise ValueError(f"predictors and y must agree in length ({n} != {ya.size})")
    df = n - p - 1
    if df < 1:
        raise ValueError("ols requires more observations than coefficients")
    design = np.column_stack([np.ones(n), xmat])
    coef, _, rank, _ = np.linalg.lstsq(design, ya, rcond=None)
    if rank < p + 1:
        raise ZeroDispersionError("ols: design matrix is rank deficient")
    resid = ya - design @ coef
    sigma2 = float(resid @ resid) / df
    cov = sigma2 * np.linalg.inv(design.T @ design)
    se = np.sqrt(np.diag(cov))
    with np.errstate(divide="ignore", invalid="ignore"):
        tval = coef / se
    pval = 2.0 * stats.t.sf(np.abs(tval), df)
    return np.column_stack([coef, se, tval, pval])


def indirect_effect(iv: np.ndarray, m: np.ndarray, dv: np.ndarray) -> float:
    """Product-of-coefficients indirect effect ``a * b``.

    ``a`` is the slope of ``m`` on ``iv``; ``b`` is the coefficient of ``m`` in
    the regression of ``dv`` on ``iv`` and ``m``.
    """

    x = np.asarray(iv, dtype=float)
    med = np.asarray(m, dtype=float)
    y = np.asarray(dv, dtype=float)
    dx = x - x.mean()
    dm = med - med.mean()
    dy = y - y.mean()
    sxx = float(dx @ dx)
    sxm = float(dx @ dm)
    smm = float(dm @ dm)
    sxy = float(dx @ dy)
    smy = float(dm @ dy)
    det = sxx * smm - sxm * sxm
    if sxx == 0.0 or det == 0.0:
        raise ZeroDispersionError("indirect_effect: predictors are constant or collinear")
    a = sxm / sxx
    b = (sxx * smy - sxm * sxy) / det
    return a * b
