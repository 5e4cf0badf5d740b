"""Outlier detection with the ideal-fourths boxplot rule."""

from __future__ import annotations

from typing import Optional

import numpy as np

from robuststats.estimators.scale import idealf
from robuststats.results import NOT_COMPUTED, OutlierResult
from robuststats.utils import as_sample


def outbox(
    x: np.ndarray,
    mbox: bool = False,
    gval: Optional[float] = None,
    describe: bool = True,
) -> OutlierResult:
    """Flag outliers using a boxplot rule based on the ideal fourths.

    Parameters
    ----------
    x:
        Sample of at least 3 values.
    mbox:
        If True, use Carling's (2000) modification: bounds are
        ``median +- gval * IQR`` with ``gval`` depending on ``n``. Otherwise the
        bounds are ``q1 - gval * IQR`` and ``q3 + gval * IQR``.
    gval:
        Multiplier for the interquartile range. Defaults to 1.5, or to
        ``(17.63 n - 23.64) / (7.74 n - 3.71)`` with ``mbox``.

    Returns
    -------
    OutlierResult
        0-based positions of flagged and retained values, the flagged values
        and their count.
    """

    arr = as_sample(x, min_size=3)
    n = arr.size
    lower_q, upper_q = idealf(arr)
    iqr = upper_q - lower_q
    if mbox:
        if gval is None:
            gval = (17.63 * n - 23.64) / (7.74 * n - 3.71)
        med = float(np.median(arr))
        cl, cu = med - gval * iqr, med + gval * iqr
    else:
        if gval is None:
            gval = 1.5
        cl, cu = lower_q - gval * iqr, upper_q + gval * iqr

    flagged = (arr < cl) | (arr > cu)
    positions = np.arange(n)
    method = NOT_COMPUTED
    if describe:
        method = "Outlier detection method using the ideal-fourths based boxplot rule"
        if mbox:
            method += " (using the modification suggested by Carling (2000))"
    return OutlierResult(
        out_id=positions[flagged],
        keep_id=positions[~flagged],
        out_val=arr[flagged],
        n_out=int(np.count_nonzero(flagged)),
        method=method,
    )
