"""Two-sided bootstrap p-values with tie splitting."""

from __future__ import annotations

from typing import Union

import numpy as np

from robuststats.resampling.distribution import BootstrapDistribution


def bootstrap_pvalue(dist: Union[BootstrapDistribution, np.ndarray], null_value: float) -> float:
    """Two-sided p-value of ``null_value`` against a bootstrap distribution.

    With ``p_low`` the fraction of replicates strictly below the null value and
    ``p_tie`` half the fraction equal to it, the p-value is
    ``2 * min(p_low + p_tie, 1 - p_low - p_tie)``. Splitting ties keeps the
    result in ``[0, 1]`` and symmetric in the two tails.
    """

    values = dist.values if isinstance(dist, BootstrapDistribution) else np.asarray(dist, dtype=float)
    if values.size == 0:
        raise ValueError("Cannot compute a p-value from an empty distribution")
    p_low = float(np.mean(values < null_value))
    p_tie = 0.5 * float(np.mean(values == null_value))
    p = p_low + p_tie
    return min(max(2.0 * min(p, 1.0 - p), 0.0), 1.0)
