"""Sample generators for simulation studies."""

from __future__ import annotations

from typing import Optional

import numpy as np


def cnorm(n: int, epsilon: float = 0.1, k: float = 10.0, seed: Optional[int] = None) -> np.ndarray:
    """Draw ``n`` values from a contaminated normal distribution.

    Each value comes from ``N(0, 1)`` with probability ``1 - epsilon`` and from
    ``N(0, k^2)`` otherwise.

    Parameters
    ----------
    n:
        Number of values.
    epsilon:
        Contamination probability, ``0 <= epsilon <= 1``.
    k:
        Standard deviation of the contaminating normal, ``k > 0``.
    seed:
        Optional seed for a fresh generator; ``None`` uses OS entropy.
    """

    if epsilon > 1:
        raise ValueError("epsilon must be less than or equal to 1")
    if epsilon < 0:
        raise ValueError("epsilon must be greater than or equal to 0")
    if k <= 0:
        raise ValueError("k must be greater than 0")
    if int(n) != n or n < 0:
        raise ValueError(f"n must be a non-negative integer, got {n!r}")
    rng = np.random.default_rng(seed)
    z = rng.standard_normal(int(n))
    contaminated = rng.random(int(n)) > 1.0 - epsilon
    return np.where(contaminated, k * z, z)
