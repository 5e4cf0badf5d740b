"""Bootstrap distributions of an arbitrary estimator.

Draws one index matrix, gathers every row from each input sample (the same row
of indices for all samples, so paired observations stay paired), applies the
estimator, and sorts the replicates ascending so later percentile lookups are
plain index accesses.

Examples
--------
>>> import numpy as np
>>> from robuststats.resampling import bootstrap_distribution
>>> dist = bootstrap_distribution(np.arange(1.0, 11.0), estimator=np.mean, nboot=200, seed=2)
>>> dist.nboot
200
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
import logging
from typing import Callable, Optional, Sequence

import numpy as np

from robuststats.estimators.base import estimator_name
from robuststats.resampling.resampler import Resampler, get_resampler
from robuststats.resampling.seeding import SeedLike, resolve_seed_policy
from robuststats.utils import as_sample, check_nboot


_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class BootstrapDistribution:
    """Ascending-sorted bootstrap replicates of one statistic.

    The underlying array is read-only; use :meth:`at` for 1-based order
    statistic lookups.
    """

    values: np.ndarray

    def __post_init__(self) -> None:
        arr = np.sort(np.asarray(self.values, dtype=float))
        arr.setflags(write=False)
        object.__setattr__(self, "values", arr)

    @property
    def nboot(self) -> int:
        return int(self.values.size)

    def __len__(self) -> int:
        return self.nboot

    def at(self, position: int) -> float:
        """Return the ``position``-th smallest replicate (1-based)."""

        if position < 1 or position > self.nboot:
            raise IndexError(f"position {position} outside [1, {self.nboot}]")
        return float(self.values[position - 1])

    def mean(self) -> float:
        return float(np.mean(self.values))

    def std(self) -> float:
        """Sample standard deviation of the replicates (denominator ``nboot - 1``)."""

        return float(np.std(self.values, ddof=1))


def gather_samples(samples: Sequence[np.ndarray], min_size: int = 2) -> tuple[np.ndarray, ...]:
    """Validate one or more equal-length samples and return them as float arrays."""

    if not samples:
        raise ValueError("At least one sample is required")
    arrays = tuple(as_sample(s, name=f"sample {i}", min_size=min_size) for i, s in enumerate(samples))
    n = arrays[0].size
    for i, arr in enumerate(arrays[1:], start=1):
        if arr.size != n:
            raise ValueError(f"Paired samples must agree in length (sample 0 has {n}, sample {i} has {arr.size})")
    return arrays


def compute_replicates(
    samples: Sequence[np.ndarray],
    indices: np.ndarray,
    func: Callable[..., float],
    max_workers: Optional[int] = None,
) -> np.ndarray:
    """Apply ``func`` to each resample described by a row of ``indices``.

    The returned array is in row order (unsorted).
    """

    def _one(row: np.ndarray) -> float:
        return float(func(*(s[row] for s in samples)))

    if max_workers is not None and max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            out = list(pool.map(_one, indices))
    else:
        out = [_one(row) for row in indices]
    return np.asarray(out, dtype=float)


def bootstrap_distribution(
    *samples: np.ndarray,
    estimator: Callable[..., float],
    nboot: int,
    seed: SeedLike = True,
    resampler: Optional[Resampler] = None,
    max_workers: Optional[int] = None,
) -> BootstrapDistribution:
    """Build the bootstrap distribution of ``estimator`` over ``samples``.

    Parameters
    ----------
    *samples:
        One sample, or several equal-length samples resampled row-wise.
    estimator:
        Callable ``estimator(*resampled) -> float``.
    nboot:
        Number of bootstrap replicates (at least 2).
    seed:
        Seed policy (see :mod:`robuststats.resampling.seeding`).
    resampler:
        Resampler to draw from; defaults to the process-wide instance.
    max_workers:
        If greater than 1, evaluate replicates on a thread pool. The result
        does not depend on this setting.

    Raises
    ------
    ValueError
        On samples shorter than 2, mismatched lengths, or ``nboot < 2``.
    """

    arrays = gather_samples(samples)
    nboot = check_nboot(nboot)
    policy = resolve_seed_policy(seed)
    indices = (resampler or get_resampler()).draw(arrays[0].size, nboot, policy)
    replicates = compute_replicates(arrays, indices, estimator, max_workers)
    _LOGGER.debug(
        "Built bootstrap distribution of %s: nboot=%d, n=%d, samples=%d",
        estimator_name(estimator),
        nboot,
        arrays[0].size,
        len(arrays),
    )
    return BootstrapDistribution(replicates)
