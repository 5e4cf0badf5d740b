"""Deterministic with-replacement resampling.

A :class:`Resampler` owns one ``numpy.random.Generator``. Each draw first
applies the caller's seed policy (reseeding the generator or leaving it alone)
and then produces the whole ``(nboot, n)`` index matrix in one call, so two
draws under the same fixed seed return identical matrices.

The reseed-and-draw step holds the resampler's lock, which makes the shared
default instance from :func:`get_resampler` safe to use from several threads.
Callers that need independent streams running in parallel should create their
own ``Resampler`` and pass it explicitly.

Examples
--------
>>> from robuststats.resampling import Resampler, FixedSeed
>>> r = Resampler()
>>> a = r.draw(5, 3, FixedSeed(2))
>>> b = r.draw(5, 3, FixedSeed(2))
>>> (a == b).all()
True
"""

from __future__ import annotations

import logging
import math
import threading
from typing import Optional

import numpy as np

from robuststats.resampling.seeding import SeedLike, resolve_seed_policy
from robuststats.utils import check_nboot


_LOGGER = logging.getLogger(__name__)


class Resampler:
    """Seedable source of bootstrap index matrices.

    Parameters
    ----------
    seed:
        Optional initial seed for the generator. ``None`` seeds from fresh OS
        entropy; the seed policy of each draw may reseed it later.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng: np.random.Generator = np.random.default_rng(seed)
        self._lock = threading.Lock()

    def _apply_policy(self, seed: SeedLike) -> None:
        policy = resolve_seed_policy(seed)
        if policy.seed is not None:
            self._rng = np.random.default_rng(policy.seed)

    def draw(self, n: int, nboot: int, seed: SeedLike = True) -> np.ndarray:
        """Return an ``(nboot, n)`` matrix of indices drawn uniformly from ``[0, n)``.

        Row ``i`` holds the indices of bootstrap resample ``i``.

        Parameters
        ----------
        n:
            Sample size (at least 2).
        nboot:
            Number of resamples (at least 2).
        seed:
            Seed policy or any form accepted by ``resolve_seed_policy``.
        """

        if int(n) != n or n < 2:
            raise ValueError(f"Sample size must be an integer >= 2, got {n!r}")
        nboot = check_nboot(nboot)
        with self._lock:
            self._apply_policy(seed)
            indices = self._rng.integers(0, int(n), size=(nboot, int(n)))
        _LOGGER.debug("Drew %d x %d resample indices (seed=%r)", nboot, n, seed)
        return indices

    def wild_weights(self, n: int, nboot: int, seed: SeedLike = True) -> np.ndarray:
        """Return ``(nboot, n)`` wild-bootstrap multipliers with mean 0 and variance 1.

        The multipliers are ``(U - 0.5) * sqrt(12)`` for ``U`` uniform on
        ``[0, 1)``, seeded under the same policy rules as :meth:`draw`.
        """

        if int(n) != n or n < 2:
            raise ValueError(f"Sample size must be an integer >= 2, got {n!r}")
        nboot = check_nboot(nboot)
        with self._lock:
            self._apply_policy(seed)
            u = self._rng.random(size=(nboot, int(n)))
        _LOGGER.debug("Drew %d x %d wild-bootstrap weights (seed=%r)", nboot, n, seed)
        return (u - 0.5) * math.sqrt(12.0)


_DEFAULT_RESAMPLER: Optional[Resampler] = None
_DEFAULT_LOCK = threading.Lock()


def get_resampler() -> Resampler:
    """Return the process-wide default :class:`Resampler`."""

    global _DEFAULT_RESAMPLER
    with _DEFAULT_LOCK:
        if _DEFAULT_RESAMPLER is None:
            _DEFAULT_RESAMPLER = Resampler()
        return _DEFAULT_RESAMPLER


def draw_indices(n: int, nboot: int, seed: SeedLike = True, resampler: Optional[Resampler] = None) -> np.ndarray:
    """Draw an index matrix from ``resampler`` or the default instance."""

    return (resampler or get_resampler()).draw(n, nboot, seed)
