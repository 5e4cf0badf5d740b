"""Generic resampling inference engine.

This package provides:
- Seed policies and a deterministic, lock-protected resampler
- Bootstrap distributions of arbitrary (single or paired-sample) estimators
- Percentile and percentile-t confidence intervals
- Tie-aware two-sided bootstrap p-values

Public API:
- FixedSeed, DefaultSeed, NoReseed, SeedPolicy, resolve_seed_policy
- Resampler, get_resampler, draw_indices
- BootstrapDistribution, bootstrap_distribution
- percentile_indices, percentile_ci, percentile_bootstrap
- studentized_indices, studentized_ci
- bootstrap_pvalue
"""

from __future__ import annotations

from robuststats.resampling.distribution import BootstrapDistribution, bootstrap_distribution
from robuststats.resampling.intervals import (
    percentile_bootstrap,
    percentile_ci,
    percentile_indices,
    studentized_ci,
    studentized_indices,
)
from robuststats.resampling.pvalue import bootstrap_pvalue
from robuststats.resampling.resampler import Resampler, draw_indices, get_resampler
from robuststats.resampling.seeding import (
    DefaultSeed,
    FixedSeed,
    NoReseed,
    SeedLike,
    SeedPolicy,
    resolve_seed_policy,
)

__all__ = [
    "FixedSeed",
    "DefaultSeed",
    "NoReseed",
    "SeedPolicy",
    "SeedLike",
    "resolve_seed_policy",
    "Resampler",
    "get_resampler",
    "draw_indices",
    "BootstrapDistribution",
    "bootstrap_distribution",
    "percentile_indices",
    "percentile_ci",
    "percentile_bootstrap",
    "studentized_indices",
    "studentized_ci",
    "bootstrap_pvalue",
]
