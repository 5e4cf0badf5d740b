"""
robuststats: Robust estimation and bootstrap inference.

Implements outlier-resistant estimators of location, scale and correlation
(trimmed and Winsorized means, M-estimators, percentage bend and tau
estimators) and the interval and hypothesis-testing procedures built on them,
many of them driven by a reproducible, estimator-agnostic bootstrap engine.
"""

__all__ = [
    "Config",
    "DEFAULT_SEED",
    "ZeroDispersionError",
    "__version__",
    # Results
    "NOT_COMPUTED",
    "ConfidenceInterval",
    "TestResult",
    # Resampling engine (eager imports; lightweight)
    "FixedSeed",
    "DefaultSeed",
    "NoReseed",
    "Resampler",
    "bootstrap_distribution",
    "percentile_ci",
    "studentized_ci",
    "bootstrap_pvalue",
    # Estimators and inference (lazy-imported via __getattr__)
    "estimators",
    "inference",
    "cnorm",
]

__version__ = "0.1.0"

from typing import Any

from robuststats.config import Config, DEFAULT_SEED
from robuststats.errors import ZeroDispersionError
from robuststats.results import NOT_COMPUTED, ConfidenceInterval, TestResult
from robuststats.resampling import (
    DefaultSeed,
    FixedSeed,
    NoReseed,
    Resampler,
    bootstrap_distribution,
    bootstrap_pvalue,
    percentile_ci,
    studentized_ci,
)


def __getattr__(name: str) -> Any:  # lazy attribute access for the procedure namespaces
    if name == "estimators":
        import robuststats.estimators as _est

        return _est
    if name == "inference":
        import robuststats.inference as _inf

        return _inf
    if name == "cnorm":
        from robuststats.distributions import cnorm as _cnorm

        return _cnorm
    raise AttributeError(f"module 'robuststats' has no attribute {name!r}")
