"""Estimator interface consumed by the resampling engine.

An estimator is any callable mapping one or more equal-length samples to a
scalar. The engine only relies on that call signature, so plain functions such
as ``numpy.median`` are valid estimators. Estimators must be pure: they may not
mutate their inputs or keep references to them after returning.

Parameters that the estimator closes over (a trim fraction, a bending
constant) are bound with :func:`bind`, which also records how many samples the
estimator expects.

Example
-------
```python
from robuststats.estimators import bind, tmean, pearson

trimmed = bind(tmean, tr=0.1)        # single-sample estimator
trimmed(np.array([1.0, 2.0, 30.0]))

corr = bind(pearson, arity=2)        # paired-sample estimator
```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class Estimator(Protocol):
    """Callable returning a scalar statistic of one or more samples."""

    def __call__(self, *samples: np.ndarray) -> float:
        ...


@dataclass(frozen=True)
class BoundEstimator:
    """An estimator function together with the keyword parameters it closes over.

    Parameters
    ----------
    func:
        Function called as ``func(*samples, **params)``.
    params:
        Keyword arguments passed on every call.
    arity:
        Number of samples the function expects (1 for location estimators,
        2 for correlations, 3 for mediation effects).
    name:
        Identifier used in log messages; defaults to the function name.
    """

    func: Callable[..., float]
    params: Mapping[str, Any] = field(default_factory=dict)
    arity: int = 1
    name: str = ""

    def __post_init__(self) -> None:
        if self.arity < 1:
            raise ValueError("Estimator arity must be >= 1")
        if not self.name:
            object.__setattr__(self, "name", getattr(self.func, "__name__", type(self.func).__name__))

    def __call__(self, *samples: np.ndarray) -> float:
        if len(samples) != self.arity:
            raise ValueError(
                f"Estimator {self.name!r} expects {self.arity} sample(s), got {len(samples)}"
            )
        return float(self.func(*samples, **dict(self.params)))

    def to_dict(self) -> dict[str, Any]:
        """Return estimator metadata suitable for JSON serialization."""

        return {"estimator": self.name, "arity": self.arity, **dict(self.params)}


def bind(func: Callable[..., float], /, *, arity: int = 1, name: str = "", **params: Any) -> BoundEstimator:
    """Close ``func`` over ``params`` and return a :class:`BoundEstimator`."""

    return BoundEstimator(func=func, params=params, arity=arity, name=name)


def estimator_name(estimator: Callable[..., float]) -> str:
    """Best-effort readable name of an estimator callable."""

    if isinstance(estimator, BoundEstimator):
        return estimator.name
    return getattr(estimator, "__name__", type(estimator).__name__)
