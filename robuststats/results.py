"""Result records returned by every inference procedure.

A result is pure data: procedures fill in the fields they compute and leave the
rest as :data:`NOT_COMPUTED`. The sentinel is deliberately distinct from
``float("nan")``, which is reserved for arithmetic that is genuinely undefined
(for example a correlation of a constant vector inside a larger computation).

Examples
--------
>>> from robuststats.results import TestResult, ConfidenceInterval, NOT_COMPUTED
>>> res = TestResult(estimate=5.5, ci=ConfidenceInterval(3.9, 7.1))
>>> res.p_value is NOT_COMPUTED
True
>>> res.to_dict()
{'estimate': 5.5, 'ci': [3.9, 7.1]}
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
import math
from typing import Any, Iterator, Union

import numpy as np


class _Sentinel(Enum):
    NOT_COMPUTED = "not computed"

    def __repr__(self) -> str:
        return "NOT_COMPUTED"

    def __bool__(self) -> bool:
        return False


NOT_COMPUTED = _Sentinel.NOT_COMPUTED
"""Marker for a result field the producing procedure did not compute."""


def is_computed(value: Any) -> bool:
    """Return True unless ``value`` is the :data:`NOT_COMPUTED` marker."""

    return value is not NOT_COMPUTED


@dataclass(frozen=True)
class ConfidenceInterval:
    """Closed interval ``[low, high]`` on the scale of the original estimator.

    Supports tuple-style unpacking: ``low, high = ci``.
    """

    low: float
    high: float

    def __post_init__(self) -> None:
        if not (math.isnan(self.low) or math.isnan(self.high)) and self.low > self.high:
            raise ValueError(f"Confidence interval bounds out of order: ({self.low}, {self.high})")

    def __iter__(self) -> Iterator[float]:
        yield self.low
        yield self.high

    @property
    def width(self) -> float:
        return self.high - self.low

    @property
    def midpoint(self) -> float:
        return 0.5 * (self.low + self.high)

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high

    def to_list(self) -> list[float]:
        return [float(self.low), float(self.high)]


def _jsonable(value: Any) -> Any:
    if isinstance(value, ConfidenceInterval):
        return value.to_list()
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


class _ResultMixin:
    """Shared helpers for the frozen result dataclasses."""

    def is_computed(self, name: str) -> bool:
        """Return True if field ``name`` was filled in by the producing call."""

        return is_computed(getattr(self, name))

    def to_dict(self) -> dict[str, Any]:
        """Return computed fields as JSON-friendly values.

        Fields left as :data:`NOT_COMPUTED` are omitted; NaN values are kept.
        """

        out: dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if value is NOT_COMPUTED:
                continue
            out[f.name] = _jsonable(value)
        return out


MaybeFloat = Union[float, _Sentinel]
MaybeInt = Union[int, _Sentinel]


@dataclass(frozen=True)
class TestResult(_ResultMixin):
    """Uniform output record for interval and hypothesis-testing procedures.

    Parameters
    ----------
    method:
        Human-readable description of the procedure, if requested.
    estimate:
        Point estimate computed on the original sample.
    ci:
        Confidence interval for the estimand.
    statistic:
        Test statistic on the original sample.
    df:
        Degrees of freedom of the reference distribution.
    p_value:
        Two-sided p-value.
    n:
        Sample size.
    se:
        Standard error of the estimate.
    """

    __test__ = False  # keep pytest from collecting this class

    method: Union[str, _Sentinel] = NOT_COMPUTED
    estimate: MaybeFloat = NOT_COMPUTED
    ci: Union[ConfidenceInterval, _Sentinel] = NOT_COMPUTED
    statistic: MaybeFloat = NOT_COMPUTED
    df: Union[float, int, _Sentinel] = NOT_COMPUTED
    p_value: MaybeFloat = NOT_COMPUTED
    n: MaybeInt = NOT_COMPUTED
    se: MaybeFloat = NOT_COMPUTED


@dataclass(frozen=True)
class WinsorizedCorrelation(_ResultMixin):
    """Winsorized correlation and covariance with the matching t-test p-value."""

    cor: float
    cov: float
    n: int
    p_value: MaybeFloat = NOT_COMPUTED


@dataclass(frozen=True, eq=False)
class OutlierResult(_ResultMixin):
    """Outcome of a boxplot-rule outlier check.

    ``out_id`` and ``keep_id`` are 0-based positions into the input sample.
    """

    out_id: np.ndarray
    keep_id: np.ndarray
    out_val: np.ndarray
    n_out: int
    method: Union[str, _Sentinel] = NOT_COMPUTED


@dataclass(frozen=True)
class IndependenceResult(_ResultMixin):
    """Wild-bootstrap independence test statistics and p-values.

    The Kolmogorov-Smirnov fields are only computed for flags 1 and 3, the
    Cramer-von Mises fields only for flags 2 and 3.
    """

    flag: int
    method: Union[str, _Sentinel] = NOT_COMPUTED
    dstat: MaybeFloat = NOT_COMPUTED
    p_value_d: MaybeFloat = NOT_COMPUTED
    wstat: MaybeFloat = NOT_COMPUTED
    p_value_w: MaybeFloat = NOT_COMPUTED


@dataclass(frozen=True, eq=False)
class MediationResult(_ResultMixin):
    """Bootstrap and Sobel-test summaries of an indirect (mediated) effect.

    ``regfit`` rows are the paths ``c`` (dv ~ iv), ``a`` (m ~ iv), ``c'`` and
    ``b`` (dv ~ iv + m); columns are estimate, standard error, t and p.
    """

    nboot: int
    n: int
    estimate: float
    boot_estimate: float
    boot_ci: ConfidenceInterval
    boot_se: float
    p_value: float
    regfit: np.ndarray
    sobel: dict[str, float]
    method: Union[str, _Sentinel] = NOT_COMPUTED


__all__ = [
    "NOT_COMPUTED",
    "is_computed",
    "ConfidenceInterval",
    "TestResult",
    "WinsorizedCorrelation",
    "OutlierResult",
    "IndependenceResult",
    "MediationResult",
]
