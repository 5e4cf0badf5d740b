"""Shared input-validation and sample-loading helpers.

This module centralizes the argument checks used across the estimator layer,
the resampling engine and the inference procedures, plus the plain-text sample
reader used by the command line.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import numpy as np


def as_sample(x: Any, *, name: str = "x", min_size: int = 1) -> np.ndarray:
    """Return ``x`` as a 1-D float array, validating its length.

    Parameters
    ----------
    x:
        Array-like of real numbers.
    name:
        Argument name used in error messages.
    min_size:
        Minimum number of observations required.

    Raises
    ------
    ValueError
        If ``x`` is not one-dimensional, too short, or contains NaN.
    """

    arr = np.asarray(x, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {arr.shape}")
    if arr.size < min_size:
        raise ValueError(f"{name} must contain at least {min_size} values, got {arr.size}")
    if np.isnan(arr).any():
        raise ValueError(f"{name} contains NaN values; remove missing data first")
    return arr


def as_paired(x: Any, y: Any, *, min_size: int = 2) -> tuple[np.ndarray, np.ndarray]:
    """Return ``x`` and ``y`` as equal-length float arrays."""

    xa = as_sample(x, name="x", min_size=min_size)
    ya = as_sample(y, name="y", min_size=min_size)
    if xa.size != ya.size:
        raise ValueError(f"x and y must agree in length ({xa.size} != {ya.size})")
    return xa, ya


def check_alpha(alpha: float) -> float:
    """Validate a significance level in the open interval (0, 1)."""

    alpha = float(alpha)
    if not (0.0 < alpha < 1.0):
        raise ValueError(f"alpha must be in (0, 1), got {alpha}")
    return alpha


def check_trim(tr: float, *, name: str = "tr") -> float:
    """Validate a trimming fraction in [0, 0.5]."""

    tr = float(tr)
    if tr < 0.0 or tr > 0.5:
        raise ValueError(f"{name} cannot be smaller than 0 or larger than 0.5, got {tr}")
    return tr


def check_nboot(nboot: int) -> int:
    """Validate a bootstrap replicate count (at least 2)."""

    if int(nboot) != nboot or nboot < 2:
        raise ValueError(f"nboot must be an integer >= 2, got {nboot!r}")
    return int(nboot)


def read_sample(path: Path) -> np.ndarray:
    """Read whitespace- or comma-separated numbers from ``path``.

    Blank lines and lines starting with ``#`` are ignored.
    """

    values: list[float] = []
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            for token in line.replace(",", " ").split():
                values.append(float(token))
    return np.asarray(values, dtype=float)


def ensure_dir(path: Path) -> None:
    """Create directory ``path`` and parents if they don't exist."""

    path.mkdir(parents=True, exist_ok=True)


def write_json(path: Path, payload: dict[str, Any]) -> None:
    """Write ``payload`` to ``path`` as indented JSON, creating parent directories."""

    ensure_dir(path.parent)
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
