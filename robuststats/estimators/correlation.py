"""Correlation estimators for paired samples."""

from __future__ import annotations

import math

import numpy as np

from robuststats.config import Config
from robuststats.errors import ZeroDispersionError
from robuststats.estimators.location import pbos
from robuststats.utils import as_paired


def pearson(x: np.ndarray, y: np.ndarray) -> float:
    """Pearson's product-moment correlation of ``x`` and ``y``.

    Raises
    ------
    ZeroDispersionError
        If either sample is constant.
    """

    xa, ya = as_paired(x, y)
    dx = xa - xa.mean()
    dy = ya - ya.mean()
    sxx = float(np.dot(dx, dx))
    syy = float(np.dot(dy, dy))
    if sxx == 0.0 or syy == 0.0:
        raise ZeroDispersionError("pearson: correlation is undefined for a constant sample")
    return float(np.dot(dx, dy)) / math.sqrt(sxx * syy)


def _pb_omega(arr: np.ndarray, beta: float) -> float:
    absdev = np.sort(np.abs(arr - np.median(arr)))
    idx = max(math.floor((1.0 - beta) * arr.size), 1) - 1
    return float(absdev[idx])


def pbcor_estimate(x: np.ndarray, y: np.ndarray, beta: float = Config.PB_BETA) -> float:
    """Percentage bend correlation coefficient of ``x`` and ``y``.

    ``beta`` is the bending constant for omega sub N.
    """

    xa, ya = as_paired(x, y)
    omx = _pb_omega(xa, beta)
    omy = _pb_omega(ya, beta)
    if omx == 0.0 or omy == 0.0:
        raise ZeroDispersionError("pbcor: percentage bend scale is zero")
    a = np.clip((xa - pbos(xa, beta)) / omx, -1.0, 1.0)
    b = np.clip((ya - pbos(ya, beta)) / omy, -1.0, 1.0)
    return float(np.sum(a * b) / math.sqrt(np.sum(a * a) * np.sum(b * b)))
