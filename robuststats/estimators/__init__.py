"""Robust point estimators used as plug-ins by the resampling engine.

Public API:
- Estimator, BoundEstimator, bind
- tmean, median, onestep, mom, hpsi, pbos, hd, msmedse
- winval, winmean, winvar, winstd, trimse
- mad, iqrn, idealf, pbvar, bivar, estimate_dispersion
- tauloc, tauvar
- pearson, pbcor_estimate
- theil_sen, ols, indirect_effect
"""

from __future__ import annotations

from robuststats.estimators.base import BoundEstimator, Estimator, bind, estimator_name
from robuststats.estimators.correlation import pbcor_estimate, pearson
from robuststats.estimators.location import hd, hpsi, median, mom, msmedse, onestep, pbos, tmean
from robuststats.estimators.regression import indirect_effect, ols, theil_sen
from robuststats.estimators.scale import bivar, estimate_dispersion, idealf, iqrn, mad, pbvar
from robuststats.estimators.tau import tauloc, tauvar
from robuststats.estimators.winsor import trimse, winmean, winstd, winval, winvar

__all__ = [
    "Estimator",
    "BoundEstimator",
    "bind",
    "estimator_name",
    "tmean",
    "median",
    "onestep",
    "mom",
    "hpsi",
    "pbos",
    "hd",
    "msmedse",
    "winval",
    "winmean",
    "winvar",
    "winstd",
    "trimse",
    "mad",
    "iqrn",
    "idealf",
    "pbvar",
    "bivar",
    "estimate_dispersion",
    "tauloc",
    "tauvar",
    "pearson",
    "pbcor_estimate",
    "theil_sen",
    "ols",
    "indirect_effect",
]
