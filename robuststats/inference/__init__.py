"""Interval estimation and hypothesis tests built on robust estimators.

Public API:
- trimci, bootstrapci, momci, trimpb, trimcibt, bootse, sint, sint_test
- binomci, acbinomci
- pcorb, pbcor, wincor, indt
- indirect_test
- yuend
- outbox
"""

from __future__ import annotations

from robuststats.inference.binomial import acbinomci, binomci
from robuststats.inference.comparison import yuend
from robuststats.inference.correlation import indt, pbcor, pcorb, wincor
from robuststats.inference.location import (
    bootse,
    bootstrapci,
    momci,
    sint,
    sint_test,
    trimcibt,
    trimci,
    trimpb,
)
from robuststats.inference.mediation import indirect_test
from robuststats.inference.outliers import outbox

__all__ = [
    "trimci",
    "bootstrapci",
    "momci",
    "trimpb",
    "trimcibt",
    "bootse",
    "sint",
    "sint_test",
    "binomci",
    "acbinomci",
    "pcorb",
    "pbcor",
    "wincor",
    "indt",
    "indirect_test",
    "yuend",
    "outbox",
]
