from dataclasses import FrozenInstanceError

import pytest

from robuststats.config import (
    Config,
    DEFAULT_ALPHA,
    DEFAULT_NBOOT,
    DEFAULT_SEED,
    get_config,
)


def test_default_seed_set():
    """DEFAULT_SEED convenience constant should match Config defaults."""

    assert DEFAULT_SEED == 2
    assert DEFAULT_SEED == Config.DEFAULT_SEED


def test_config_singleton():
    """get_config should return the same singleton instance across calls."""

    c1 = get_config()
    c2 = get_config()
    assert c1 is c2
    assert isinstance(c1, Config)


def test_config_is_frozen():
    """Config instances are immutable."""

    cfg = get_config()
    with pytest.raises(FrozenInstanceError):
        cfg.DEFAULT_SEED = 3  # type: ignore[misc]


def test_bootstrap_settings():
    """Bootstrap sizes should match the documented defaults."""

    assert DEFAULT_NBOOT == Config.DEFAULT_NBOOT == 2000
    assert Config.BOOTSE_NBOOT == 1000
    assert Config.PCORB_NBOOT == 599
    assert Config.INDT_NBOOT == 599
    assert Config.INDIRECT_NBOOT == 5000


def test_estimator_constants():
    """Tuning constants for the estimators."""

    assert DEFAULT_ALPHA == 0.05
    assert Config.DEFAULT_TRIM == 0.2
    assert Config.ONESTEP_BEND == 1.28
    assert Config.MOM_BEND == 2.24
    assert Config.PB_BETA == 0.2
    assert Config.TAU_LOCATION_CVAL == 4.5
    assert Config.TAU_SCALE_CVAL == 3.0
