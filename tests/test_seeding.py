import numpy as np
import pytest

from robuststats.resampling.seeding import (
    DefaultSeed,
    FixedSeed,
    NoReseed,
    resolve_seed_policy,
)


def test_integer_maps_to_fixed_seed():
    """A plain integer is a fixed seed."""

    policy = resolve_seed_policy(7)
    assert policy == FixedSeed(7)
    assert policy.seed == 7


def test_numpy_integer_accepted():
    """NumPy integers behave like Python integers."""

    assert resolve_seed_policy(np.int64(11)) == FixedSeed(11)


def test_true_maps_to_default_seed():
    """True selects the documented default seed."""

    policy = resolve_seed_policy(True)
    assert isinstance(policy, DefaultSeed)
    assert policy.seed == 2


@pytest.mark.parametrize("value", [False, None])
def test_false_and_none_map_to_no_reseed(value):
    """False and None leave the generator alone."""

    policy = resolve_seed_policy(value)
    assert isinstance(policy, NoReseed)
    assert policy.seed is None


def test_policy_instances_pass_through():
    """Already-resolved policies are returned unchanged."""

    for policy in (FixedSeed(3), DefaultSeed(), NoReseed()):
        assert resolve_seed_policy(policy) is policy


@pytest.mark.parametrize("value", ["2", 2.5, [2]])
def test_unrecognised_seed_rejected(value):
    """Anything else is a TypeError."""

    with pytest.raises(TypeError):
        resolve_seed_policy(value)


def test_fixed_seed_validation():
    """FixedSeed requires a non-negative integer that is not a bool."""

    with pytest.raises(TypeError):
        FixedSeed(True)
    with pytest.raises(ValueError):
        FixedSeed(-1)
