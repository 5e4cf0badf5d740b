from concurrent.futures import ThreadPoolExecutor
import math

import numpy as np
import pytest

from robuststats.resampling import DefaultSeed, FixedSeed, NoReseed, Resampler, draw_indices, get_resampler


@pytest.fixture
def resampler() -> Resampler:
    return Resampler()


def test_draw_shape_and_range(resampler: Resampler):
    """Index matrix is (nboot, n) with values in [0, n)."""

    idx = resampler.draw(7, 50, FixedSeed(1))
    assert idx.shape == (50, 7)
    assert idx.min() >= 0
    assert idx.max() < 7


def test_fixed_seed_reproducible(resampler: Resampler):
    """Same fixed seed -> identical matrices, also across instances."""

    a = resampler.draw(10, 20, FixedSeed(42))
    b = resampler.draw(10, 20, FixedSeed(42))
    c = Resampler().draw(10, 20, 42)
    assert np.array_equal(a, b)
    assert np.array_equal(a, c)


def test_default_seed_is_seed_two(resampler: Resampler):
    """DefaultSeed and True both reseed with 2."""

    a = resampler.draw(10, 20, DefaultSeed())
    b = resampler.draw(10, 20, True)
    c = resampler.draw(10, 20, FixedSeed(2))
    assert np.array_equal(a, b)
    assert np.array_equal(a, c)


def test_no_reseed_continues_stream():
    """NoReseed draws from the current generator state."""

    r1 = Resampler()
    r1.draw(5, 3, FixedSeed(1))
    continued_1 = r1.draw(5, 3, NoReseed())

    r2 = Resampler()
    r2.draw(5, 3, FixedSeed(1))
    continued_2 = r2.draw(5, 3, None)

    assert np.array_equal(continued_1, continued_2)


def test_different_seeds_differ(resampler: Resampler):
    """Distinct seeds give distinct matrices."""

    a = resampler.draw(20, 30, FixedSeed(1))
    b = resampler.draw(20, 30, FixedSeed(2))
    assert not np.array_equal(a, b)


@pytest.mark.parametrize("n, nboot", [(1, 10), (0, 10), (5, 1), (5, 0)])
def test_draw_validation(resampler: Resampler, n: int, nboot: int):
    """n and nboot must both be at least 2."""

    with pytest.raises(ValueError):
        resampler.draw(n, nboot, FixedSeed(1))


def test_wild_weights(resampler: Resampler):
    """Wild-bootstrap multipliers are bounded by sqrt(3) and reproducible."""

    w1 = resampler.wild_weights(8, 100, FixedSeed(3))
    w2 = resampler.wild_weights(8, 100, FixedSeed(3))
    assert w1.shape == (100, 8)
    assert np.array_equal(w1, w2)
    assert np.all(np.abs(w1) <= math.sqrt(3.0))


def test_default_instance_shared():
    """get_resampler returns one process-wide instance."""

    assert get_resampler() is get_resampler()
    idx = draw_indices(6, 4, FixedSeed(5))
    assert np.array_equal(idx, Resampler().draw(6, 4, FixedSeed(5)))


def test_shared_resampler_thread_safe():
    """Concurrent fixed-seed draws on one instance all see the same stream."""

    shared = Resampler()
    expected = Resampler().draw(30, 200, FixedSeed(9))
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: shared.draw(30, 200, FixedSeed(9)), range(32)))
    for idx in results:
        assert np.array_equal(idx, expected)


def test_initial_seed_only_changes_through_policies():
    """The constructor seed drives NoReseed draws; FixedSeed replaces it."""

    r = Resampler(seed=11)
    expected = np.random.default_rng(11).integers(0, 6, size=(4, 6))
    np.testing.assert_array_equal(r.draw(6, 4, NoReseed()), expected)
    assert not hasattr(r, "reseed")
    fixed = Resampler(seed=11).draw(6, 4, FixedSeed(2))
    np.testing.assert_array_equal(fixed, Resampler().draw(6, 4, FixedSeed(2)))
