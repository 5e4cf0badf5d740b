import numpy as np
import pytest

from robuststats.errors import ZeroDispersionError
from robuststats.estimators import bind, onestep, pearson, tmean
from robuststats.resampling import BootstrapDistribution, FixedSeed, Resampler, bootstrap_distribution


@pytest.fixture
def sample() -> np.ndarray:
    return np.random.default_rng(0).normal(loc=10.0, scale=2.0, size=40)


def test_distribution_is_sorted_and_read_only(sample: np.ndarray):
    """Replicates come back sorted ascending in a read-only array."""

    dist = bootstrap_distribution(sample, estimator=np.mean, nboot=300, seed=2)
    assert dist.nboot == len(dist) == 300
    assert np.all(np.diff(dist.values) >= 0)
    with pytest.raises(ValueError):
        dist.values[0] = 0.0


def test_order_statistic_lookup():
    """at() is 1-based and bounds-checked."""

    dist = BootstrapDistribution(np.array([3.0, 1.0, 2.0]))
    assert dist.at(1) == 1.0
    assert dist.at(3) == 3.0
    with pytest.raises(IndexError):
        dist.at(0)
    with pytest.raises(IndexError):
        dist.at(4)


def test_reproducible_with_fixed_seed(sample: np.ndarray):
    """Same data, estimator, nboot and seed -> identical distributions."""

    d1 = bootstrap_distribution(sample, estimator=bind(tmean, tr=0.2), nboot=500, seed=FixedSeed(11))
    d2 = bootstrap_distribution(sample, estimator=bind(tmean, tr=0.2), nboot=500, seed=11)
    assert np.array_equal(d1.values, d2.values)


def test_input_not_mutated(sample: np.ndarray):
    """The original sample is left untouched."""

    before = sample.copy()
    bootstrap_distribution(sample, estimator=np.median, nboot=100, seed=2)
    assert np.array_equal(sample, before)


def test_pairing_preserved():
    """Paired samples are resampled with the same row of indices."""

    x = np.arange(20.0)
    y = 2.0 * x + 1.0
    dist = bootstrap_distribution(x, y, estimator=lambda a, b: float(np.max(np.abs(b - 2.0 * a - 1.0))), nboot=200, seed=2)
    assert np.all(dist.values == 0.0)


def test_independent_indices_break_pairing():
    """Negative control: drawing x and y rows independently destroys the pairing."""

    x = np.arange(20.0)
    y = 2.0 * x + 1.0
    r = Resampler()
    ix = r.draw(20, 200, FixedSeed(1))
    iy = r.draw(20, 200, FixedSeed(2))
    gaps = np.max(np.abs(y[iy] - 2.0 * x[ix] - 1.0), axis=1)
    assert np.any(gaps > 0.0)


def test_paired_correlation_of_exact_line_is_one():
    """Every resample of a perfect linear relation keeps r = 1."""

    x = np.linspace(0.0, 1.0, 25)
    dist = bootstrap_distribution(x, 3.0 * x - 2.0, estimator=pearson, nboot=100, seed=5)
    assert dist.values == pytest.approx(np.ones(100))


def test_degenerate_sample_rejected():
    """A zero-dispersion sample makes the one-step M-estimator fail loudly."""

    with pytest.raises(ZeroDispersionError):
        bootstrap_distribution(np.array([3.0, 3.0]), estimator=onestep, nboot=2000, seed=FixedSeed(2))


def test_estimator_failure_propagates(sample: np.ndarray):
    """Exceptions raised by the estimator are not swallowed."""

    def broken(_: np.ndarray) -> float:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        bootstrap_distribution(sample, estimator=broken, nboot=10, seed=2)


@pytest.mark.parametrize(
    "samples, nboot",
    [
        ((np.array([1.0]),), 10),
        ((np.arange(5.0),), 1),
        ((np.arange(5.0), np.arange(6.0)), 10),
    ],
)
def test_validation(samples, nboot):
    """Short samples, nboot < 2 and mismatched lengths are rejected."""

    with pytest.raises(ValueError):
        bootstrap_distribution(*samples, estimator=lambda *a: 0.0, nboot=nboot, seed=2)


def test_thread_pool_matches_serial(sample: np.ndarray):
    """max_workers does not change the result."""

    serial = bootstrap_distribution(sample, estimator=np.median, nboot=400, seed=3)
    threaded = bootstrap_distribution(sample, estimator=np.median, nboot=400, seed=3, max_workers=4)
    assert np.array_equal(serial.values, threaded.values)


def test_mean_and_std(sample: np.ndarray):
    """Summary helpers agree with numpy."""

    dist = bootstrap_distribution(sample, estimator=np.mean, nboot=250, seed=2)
    assert dist.mean() == pytest.approx(float(np.mean(dist.values)))
    assert dist.std() == pytest.approx(float(np.std(dist.values, ddof=1)))
