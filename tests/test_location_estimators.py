import warnings

import numpy as np
import pytest

from robuststats.errors import ZeroDispersionError
from robuststats.estimators import (
    hd,
    hpsi,
    median,
    mom,
    msmedse,
    onestep,
    pbos,
    tauloc,
    tmean,
    trimse,
    winmean,
    winval,
    winvar,
)


@pytest.fixture
def one_to_ten() -> np.ndarray:
    return np.arange(1.0, 11.0)


def test_tmean_basic(one_to_ten: np.ndarray):
    """20% trimmed mean of 1..10 averages 3..8."""

    assert tmean(one_to_ten, 0.2) == pytest.approx(5.5)
    assert tmean(np.array([1.0, 2.0, 3.0, 4.0, 100.0]), 0.2) == pytest.approx(3.0)


def test_tmean_limits():
    """tr=0 is the mean and tr=0.5 the median."""

    x = np.array([1.0, 2.0, 4.0, 8.0, 100.0])
    assert tmean(x, 0.0) == pytest.approx(23.0)
    assert tmean(x, 0.5) == pytest.approx(4.0)


def test_tmean_rejects_bad_trim():
    """Trim fractions outside [0, 0.5] are rejected."""

    with pytest.raises(ValueError):
        tmean(np.arange(5.0), 0.6)


def test_tmean_does_not_mutate():
    """Inputs are never sorted in place."""

    x = np.array([3.0, 1.0, 2.0, 5.0, 4.0])
    tmean(x, 0.2)
    assert np.array_equal(x, [3.0, 1.0, 2.0, 5.0, 4.0])


def test_winsorizing(one_to_ten: np.ndarray):
    """Winsorizing 1..10 at 20% clamps to 3 and 8, keeping the order."""

    assert np.array_equal(winval(one_to_ten, 0.2), [3, 3, 3, 4, 5, 6, 7, 8, 8, 8])
    assert np.array_equal(winval(one_to_ten[::-1], 0.2), [8, 8, 8, 7, 6, 5, 4, 3, 3, 3])
    assert winmean(one_to_ten, 0.2) == pytest.approx(5.5)
    assert winvar(one_to_ten, 0.2) == pytest.approx(42.5 / 9.0)


def test_trimse(one_to_ten: np.ndarray):
    """Standard error of the trimmed mean from the Winsorized variance."""

    assert trimse(one_to_ten, 0.2) == pytest.approx(1.14530, abs=1e-5)
    with pytest.raises(ValueError):
        trimse(one_to_ten, 0.5)


def test_median_and_hpsi():
    """Median of an even sample and Huber's psi clipping."""

    assert median(np.array([4.0, 1.0, 3.0, 2.0])) == pytest.approx(2.5)
    assert np.array_equal(hpsi(np.array([-3.0, 0.5, 2.0]), 1.28), [-1.28, 0.5, 1.28])


def test_onestep_symmetric(one_to_ten: np.ndarray):
    """Symmetric data give the centre of symmetry."""

    assert onestep(one_to_ten) == pytest.approx(5.5)


def test_onestep_resists_outlier(one_to_ten: np.ndarray):
    """A gross outlier barely moves the one-step M-estimator."""

    x = one_to_ten.copy()
    x[-1] = 1000.0
    assert onestep(x) < 7.0
    assert np.mean(x) > 100.0


def test_onestep_zero_mad():
    """Zero MAD is an explicit error."""

    with pytest.raises(ZeroDispersionError):
        onestep(np.array([3.0, 3.0]))


def test_mom_drops_outlier():
    """MOM averages the values within 2.24 MADs of the median."""

    x = np.array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 100.0])
    assert mom(x) == pytest.approx(5.0)
    assert mom(np.arange(1.0, 11.0)) == pytest.approx(5.5)


def test_pbos_symmetric(one_to_ten: np.ndarray):
    """Percentage bend location of symmetric data."""

    assert pbos(one_to_ten) == pytest.approx(5.5)
    with pytest.raises(ZeroDispersionError):
        pbos(np.array([2.0, 2.0, 2.0, 2.0, 9.0]))


def test_harrell_davis(one_to_ten: np.ndarray):
    """Harrell-Davis median of symmetric data is the centre."""

    assert hd(one_to_ten) == pytest.approx(5.5)
    assert hd(one_to_ten, q=0.25) < hd(one_to_ten, q=0.75)
    with pytest.raises(ValueError):
        hd(one_to_ten, q=1.0)


def test_tauloc(one_to_ten: np.ndarray):
    """Tau location of symmetric data is the centre; constant data fail."""

    assert tauloc(one_to_ten) == pytest.approx(5.5)
    with pytest.raises(ZeroDispersionError):
        tauloc(np.array([3.0, 3.0, 3.0]))


def test_msmedse_warns_on_ties():
    """Tied values trigger a RuntimeWarning."""

    with pytest.warns(RuntimeWarning):
        se = msmedse(np.array([1.0, 2.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0]))
    assert se > 0.0


def test_msmedse_no_ties(one_to_ten: np.ndarray):
    """No warning without ties."""

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert msmedse(one_to_ten) > 0.0
