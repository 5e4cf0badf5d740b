import numpy as np
import pytest

from robuststats.errors import ZeroDispersionError
from robuststats.estimators import bivar, estimate_dispersion, idealf, iqrn, mad, pbvar, tauvar


@pytest.fixture
def one_to_ten() -> np.ndarray:
    return np.arange(1.0, 11.0)


def test_mad_normalized(one_to_ten: np.ndarray):
    """Raw MAD of 1..10 is 2.5, rescaled by 1/Phi^-1(0.75)."""

    assert mad(one_to_ten) == pytest.approx(2.5 * 1.482602, rel=1e-5)


def test_ideal_fourths(one_to_ten: np.ndarray):
    """Interpolated quartiles of 1..10."""

    lower, upper = idealf(one_to_ten)
    assert lower == pytest.approx(2.916667, abs=1e-5)
    assert upper == pytest.approx(8.083333, abs=1e-5)


def test_ideal_fourths_needs_three_values():
    """Two values are too few for the ideal fourths."""

    with pytest.raises(ValueError):
        idealf(np.array([1.0, 2.0]))


def test_iqrn_positive(one_to_ten: np.ndarray):
    """Normalized IQR is positive for spread-out data."""

    assert iqrn(one_to_ten) > 0.0


def test_pbvar(one_to_ten: np.ndarray):
    """Percentage bend midvariance is positive, and zero for constant data."""

    assert pbvar(one_to_ten) > 0.0
    assert pbvar(np.full(6, 4.0)) == 0.0
    with pytest.raises(ValueError):
        pbvar(one_to_ten, beta=0.7)


def test_bivar(one_to_ten: np.ndarray):
    """Biweight midvariance is positive; zero MAD is an error."""

    assert bivar(one_to_ten) > 0.0
    with pytest.raises(ZeroDispersionError):
        bivar(np.array([1.0, 1.0, 1.0, 5.0]))


def test_tauvar(one_to_ten: np.ndarray):
    """Tau scale grows with the spread of the data."""

    assert tauvar(2.0 * one_to_ten) == pytest.approx(4.0 * tauvar(one_to_ten))


def test_dispersion_uses_mad_first(one_to_ten: np.ndarray):
    """The first non-zero strategy wins."""

    assert estimate_dispersion(one_to_ten) == pytest.approx(mad(one_to_ten))


def test_dispersion_falls_back_to_iqr():
    """Zero MAD falls back to the normalized IQR."""

    x = np.array([0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 2.0, 3.0, 4.0])
    assert mad(x) == 0.0
    assert estimate_dispersion(x) == pytest.approx(iqrn(x))


def test_dispersion_all_zero():
    """Constant data exhaust every strategy."""

    with pytest.raises(ZeroDispersionError, match="All measures of dispersion are equal to 0"):
        estimate_dispersion(np.full(5, 2.0))
