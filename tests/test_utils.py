from pathlib import Path
import json

import numpy as np
import pytest

from robuststats.utils import (
    as_paired,
    as_sample,
    check_alpha,
    check_nboot,
    check_trim,
    read_sample,
    write_json,
)


def test_read_sample_mixed_separators(tmp_path: Path) -> None:
    """Commas, whitespace, blank lines and comments are handled."""

    path = tmp_path / "x.txt"
    path.write_text("# header\n1, 2,3\n\n4\t5 6\n# trailing\n", encoding="utf-8")
    np.testing.assert_array_equal(read_sample(path), np.arange(1.0, 7.0))


def test_read_sample_bad_token(tmp_path: Path) -> None:
    """Non-numeric tokens raise ValueError."""

    path = tmp_path / "x.txt"
    path.write_text("1 2 three\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_sample(path)


def test_write_json_creates_parents(tmp_path: Path) -> None:
    path = tmp_path / "a" / "b" / "out.json"
    write_json(path, {"estimate": 1.5})
    assert json.loads(path.read_text(encoding="utf-8")) == {"estimate": 1.5}


def test_as_sample_validation() -> None:
    """Shape, length and NaN checks."""

    assert as_sample([1, 2, 3]).dtype == float
    with pytest.raises(ValueError):
        as_sample([[1.0, 2.0]])
    with pytest.raises(ValueError):
        as_sample([1.0], min_size=2)
    with pytest.raises(ValueError):
        as_sample([1.0, np.nan])
    with pytest.raises(ValueError):
        as_paired([1.0, 2.0], [1.0, 2.0, 3.0])


@pytest.mark.parametrize("check, value", [(check_alpha, 0.0), (check_alpha, 1.0), (check_trim, 0.6), (check_trim, -0.1), (check_nboot, 1), (check_nboot, 2.5)])
def test_argument_checks_reject(check, value) -> None:
    with pytest.raises(ValueError):
        check(value)


def test_argument_checks_accept() -> None:
    assert check_alpha(0.05) == 0.05
    assert check_trim(0.5) == 0.5
    assert check_nboot(2) == 2
