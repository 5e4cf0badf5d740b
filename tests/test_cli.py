from pathlib import Path
import json

import numpy as np
import pytest
from click.testing import CliRunner

from robuststats import __version__
from robuststats.cli import cli


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    values = np.random.default_rng(9).normal(loc=2.0, size=30)
    path = tmp_path / "sample.txt"
    path.write_text("# measurements\n" + "\n".join(f"{v:.6f}" for v in values) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def one_to_ten_file(tmp_path: Path) -> Path:
    path = tmp_path / "one_to_ten.csv"
    path.write_text("1, 2, 3, 4, 5\n6 7 8 9 10\n", encoding="utf-8")
    return path


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_ci_default_estimator(cli_runner: CliRunner, sample_file: Path) -> None:
    result = cli_runner.invoke(cli, ["ci", str(sample_file), "--nboot", "500"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["estimator"] == "onestep"
    assert payload["nboot"] == 500
    assert payload["n"] == 30
    low, high = payload["ci"]
    assert low < payload["estimate"] < high
    assert "p_value" not in payload


def test_ci_mean_with_null(cli_runner: CliRunner, sample_file: Path) -> None:
    result = cli_runner.invoke(
        cli, ["ci", str(sample_file), "--estimator", "mean", "--nboot", "500", "--null=-5"]
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["estimator"] == "mean"
    assert payload["p_value"] == 0.0


def test_ci_is_reproducible(cli_runner: CliRunner, sample_file: Path) -> None:
    args = ["ci", str(sample_file), "--estimator", "tmean", "--nboot", "300", "--seed", "7"]
    first = json.loads(cli_runner.invoke(cli, args).stdout)
    second = json.loads(cli_runner.invoke(cli, args).stdout)
    assert first == second


def test_ci_output_file(cli_runner: CliRunner, sample_file: Path, tmp_path: Path) -> None:
    out = tmp_path / "results" / "ci.json"
    result = cli_runner.invoke(
        cli, ["ci", str(sample_file), "--estimator", "median", "--nboot", "300", "--output", str(out)]
    )
    assert result.exit_code == 0, result.output
    assert "OK" in result.output
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["estimator"] == "median"


def test_ci_too_few_values(cli_runner: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "single.txt"
    path.write_text("4.2\n", encoding="utf-8")
    result = cli_runner.invoke(cli, ["ci", str(path), "--estimator", "mean"])
    assert result.exit_code == 1
    assert "at least 2" in result.output


def test_ci_missing_file(cli_runner: CliRunner, tmp_path: Path) -> None:
    result = cli_runner.invoke(cli, ["ci", str(tmp_path / "missing.txt")])
    assert result.exit_code == 2


def test_trimci(cli_runner: CliRunner, one_to_ten_file: Path) -> None:
    result = cli_runner.invoke(cli, ["trimci", str(one_to_ten_file)])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["estimate"] == pytest.approx(5.5)
    assert payload["df"] == 5
    assert payload["tr"] == 0.2


def test_trimcibt_symmetric(cli_runner: CliRunner, sample_file: Path) -> None:
    result = cli_runner.invoke(cli, ["trimcibt", str(sample_file), "--nboot", "599"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert "p_value" in payload
    low, high = payload["ci"]
    assert (low + high) / 2 == pytest.approx(payload["estimate"])


def test_trimcibt_equal_tailed(cli_runner: CliRunner, sample_file: Path) -> None:
    result = cli_runner.invoke(cli, ["trimcibt", str(sample_file), "--nboot", "599", "--equal-tailed"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert "p_value" not in payload
    assert payload["nboot"] == 599
