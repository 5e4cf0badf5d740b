"""Percentile bootstrap confidence interval for a robust location estimator.

Reads a sample file (numbers separated by whitespace, commas or newlines) and
prints the result record as JSON.

Examples
--------
  robuststats ci data.txt
  robuststats ci data.txt --estimator tmean --tr 0.1 --nboot 5000
  robuststats ci data.txt --estimator mom --null 0 --output results/mom.json
"""

from __future__ import annotations

from pathlib import Path
import json
import logging
from typing import Callable

import click
import numpy as np

from robuststats.config import Config
from robuststats.estimators import bind, hd, median, mom, onestep, pbos, tauloc, tmean
from robuststats.inference import bootstrapci
from robuststats.utils import check_trim, read_sample, write_json


_LOGGER = logging.getLogger(__name__)

ESTIMATORS = ("onestep", "mom", "tmean", "median", "mean", "hd", "tauloc", "pbos")


def _make_estimator(name: str, tr: float) -> Callable[[np.ndarray], float]:
    if name == "tmean":
        return bind(tmean, tr=check_trim(tr))
    if name == "mean":
        return bind(np.mean, name="mean")
    return {
        "onestep": onestep,
        "mom": mom,
        "median": median,
        "hd": hd,
        "tauloc": tauloc,
        "pbos": pbos,
    }[name]


@click.command(name="ci")
@click.argument("sample", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "estimator",
    "--estimator",
    type=click.Choice(ESTIMATORS, case_sensitive=False),
    default="onestep",
    show_default=True,
    help="Location estimator to bootstrap",
)
@click.option(
    "tr",
    "--tr",
    type=float,
    default=Config.DEFAULT_TRIM,
    show_default=True,
    help="Trim fraction (tmean only)",
)
@click.option(
    "alpha",
    "--alpha",
    type=float,
    default=Config.DEFAULT_ALPHA,
    show_default=True,
    help="Significance level; the interval has coverage 1 - alpha",
)
@click.option(
    "nboot",
    "--nboot",
    type=int,
    default=Config.DEFAULT_NBOOT,
    show_default=True,
    help="Number of bootstrap resamples",
)
@click.option(
    "seed",
    "--seed",
    type=int,
    default=Config.DEFAULT_SEED,
    show_default=True,
    help="Random seed for resampling",
)
@click.option(
    "null_value",
    "--null",
    type=float,
    default=None,
    help="Hypothesized value; also report the bootstrap p-value",
)
@click.option(
    "output",
    "--output",
    type=click.Path(path_type=Path),
    required=False,
    help="Write the result JSON here instead of standard output",
)
def ci(
    sample: Path,
    estimator: str,
    tr: float,
    alpha: float,
    nboot: int,
    seed: int,
    null_value: float | None,
    output: Path | None,
) -> None:
    """Bootstrap a 1-alpha confidence interval for a location estimator."""

    try:
        x = read_sample(sample)
        _LOGGER.info("Loaded %d values from %s", x.size, sample)
        result = bootstrapci(
            x,
            est=_make_estimator(estimator.lower(), tr),
            alpha=alpha,
            nboot=nboot,
            seed=seed,
            null_value=null_value,
        )
        payload = {"estimator": estimator.lower(), "nboot": nboot, "alpha": alpha, **result.to_dict()}
        if output is None:
            click.echo(json.dumps(payload, indent=2))
        else:
            write_json(output, payload)
            click.secho(f"OK: results saved to {output}", fg="green")
    except ValueError as e:
        raise click.ClickException(str(e))
