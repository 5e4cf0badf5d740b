"""Percentile-t bootstrap confidence interval for the trimmed mean.

Examples
--------
  robuststats trimcibt data.txt
  robuststats trimcibt data.txt --tr 0.1 --equal-tailed
  robuststats trimcibt data.txt --null 5 --seed 7
"""

from __future__ import annotations

from pathlib import Path
import json

import click

from robuststats.config import Config
from robuststats.inference import trimcibt as trimcibt_procedure
from robuststats.utils import read_sample, write_json


@click.command(name="trimcibt")
@click.argument("sample", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "tr",
    "--tr",
    type=float,
    default=Config.DEFAULT_TRIM,
    show_default=True,
    help="Trim fraction",
)
@click.option(
    "alpha",
    "--alpha",
    type=float,
    default=Config.DEFAULT_ALPHA,
    show_default=True,
    help="Significance level",
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
    "equal_tailed",
    "--equal-tailed",
    is_flag=True,
    help="Equal-tailed interval instead of the symmetric one (no p-value)",
)
@click.option(
    "null_value",
    "--null",
    type=float,
    default=0.0,
    show_default=True,
    help="Hypothesized trimmed mean",
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
    "output",
    "--output",
    type=click.Path(path_type=Path),
    required=False,
    help="Write the result JSON here instead of standard output",
)
def trimcibt(
    sample: Path,
    tr: float,
    alpha: float,
    nboot: int,
    equal_tailed: bool,
    null_value: float,
    seed: int,
    output: Path | None,
) -> None:
    """Bootstrap-t confidence interval for the trimmed mean."""

    try:
        result = trimcibt_procedure(
            read_sample(sample),
            tr=tr,
            alpha=alpha,
            nboot=nboot,
            symmetric=not equal_tailed,
            null_value=null_value,
            seed=seed,
        )
        payload = {"tr": tr, "nboot": nboot, "alpha": alpha, **result.to_dict()}
        if output is None:
            click.echo(json.dumps(payload, indent=2))
        else:
            write_json(output, payload)
            click.secho(f"OK: results saved to {output}", fg="green")
    except ValueError as e:
        raise click.ClickException(str(e))
