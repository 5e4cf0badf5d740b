"""Tukey-McLaughlin confidence interval for the trimmed mean.

Examples
--------
  robuststats trimci data.txt
  robuststats trimci data.txt --tr 0 --null 3.5
"""

from __future__ import annotations

from pathlib import Path
import json

import click

from robuststats.config import Config
from robuststats.inference import trimci as trimci_procedure
from robuststats.utils import read_sample


@click.command(name="trimci")
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
    "null_value",
    "--null",
    type=float,
    default=0.0,
    show_default=True,
    help="Hypothesized trimmed mean",
)
def trimci(sample: Path, tr: float, alpha: float, null_value: float) -> None:
    """Closed-form 1-alpha confidence interval for the trimmed mean."""

    try:
        result = trimci_procedure(read_sample(sample), tr=tr, alpha=alpha, null_value=null_value)
    except ValueError as e:
        raise click.ClickException(str(e))
    click.echo(json.dumps({"tr": tr, "alpha": alpha, **result.to_dict()}, indent=2))
