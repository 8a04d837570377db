"""Validate command for cookieconsent CLI."""

from __future__ import annotations

__all__ = ["validate"]

import sys
from pathlib import Path

import click

from cookieconsent.config import ConsentConfig
from cookieconsent.exceptions import ConfigError

from ..styling import style_error, style_success


@click.command("validate")
@click.argument(
    "config_path",
    metavar="CONFIG",
    type=click.Path(dir_okay=False, path_type=Path),
)
def validate(config_path: Path) -> None:
    """Validate a consent configuration file.

    Checks JSON syntax, the compliance type and every extra category
    definition.

    Exit codes:
        0: Configuration is valid
        1: Configuration is invalid or not found
    """
    try:
        config = ConsentConfig.load_from_file(config_path)
    except (FileNotFoundError, ConfigError) as e:
        click.echo(style_error(str(e)), err=True)
        sys.exit(1)

    category_count = len(config.registry)
    click.echo(style_success(f"Configuration valid: {config_path}"))
    click.echo(f"  Compliance type: {config.compliance_type.value}")
    click.echo(f"  {category_count} categor{'ies' if category_count != 1 else 'y'} enabled")
