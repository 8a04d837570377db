"""Categories command for cookieconsent CLI."""

from __future__ import annotations

__all__ = ["categories"]

import json
import sys
from pathlib import Path

import click

from cookieconsent.config import ConsentConfig
from cookieconsent.exceptions import ConfigError

from ..styling import style_dim, style_error, style_header


@click.command("categories")
@click.argument(
    "config_path",
    metavar="CONFIG",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def categories(config_path: Path, as_json: bool) -> None:
    """List the effective cookie categories of a configuration.

    Built-in categories come first, then extra categories. Disabled
    categories are omitted; session and usagehelper are always listed.
    """
    try:
        config = ConsentConfig.load_from_file(config_path)
    except (FileNotFoundError, ConfigError) as e:
        click.echo(style_error(str(e)), err=True)
        sys.exit(1)

    effective = config.registry.effective_categories()

    if as_json:
        click.echo(json.dumps([c.model_dump() for c in effective], indent=2))
        return

    click.echo(style_header("Categories"))
    width = max(len(c.id) for c in effective)
    for category in effective:
        marker = " (required)" if category.required else ""
        click.echo(f"  {category.id:<{width}}  {category.label}{style_dim(marker)}")

    disabled = sorted(config.registry.disabled_categories)
    if disabled:
        click.echo(style_dim(f"Disabled: {', '.join(disabled)}"))
