"""Main CLI entry point for cookieconsent.

Defines the CLI group and registers all subcommands.

Commands:
    categories - List effective cookie categories
    check      - Evaluate consent decisions for simulated cookies
    validate   - Validate a configuration file

Subcommand help:
    cookieconsent COMMAND -h   Show help for a specific command
"""

from __future__ import annotations

__all__ = ["cli", "main"]

import sys

import click

from cookieconsent import __version__

from .commands.categories import categories
from .commands.check import check
from .commands.validate import validate


class ReorderedGroup(click.Group):
    """Custom group that shows examples after the commands section."""

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Add extra help after commands section."""
        formatter.write(
            """
Examples:
  cookieconsent validate consent.json
  cookieconsent categories consent.json
  cookieconsent check consent.json --status allow --cookie ads=false
  cookieconsent check consent.json --category ads --json
"""
        )


@click.group(
    cls=ReorderedGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """cookieconsent: cookie consent decision engine."""
    if version:
        click.echo(f"cookieconsent {__version__}")
        sys.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Register commands
cli.add_command(categories)
cli.add_command(check)
cli.add_command(validate)


def main() -> None:
    """CLI entry point."""
    cli()
