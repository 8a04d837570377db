"""Check command for cookieconsent CLI.

Simulates a visitor: cookies are given on the command line instead of
being read from a request.
"""

from __future__ import annotations

__all__ = ["check"]

import sys
from pathlib import Path

import click

from cookieconsent.config import ConsentConfig
from cookieconsent.constants import COOKIE_OPTION_PREFIX, STATUS_COOKIE_NAME, STATUSES
from cookieconsent.engine.sources import always_live, never_live
from cookieconsent.exceptions import ConfigError

from ..styling import style_decision, style_dim, style_error, style_header, style_label


def _parse_cookies(values: tuple[str, ...]) -> dict[str, str]:
    """Parse NAME=VALUE pairs into a cookie mapping.

    Bare category names are expanded to their option cookie
    (ads=false -> cookieconsent_option_ads=false).

    Raises:
        click.BadParameter: If a value has no "=".
    """
    cookies: dict[str, str] = {}
    for item in values:
        name, sep, value = item.partition("=")
        name = name.strip()
        if not sep or not name:
            raise click.BadParameter(f"expected NAME=VALUE, got {item!r}", param_hint="--cookie")
        if name != STATUS_COOKIE_NAME and not name.startswith(COOKIE_OPTION_PREFIX):
            name = f"{COOKIE_OPTION_PREFIX}{name}"
        cookies[name] = value
    return cookies


@click.command("check")
@click.argument(
    "config_path",
    metavar="CONFIG",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--status",
    "-s",
    type=click.Choice(STATUSES),
    help="Recorded banner answer (default: unanswered)",
)
@click.option(
    "--cookie",
    "-c",
    "cookie_values",
    multiple=True,
    metavar="NAME=VALUE",
    help="Cookie value, e.g. ads=false or cookieconsent_status=dismiss (repeatable)",
)
@click.option("--category", help="Evaluate a single category")
@click.option(
    "--no-request-context",
    is_flag=True,
    help="Evaluate as if outside a live request (everything is denied)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def check(
    config_path: Path,
    status: str | None,
    cookie_values: tuple[str, ...],
    category: str | None,
    no_request_context: bool,
    as_json: bool,
) -> None:
    """Evaluate consent decisions for a simulated visitor.

    Exit codes:
        0: Evaluation printed
        1: Configuration invalid or not found, or log file not writable
    """
    cookies = _parse_cookies(cookie_values)

    try:
        config = ConsentConfig.load_from_file(config_path)
        decision_logger = config.logging.configure()
        policy = config.build_policy(
            cookies=cookies,
            status=status,
            request_context=never_live if no_request_context else always_live,
            decision_logger=decision_logger,
        )
    except (OSError, ConfigError) as e:
        click.echo(style_error(str(e)), err=True)
        sys.exit(1)

    if category is not None:
        decision = policy.explain(category)
        if as_json:
            click.echo(decision.model_dump_json(indent=2))
            return
        click.echo(f"{category}: {style_decision(decision.allowed)} {style_dim(f'({decision.reason.value})')}")
        return

    snapshot = policy.snapshot()
    if as_json:
        click.echo(snapshot.model_dump_json(indent=2))
        return

    status_text = snapshot.status.value if snapshot.status is not None else "(unanswered)"
    click.echo(style_header("Consent"))
    click.echo(f"{style_label('Compliance type')} {snapshot.compliance_type.value}")
    click.echo(f"{style_label('Status')} {status_text}")
    click.echo(f"{style_label('Allowed globally')} {style_decision(snapshot.allowed_globally)}")
    click.echo(f"{style_label('Default category value')} {style_decision(snapshot.default_category_value)}")

    click.echo(style_header("Categories"))
    width = max(len(d.category or "") for d in snapshot.categories)
    for decision in snapshot.categories:
        click.echo(
            f"  {decision.category:<{width}}  {style_decision(decision.allowed)}  "
            f"{style_dim(f'({decision.reason.value})')}"
        )
