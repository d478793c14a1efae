"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

import re
from pathlib import Path

import click
from dotenv import load_dotenv

from ElasticBuilder.cli.runner import CommandRunner
from ElasticBuilder.config import load_config, load_config_with_defaults
from ElasticBuilder.core.errors import InvalidOperatorValue
from ElasticBuilder.queries.common_terms import CommonTermsQuery
from ElasticBuilder.renderers.json import render_json
from ElasticBuilder.utils.log import configure_logging

_RE_COUNT = re.compile(r"-?\d+")
_DEFAULT_CONFIG = Path("config/default.yml")


@click.group(help="ElasticBuilder: build Elasticsearch common terms query clauses.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=_DEFAULT_CONFIG,
    show_default=True,
    help="Path to YAML config file (used by `build`).",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file; the config file itself is
    only read by commands that need it.
    """
    load_dotenv()
    ctx.obj = config_path


@cli.command("build")
@click.pass_context
def build_cmd(ctx: click.Context) -> None:
    """Build every clause listed under `queries` in the YAML config."""
    config_path: Path = ctx.obj
    try:
        if config_path != _DEFAULT_CONFIG and _DEFAULT_CONFIG.is_file():
            cfg = load_config_with_defaults(config_path, default_path=_DEFAULT_CONFIG)
        else:
            cfg = load_config(config_path)
    except (OSError, TypeError, ValueError) as e:
        raise click.ClickException(f"Cannot load config {config_path}: {e}") from e
    CommandRunner(cfg).run_build(action=ctx.command.name)


def _count_or_percent(value: str | None) -> str | int | None:
    """Keep ``"30%"`` as text, turn plain counts like ``"2"`` into ints."""
    if value is None:
        return None
    text = value.strip()
    if _RE_COUNT.fullmatch(text):
        return int(text)
    return text


@cli.command("common")
@click.argument("field")
@click.argument("query_string")
@click.option("--cutoff-frequency", type=float, default=None, help="Relative [0..1) or absolute (>= 1) frequency.")
@click.option("--low-freq-operator", default=None, help="and/or for low frequency terms.")
@click.option("--high-freq-operator", default=None, help="and/or for high frequency terms.")
@click.option("--low-freq", default=None, help="minimum_should_match for low frequency terms (e.g. 2, 30%).")
@click.option("--high-freq", default=None, help="minimum_should_match for high frequency terms.")
@click.option("--disable-coord", type=click.BOOL, default=None, help="Set disable_coord (true/false).")
@click.option("--indent", type=click.IntRange(min=0), default=2, show_default=True)
@click.option("--compact", is_flag=True, help="Print on a single line.")
def common_cmd(
    field: str,
    query_string: str,
    cutoff_frequency: float | None,
    low_freq_operator: str | None,
    high_freq_operator: str | None,
    low_freq: str | None,
    high_freq: str | None,
    disable_coord: bool | None,
    indent: int,
    compact: bool,
) -> None:
    """Print one `common` terms clause for FIELD and QUERY_STRING as JSON."""
    configure_logging(level="WARNING", log_to_file=False)

    query = CommonTermsQuery(field, query_string)
    if cutoff_frequency is not None:
        query.cutoff_frequency(cutoff_frequency)
    try:
        if low_freq_operator is not None:
            query.low_freq_operator(low_freq_operator)
        if high_freq_operator is not None:
            query.high_freq_operator(high_freq_operator)
    except InvalidOperatorValue as e:
        raise click.BadParameter(str(e), param_hint=f"--{e.param.replace('_', '-')}") from e

    low = _count_or_percent(low_freq)
    if low is not None:
        query.low_freq(low)
    high = _count_or_percent(high_freq)
    if high is not None:
        query.high_freq(high)
    if disable_coord is not None:
        query.disable_coord(disable_coord)

    click.echo(render_json(query.to_dict(), indent=None if compact else indent))
