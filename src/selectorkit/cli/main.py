"""selectorkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from selectorkit import __version__
from selectorkit.config import LOG_LEVELS, SelectorkitConfig


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: $SELECTORKIT_LOG_LEVEL or WARNING).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """selectorkit - build CSS selector strings from ordered parts."""
    if log_level:
        config = SelectorkitConfig(log_level=log_level.upper())
    else:
        try:
            config = SelectorkitConfig.from_env()
        except ValueError as exc:
            raise click.UsageError(str(exc), ctx=ctx) from exc
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.area import area  # noqa: E402

cli.add_command(build)
cli.add_command(area)
