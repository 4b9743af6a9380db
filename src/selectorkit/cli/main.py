"""selectorkit CLI entry point: Click group with subcommands."""

import logging
from dataclasses import replace

import click

from selectorkit import __version__
from selectorkit.config import SelectorKitConfig


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (defaults to SELECTORKIT_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """selectorkit - build, render and check CSS selectors."""
    try:
        config = SelectorKitConfig.from_env()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    if log_level:
        config = replace(config, log_level=log_level.upper())
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.inspect import inspect  # noqa: E402
from selectorkit.cli.render import render  # noqa: E402
from selectorkit.cli.validate import validate  # noqa: E402

cli.add_command(build)
cli.add_command(render)
cli.add_command(validate)
cli.add_command(inspect)
