"""cssbuilder CLI entry point: Click group with subcommands."""

import click

from cssbuilder import __version__
from cssbuilder.config import CssBuilderConfig, configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option(
    "--log-level",
    default="WARNING",
    envvar="CSSBUILDER_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level for diagnostics on stderr",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """cssbuilder - build and check CSS selectors from builder-call recipes."""
    config = CssBuilderConfig(log_level=log_level)
    configure_logging(config)
    ctx.obj = config


# Import and register subcommands
from cssbuilder.cli.build import build  # noqa: E402
from cssbuilder.cli.check import check  # noqa: E402
from cssbuilder.cli.inspect import inspect  # noqa: E402

cli.add_command(build)
cli.add_command(check)
cli.add_command(inspect)
