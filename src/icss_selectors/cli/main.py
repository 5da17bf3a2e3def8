"""icss-selectors CLI entry point: Click group with subcommands."""

import click

from icss_selectors import __version__


@click.group()
@click.version_option(version=__version__, prog_name="icss-selectors")
def cli() -> None:
    """icss-selectors - scope CSS Modules classes and ids with :local/:global."""


# Import and register subcommands
from icss_selectors.cli.localize import localize  # noqa: E402
from icss_selectors.cli.check import check  # noqa: E402

cli.add_command(localize)
cli.add_command(check)
