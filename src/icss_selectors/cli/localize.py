"""CLI command: icss-selectors localize -- rewrite selectors in a CSS file."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from icss_selectors.cli.options import mode_option
from icss_selectors.config import ScopeConfig
from icss_selectors.errors import IcssSelectorsError
from icss_selectors.transforms import localize_css


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@mode_option
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the result here instead of stdout.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log each rewritten rule.")
def localize(cssfile: str, mode: str, output: str | None, verbose: bool) -> None:
    """Wrap local classes and ids of CSSFILE in :local(...).

    Exits with code 1 and prints the error if any selector is rejected.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    source = Path(cssfile).read_text(encoding="utf-8")
    try:
        result = localize_css(source, ScopeConfig(mode=mode))
    except IcssSelectorsError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output:
        Path(output).write_text(result, encoding="utf-8")
    else:
        click.echo(result, nl=False)
