"""CLI command: icss-selectors check -- verify a CSS file can be localized."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from icss_selectors.cli.options import mode_option
from icss_selectors.config import ScopeConfig
from icss_selectors.css import parse_css, walk_rules
from icss_selectors.errors import IcssSelectorsError
from icss_selectors.transforms import LocalizeSelectorsTransform


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@mode_option
def check(cssfile: str, mode: str) -> None:
    """Run the transform on CSSFILE without writing anything.

    Exits with code 0 when every selector is accepted, 1 otherwise.
    """
    css_path = Path(cssfile)
    try:
        root = parse_css(css_path.read_text(encoding="utf-8"))
        LocalizeSelectorsTransform(ScopeConfig(mode=mode)).apply(root)
    except IcssSelectorsError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    rules = sum(1 for _ in walk_rules(root))
    click.echo(f"OK: {css_path.name} ({rules} rule(s), mode={mode})")
