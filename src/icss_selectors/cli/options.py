"""Options shared by the CLI commands."""

from __future__ import annotations

import click

from icss_selectors.config import ScopeMode

mode_option = click.option(
    "--mode",
    type=click.Choice([m.value for m in ScopeMode]),
    default=ScopeMode.LOCAL.value,
    show_default=True,
    help="Scope applied to classes and ids without an explicit :local/:global.",
)
