# topmark:header:start
#
#   project      : DtoMeta
#   file         : version.py
#   file_relpath : src/dtometa/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DtoMeta `version` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dtometa.constants import DTOMETA_VERSION

if TYPE_CHECKING:
    from dtometa.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of DtoMeta.",
)
@click.option(
    "--short",
    is_flag=True,
    default=False,
    help="Print the bare version number.",
)
@click.pass_context
def version_command(ctx: click.Context, *, short: bool = False) -> None:
    """Print the DtoMeta version installed in the current environment."""
    console: ConsoleLike = ctx.obj["console"]
    if short:
        console.print(DTOMETA_VERSION)
    else:
        console.print(f"DtoMeta version {DTOMETA_VERSION}")
