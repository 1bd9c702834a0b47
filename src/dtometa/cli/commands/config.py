# topmark:header:start
#
#   project      : DtoMeta
#   file         : config.py
#   file_relpath : src/dtometa/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DtoMeta `config` command.

Prints the effective configuration as TOML after applying defaults, project
config files, ``--config`` files and CLI overrides. With ``-v`` the merged
sources are listed as TOML comments first.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from dtometa.cli.config_resolver import freeze_config, resolve_config_from_click
from dtometa.cli.options import common_config_options, plugin_options
from dtometa.config.io import to_toml
from dtometa.config.keys import Toml
from dtometa.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dtometa.cli.console import ConsoleLike
    from dtometa.config.logging import DtoMetaLogger
    from dtometa.config.model import Config, MutableConfig

logger: DtoMetaLogger = get_logger(__name__)


@click.command(
    name="config",
    help="Show the effective DtoMeta configuration as TOML.",
)
@click.option(
    "--pyproject",
    is_flag=True,
    default=False,
    help="Nest the output under [tool.dtometa] for pasting into pyproject.toml.",
)
@common_config_options
@plugin_options
@click.pass_context
def config_command(
    ctx: click.Context,
    *,
    pyproject: bool,
    no_config: bool,
    config_paths: Sequence[str],
    introspect_comments: bool | None,
    class_validator_shim: bool | None,
    dto_key_of_comment: str | None,
    max_literal_depth: int | None,
) -> None:
    """Print the effective configuration."""
    console: ConsoleLike = ctx.obj["console"]
    draft: MutableConfig = resolve_config_from_click(
        anchor=Path.cwd(),
        no_config=no_config,
        config_paths=config_paths,
        introspect_comments=introspect_comments,
        class_validator_shim=class_validator_shim,
        dto_key_of_comment=dto_key_of_comment,
        max_literal_depth=max_literal_depth,
    )
    config: Config = freeze_config(draft, console)

    if ctx.obj["verbosity_level"] <= logging.INFO:
        for source in config.config_files:
            console.print(f"# source: {source}")

    data = config.to_toml_dict()
    if pyproject:
        data = {Toml.SECTION_TOOL: {Toml.SECTION_TOOL_NAME: data}}
    console.print(to_toml(data), nl=False)
