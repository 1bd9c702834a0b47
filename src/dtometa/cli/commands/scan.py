# topmark:header:start
#
#   project      : DtoMeta
#   file         : scan.py
#   file_relpath : src/dtometa/cli/commands/scan.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DtoMeta `scan` command.

Imports one module (by dotted name, or from a ``.py`` file path), scans the
classes it defines (or the ones named with ``--class``) and prints their
metadata as JSON, TOML or text.

Exit codes:
  * ``SUCCESS``: metadata printed;
  * ``FILE_NOT_FOUND``: the module cannot be imported;
  * ``USAGE_ERROR``: a ``--class`` name is not a class of the module;
  * ``PROPERTIES_DROPPED``: with ``--strict``, some property failed to resolve.
"""

from __future__ import annotations

import importlib
import importlib.util
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from dtometa.api import scan_module
from dtometa.cli.config_resolver import freeze_config, resolve_config_from_click
from dtometa.cli.errors import DtoMetaModuleNotFoundError, DtoMetaUsageError
from dtometa.cli.exit_codes import ExitCode
from dtometa.cli.options import common_config_options, plugin_options
from dtometa.config.logging import get_logger
from dtometa.metadata.serializers import to_data, to_json, to_text, to_toml_text

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import ModuleType

    from dtometa.cli.console import ConsoleLike
    from dtometa.config.logging import DtoMetaLogger
    from dtometa.config.model import Config, MutableConfig
    from dtometa.pipeline.scanner import ScanResult

logger: DtoMetaLogger = get_logger(__name__)


class OutputFormat(str, Enum):
    """Output formats of the scan command."""

    JSON = "json"
    TOML = "toml"
    TEXT = "text"


def load_module(target: str) -> ModuleType:
    """Import ``target``, a dotted module name or a path to a ``.py`` file.

    Raises:
        DtoMetaModuleNotFoundError: If the module cannot be imported.
    """
    path = Path(target)
    if path.suffix == ".py":
        if not path.is_file():
            raise DtoMetaModuleNotFoundError(f"No such file: {target}")
        name: str = path.stem
        spec = importlib.util.spec_from_file_location(name, path)
        if spec is None or spec.loader is None:
            raise DtoMetaModuleNotFoundError(f"Cannot load module from {target}")
        module: ModuleType = importlib.util.module_from_spec(spec)
        # Registered before execution: dataclasses and typing look the module up by name.
        sys.modules[name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            sys.modules.pop(name, None)
            raise DtoMetaModuleNotFoundError(f"Cannot import {target}: {e}") from e
        return module

    try:
        return importlib.import_module(target)
    except ImportError as e:
        raise DtoMetaModuleNotFoundError(f"Cannot import module {target!r}: {e}") from e


def render(results: Sequence[ScanResult], output_format: OutputFormat) -> str:
    """Render scan results in the requested format."""
    if output_format is OutputFormat.TEXT:
        return "\n".join(to_text(r.class_name or "<anonymous>", r.metadata) for r in results) + "\n"
    data: dict[str, Any] = {r.class_name: to_data(r.metadata) for r in results if r.named}
    if output_format is OutputFormat.TOML:
        return to_toml_text(data)
    return to_json(data) + "\n"


@click.command(
    name="scan",
    help="Print the property metadata of the classes defined in MODULE.",
)
@click.argument("module_name", metavar="MODULE")
@click.option(
    "--class",
    "class_names",
    multiple=True,
    metavar="NAME",
    help="Only scan this class (repeatable).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.JSON.value,
    show_default=True,
    help="Output format.",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Exit with a non-zero code when a property had to be dropped.",
)
@common_config_options
@plugin_options
@click.pass_context
def scan_command(
    ctx: click.Context,
    *,
    module_name: str,
    class_names: Sequence[str],
    output_format: str,
    strict: bool,
    no_config: bool,
    config_paths: Sequence[str],
    introspect_comments: bool | None,
    class_validator_shim: bool | None,
    dto_key_of_comment: str | None,
    max_literal_depth: int | None,
) -> None:
    """Scan MODULE and print its metadata."""
    console: ConsoleLike = ctx.obj["console"]

    module_path = Path(module_name)
    anchor: Path = module_path.parent if module_path.suffix == ".py" else Path.cwd()
    draft: MutableConfig = resolve_config_from_click(
        anchor=anchor,
        no_config=no_config,
        config_paths=config_paths,
        introspect_comments=introspect_comments,
        class_validator_shim=class_validator_shim,
        dto_key_of_comment=dto_key_of_comment,
        max_literal_depth=max_literal_depth,
    )
    config: Config = freeze_config(draft, console)

    module: ModuleType = load_module(module_name)
    try:
        results: list[ScanResult] = scan_module(
            module,
            class_names=class_names or None,
            config=config,
        )
    except LookupError as e:
        raise DtoMetaUsageError(str(e)) from e

    dropped: int = 0
    for result in results:
        for diag in result.diagnostics:
            dropped += 1
            console.warn(f"warning: {diag.message}")
        if ctx.obj["verbosity_level"] <= logging.INFO:
            console.warn(f"{result.class_name}: {len(result.metadata)} properties")

    console.print(render(results, OutputFormat(output_format)), nl=False)

    if strict and dropped:
        ctx.exit(ExitCode.PROPERTIES_DROPPED)
