# topmark:header:start
#
#   project      : DtoMeta
#   file         : options.py
#   file_relpath : src/dtometa/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, configuration,
plugin overrides) and their resolution logic, so commands and the group can
stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from dtometa.cli.errors import DtoMetaUsageError
from dtometa.config.logging import LEVEL_NAMES

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` and ``-q`` counts.

    Raises:
        DtoMetaUsageError: If both verbose and quiet flags are used.

    Behavior:
        Three or more -v flags set TRACE level, two set DEBUG, one sets INFO.
        One or more -q flags set ERROR level. Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise DtoMetaUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return LEVEL_NAMES["TRACE"]
    if verbose_count == 2:
        return LEVEL_NAMES["DEBUG"]
    if verbose_count == 1:
        return LEVEL_NAMES["INFO"]
    if quiet_count >= 1:
        return LEVEL_NAMES["ERROR"]
    return LEVEL_NAMES["WARNING"]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counted ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Repeat for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Honors ``--color``/``--no-color``, then ``FORCE_COLOR`` and ``NO_COLOR``,
    and defaults to color when stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` and ``--no-config`` options."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore project config files (only use defaults and --config files).",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def plugin_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add overrides for the ``[plugin]`` configuration table.

    Unset flags stay ``None`` so configuration files keep their values.
    """
    f = click.option(
        "--introspect-comments/--no-introspect-comments",
        "introspect_comments",
        default=None,
        help="Derive descriptions and examples from attribute docstrings.",
    )(f)
    f = click.option(
        "--class-validator-shim/--no-class-validator-shim",
        "class_validator_shim",
        default=None,
        help="Map Min/Max/MinLength/MaxLength markers to schema bounds.",
    )(f)
    f = click.option(
        "--dto-key-of-comment",
        "dto_key_of_comment",
        metavar="KEY",
        default=None,
        help="Metadata key receiving the description (default: description).",
    )(f)
    f = click.option(
        "--max-literal-depth",
        "max_literal_depth",
        type=click.IntRange(min=1),
        default=None,
        help="Maximum nesting depth of inline TypedDict schemas.",
    )(f)
    return f
