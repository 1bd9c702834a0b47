# topmark:header:start
#
#   project      : DtoMeta
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running DtoMeta in a controlled working directory."""

from __future__ import annotations

import os
import textwrap
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from dtometa.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (Sequence[str]): CLI argument vector, e.g. ``["version"]``.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    return CliRunner().invoke(cli, list(argv))


def run_cli_in(tmp_path: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Config discovery starts from the working directory (``config``) or from the
    scanned file's directory (``scan``), so tests that write config files run
    from inside ``tmp_path``.
    """
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return run_cli(argv)
    finally:
        os.chdir(cwd)


def write_module(tmp_path: Path, name: str, source: str) -> Path:
    """Write a model module ``<name>.py`` into ``tmp_path`` and return its path."""
    path: Path = tmp_path / f"{name}.py"
    path.write_text(textwrap.dedent(source).lstrip(), encoding="utf-8")
    return path
