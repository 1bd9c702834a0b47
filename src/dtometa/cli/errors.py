# topmark:header:start
#
#   project      : DtoMeta
#   file         : errors.py
#   file_relpath : src/dtometa/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the DtoMeta CLI.

Raise these in commands to exit with a standardized message and exit code. They
print through the project console when one is present in the Click context.
"""

from __future__ import annotations

from typing import IO, Any

import click

from dtometa.cli.exit_codes import ExitCode


class DtoMetaCliError(click.ClickException):
    """Base class for all DtoMeta CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class DtoMetaUsageError(DtoMetaCliError):
    """Invalid invocation (conflicting flags, unknown class names)."""

    exit_code = ExitCode.USAGE_ERROR


class DtoMetaModuleNotFoundError(DtoMetaCliError):
    """The module to scan cannot be imported."""

    exit_code = ExitCode.FILE_NOT_FOUND


class DtoMetaConfigError(DtoMetaCliError):
    """Configuration errors (invalid values, unreadable files)."""

    exit_code = ExitCode.CONFIG_ERROR
