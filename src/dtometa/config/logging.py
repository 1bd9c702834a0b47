# topmark:header:start
#
#   project      : DtoMeta
#   file         : logging.py
#   file_relpath : src/dtometa/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for DtoMeta: a TRACE level, a logger class and colored stderr output.

Every module obtains its logger through `get_logger`. Internal logging is off
(CRITICAL) unless a level is passed to `setup_logging` or set through the
``DTOMETA_LOG_LEVEL`` environment variable. TRACE sits below DEBUG and follows
each resolution step.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV: Final[str] = "DTOMETA_LOG_LEVEL"

# Accepted level names, including the aliases the standard library knows.
LEVEL_NAMES: Final[Mapping[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class DtoMetaLogger(logging.Logger):
    """Logger with a `trace` method for the TRACE level."""

    def trace(self, msg: object, *args: object, extra: Mapping[str, object] | None = None) -> None:
        """Log ``msg % args`` at TRACE level, attributed to the caller."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(DtoMetaLogger)

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# Lowest level of each band and its style, most severe first.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Color each formatted record by the band its level falls in."""

    def format(self, record: logging.LogRecord) -> str:
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def parse_log_level(value: str | None) -> int | None:
    """Return the level named (or numbered) by ``value``, or None if unknown.

    Examples:
        ``"trace"`` gives `TRACE_LEVEL`, ``"10"`` gives ``logging.DEBUG``.
    """
    if not value:
        return None
    text: str = value.strip().upper()
    if text.isdigit():
        return int(text)
    return LEVEL_NAMES.get(text)


def resolve_env_log_level() -> int | None:
    """Return the level set through ``DTOMETA_LOG_LEVEL``, or None."""
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV))


def setup_logging(level: int | None = None) -> None:
    """Route all records at ``level`` or above to stderr through `ChalkFormatter`.

    Args:
        level (int | None): Threshold; None consults the environment and falls
            back to CRITICAL.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    # Replace earlier handlers so repeated setup does not duplicate output.
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)


def get_logger(name: str) -> DtoMetaLogger:
    """Return the `DtoMetaLogger` registered under ``name``."""
    return cast("DtoMetaLogger", logging.getLogger(name))
