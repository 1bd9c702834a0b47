# topmark:header:start
#
#   project      : DtoMeta
#   file         : config_resolver.py
#   file_relpath : src/dtometa/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the DtoMeta configuration from Click parameters.

Resolution order (lowest → highest precedence):
  1. Built-in defaults.
  2. Discovered project configs (root → anchor), unless ``--no-config`` is set.
     In each directory ``pyproject.toml`` (``[tool.dtometa]``) is merged before
     ``dtometa.toml``.
  3. Explicit config files passed via ``--config``, merged in order.
  4. CLI overrides, applied last.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from dtometa.cli.errors import DtoMetaConfigError
from dtometa.config.keys import ArgKey
from dtometa.config.logging import get_logger
from dtometa.config.model import MutableConfig
from dtometa.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dtometa.cli.console import ConsoleLike
    from dtometa.config.logging import DtoMetaLogger
    from dtometa.config.model import Config

logger: DtoMetaLogger = get_logger(__name__)


def resolve_config_from_click(
    *,
    anchor: Path | None,
    no_config: bool,
    config_paths: Sequence[str],
    introspect_comments: bool | None = None,
    class_validator_shim: bool | None = None,
    dto_key_of_comment: str | None = None,
    max_literal_depth: int | None = None,
) -> MutableConfig:
    """Build the merged configuration draft for a command.

    Args:
        anchor (Path | None): Where upward discovery starts (default: cwd).
        no_config (bool): Skip project discovery.
        config_paths (Sequence[str]): Extra config files, merged in order.
        introspect_comments (bool | None): CLI override, None to inherit.
        class_validator_shim (bool | None): CLI override, None to inherit.
        dto_key_of_comment (str | None): CLI override, None to inherit.
        max_literal_depth (int | None): CLI override, None to inherit.

    Returns:
        MutableConfig: The merged draft; call ``freeze_config`` to obtain a `Config`.
    """
    draft: MutableConfig = MutableConfig.load_merged(
        anchor=anchor,
        extra_config_files=[Path(p) for p in config_paths],
        no_config=no_config,
    )
    overrides: dict[str, Any] = {
        ArgKey.INTROSPECT_COMMENTS: introspect_comments,
        ArgKey.CLASS_VALIDATOR_SHIM: class_validator_shim,
        ArgKey.DTO_KEY_OF_COMMENT: dto_key_of_comment,
        ArgKey.MAX_LITERAL_DEPTH: max_literal_depth,
    }
    return draft.apply_args(overrides)


def freeze_config(draft: MutableConfig, console: ConsoleLike | None = None) -> Config:
    """Freeze ``draft``, reporting its diagnostics on ``console``.

    Raises:
        DtoMetaConfigError: If the configuration is invalid.
    """
    try:
        config: Config = draft.freeze()
    except ConfigError as e:
        raise DtoMetaConfigError(str(e)) from e
    if console is not None:
        for diag in config.diagnostics:
            console.warn(f"config: {diag.message}")
    return config
