# topmark:header:start
#
#   project      : DtoMeta
#   file         : keys.py
#   file_relpath : src/dtometa/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for DtoMeta configuration.

This module defines the authoritative string constants used when reading and
writing DtoMeta configuration from TOML sources (``dtometa.toml`` and
``[tool.dtometa]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
    - CLI option names and TOML keys are intentionally kept separate.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by DtoMeta configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_NAME: Final[str] = "dtometa"

    # [plugin]
    SECTION_PLUGIN: Final[str] = "plugin"

    KEY_INTROSPECT_COMMENTS: Final[str] = "introspect_comments"
    KEY_CLASS_VALIDATOR_SHIM: Final[str] = "class_validator_shim"
    KEY_DTO_KEY_OF_COMMENT: Final[str] = "dto_key_of_comment"
    KEY_MAX_LITERAL_DEPTH: Final[str] = "max_literal_depth"


class ArgKey:
    """Keys accepted by `MutableConfig.apply_args` (CLI namespaces and API dicts)."""

    INTROSPECT_COMMENTS: Final[str] = "introspect_comments"
    CLASS_VALIDATOR_SHIM: Final[str] = "class_validator_shim"
    DTO_KEY_OF_COMMENT: Final[str] = "dto_key_of_comment"
    MAX_LITERAL_DEPTH: Final[str] = "max_literal_depth"
