# topmark:header:start
#
#   project      : DtoMeta
#   file         : keys.py
#   file_relpath : src/dtometa/metadata/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Metadata key vocabulary.

These names are the *output* schema of DtoMeta: schema generators read them
from the per-class metadata map. Renaming one is a breaking change.
"""

from __future__ import annotations

from typing import Final


class MetaKey:
    """Keys of a `PropertyMetadata` record."""

    REQUIRED: Final[str] = "required"
    TYPE: Final[str] = "type"
    NULLABLE: Final[str] = "nullable"
    IS_ARRAY: Final[str] = "isArray"
    ENUM: Final[str] = "enum"
    DEFAULT: Final[str] = "default"
    MINIMUM: Final[str] = "minimum"
    MAXIMUM: Final[str] = "maximum"
    MIN_LENGTH: Final[str] = "minLength"
    MAX_LENGTH: Final[str] = "maxLength"
    DESCRIPTION: Final[str] = "description"
    EXAMPLE: Final[str] = "example"
    EXAMPLES: Final[str] = "examples"
