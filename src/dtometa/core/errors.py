# topmark:header:start
#
#   project      : DtoMeta
#   file         : errors.py
#   file_relpath : src/dtometa/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exception hierarchy for DtoMeta.

Only configuration errors are meant to reach callers. Everything raised while
resolving a single property derives from `ResolutionError` (or is an arbitrary
exception raised by a collaborator) and is contained at the property boundary
by the class scanner.
"""

from __future__ import annotations


class DtoMetaError(Exception):
    """Base class for all DtoMeta errors."""


class ConfigError(DtoMetaError):
    """Raised when a configuration cannot be frozen into a valid snapshot."""


class ResolutionError(DtoMetaError):
    """Raised while resolving the metadata of a single property."""


class LiteralNestingError(ResolutionError):
    """Raised when inline object-literal schemas nest deeper than allowed.

    Attributes:
        depth (int): The nesting depth that was reached.
        limit (int): The configured maximum depth.
    """

    def __init__(self, depth: int, limit: int) -> None:
        super().__init__(f"Inline object literal nesting depth {depth} exceeds limit {limit}")
        self.depth = depth
        self.limit = limit


class LiteralConversionError(ResolutionError):
    """Raised when a value cannot be converted to a literal value."""
