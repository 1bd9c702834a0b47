# topmark:header:start
#
#   project      : DtoMeta
#   file         : __init__.py
#   file_relpath : src/dtometa/metadata/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output model: metadata records, class maps, and type descriptors."""

from __future__ import annotations

from dtometa.metadata.keys import MetaKey
from dtometa.metadata.record import (
    ClassMetadata,
    ClassMetadataBuilder,
    MutablePropertyMetadata,
    PropertyMetadata,
)
from dtometa.metadata.types import (
    ArrayOf,
    LiteralValue,
    ObjectLiteral,
    Primitive,
    Reference,
    Thunk,
    TypeDescriptor,
    evaluate_descriptor,
    reference_from_name,
    to_literal,
)

__all__ = [
    "ArrayOf",
    "ClassMetadata",
    "ClassMetadataBuilder",
    "LiteralValue",
    "MetaKey",
    "MutablePropertyMetadata",
    "ObjectLiteral",
    "Primitive",
    "PropertyMetadata",
    "Reference",
    "Thunk",
    "TypeDescriptor",
    "evaluate_descriptor",
    "reference_from_name",
    "to_literal",
]
