# topmark:header:start
#
#   project      : DtoMeta
#   file         : __init__.py
#   file_relpath : src/dtometa/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Declaration model (classes, properties, type expressions, initializers)."""

from __future__ import annotations

from dtometa.model.nodes import (
    Annotation,
    ClassDecl,
    Expression,
    Initializer,
    NamedType,
    NullType,
    ObjectLiteralType,
    PropertyDecl,
    TypeAssertion,
    TypeNode,
    UnionType,
)

__all__ = [
    "Annotation",
    "ClassDecl",
    "Expression",
    "Initializer",
    "NamedType",
    "NullType",
    "ObjectLiteralType",
    "PropertyDecl",
    "TypeAssertion",
    "TypeNode",
    "UnionType",
]
