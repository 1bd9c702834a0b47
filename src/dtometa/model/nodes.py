# topmark:header:start
#
#   project      : DtoMeta
#   file         : nodes.py
#   file_relpath : src/dtometa/model/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory declaration model consumed by the resolution engine.

Parsers (the Python frontend in `dtometa.introspect`, or any external parser)
describe a class as a `ClassDecl` holding `PropertyDecl` entries. Type
expressions are a small closed set of syntax nodes; everything the engine does
not need to inspect syntactically is a `NamedType` whose ``hint`` payload is
opaque to the engine and interpreted only by the type oracle.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeAlias


@dataclass(frozen=True)
class NamedType:
    """A type expression the oracle resolves (a primitive, class, array, enum...).

    Attributes:
        hint (Any): Oracle-specific payload (for the Python oracle: a typing object).
    """

    hint: Any


@dataclass(frozen=True)
class NullType:
    """The literal ``null`` type inside a union."""


@dataclass(frozen=True)
class UnionType:
    """An explicitly written union of type expressions."""

    types: tuple[TypeNode, ...]


@dataclass(frozen=True)
class ObjectLiteralType:
    """An inline object-literal schema whose members are property declarations."""

    members: tuple[PropertyDecl, ...]


TypeNode: TypeAlias = NamedType | NullType | UnionType | ObjectLiteralType


@dataclass(frozen=True)
class Expression:
    """An initializer expression carrying its evaluated value."""

    value: Any


@dataclass(frozen=True)
class TypeAssertion:
    """A type assertion wrapped around an expression (``value as T``)."""

    expression: Expression | TypeAssertion
    type: TypeNode | None = None


Initializer: TypeAlias = Expression | TypeAssertion


@dataclass(frozen=True)
class Annotation:
    """A decorator-like marker attached to a property (``@Min(1)``)."""

    name: str
    arguments: tuple[Any, ...] = ()
    keywords: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class PropertyDecl:
    """A declared class property (or a member of an inline object literal).

    Attributes:
        name (str | None): Property name; None when the declaration has no name.
        type (TypeNode | None): Declared type expression, if any.
        optional (bool): Whether the property carries a presence marker (``name?: T``).
        initializer (Initializer | None): Initializer expression, if any.
        annotations (tuple[Annotation, ...]): Markers attached to the property.
        explicit (tuple[tuple[str, Any], ...]): Metadata keys authored by the user.
            These always win over inferred values.
        is_static (bool): Whether this is a class-level (static) member.
        computed_name (bool): Whether the name is computed rather than an identifier.
        comment (str | None): Raw documentation comment text, if any.
    """

    name: str | None
    type: TypeNode | None = None
    optional: bool = False
    initializer: Initializer | None = None
    annotations: tuple[Annotation, ...] = ()
    explicit: tuple[tuple[str, Any], ...] = ()
    is_static: bool = False
    computed_name: bool = False
    comment: str | None = None

    @property
    def has_simple_name(self) -> bool:
        """Whether the property has a plain identifier name."""
        return bool(self.name) and not self.computed_name and str(self.name).isidentifier()


@dataclass(frozen=True)
class ClassDecl:
    """A class declaration to scan.

    Attributes:
        name (str | None): Class name; None for anonymous classes.
        properties (tuple[PropertyDecl, ...]): Declared properties, in source order.
        host_file (str): Identifier of the host module/file, used to normalize
            type reference names.
        source (Any): Source context handed to the documentation extractor
            (for the Python frontend: the class object). None disables
            documentation enrichment.
    """

    name: str | None
    properties: tuple[PropertyDecl, ...] = ()
    host_file: str = ""
    source: Any = None
