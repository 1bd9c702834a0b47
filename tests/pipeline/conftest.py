# topmark:header:start
#
#   project      : DtoMeta
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline test helpers: an in-memory type oracle and declaration builders.

`FakeOracle` answers every query from the `FakeType` handles placed directly
in `NamedType` nodes, so the engine can be exercised without the Python
frontend.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from dtometa.config.model import Config
from dtometa.model.nodes import (
    NamedType,
    NullType,
    ObjectLiteralType,
    PropertyDecl,
    UnionType,
)
from dtometa.pipeline.assembler import assemble_property
from dtometa.pipeline.context import ResolverServices

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dtometa.metadata.record import PropertyMetadata
    from dtometa.model.nodes import TypeNode


@dataclass(frozen=True)
class FakeType:
    """A fake type handle.

    Attributes:
        name (str): Display name (``type_name``).
        reference (str | None): Canonical reference, None for an oracle miss.
        kind (str): ``plain``, ``enum``, ``member``, ``array`` or ``union``.
        element (FakeType | None): Element type of an array (None: undeterminable).
        members (tuple[FakeType, ...]): Union constituents.
        auto (bool): Auto-generated union flag.
        enum_owner (FakeType | None): Enum found by ``enum_of_member_union``.
    """

    name: str
    reference: str | None = None
    kind: str = "plain"
    element: FakeType | None = None
    members: tuple[FakeType, ...] = ()
    auto: bool = False
    enum_owner: FakeType | None = None


UNDEFINED = FakeType("undefined")
NULL = FakeType("null")
STRING = FakeType("string", reference="String")
NUMBER = FakeType("number", reference="Number")


def enum_type(name: str) -> FakeType:
    return FakeType(name, kind="enum")


def array_of(element: FakeType | None, reference: str | None = None) -> FakeType:
    return FakeType(f"{element.name if element else '?'}[]", reference=reference, kind="array", element=element)


class FakeOracle:
    """`TypeOracle` over `FakeType` handles."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def resolve_type(self, node: TypeNode | PropertyDecl | None) -> Any | None:
        self.calls.append("resolve_type")
        if node is None:
            return None
        if isinstance(node, PropertyDecl):
            handle = self.resolve_type(node.type)
            if handle is None or not node.optional:
                return handle
            return FakeType("optional", kind="union", members=(UNDEFINED, handle), auto=True)
        if isinstance(node, NamedType):
            return node.hint
        if isinstance(node, NullType):
            return NULL
        if isinstance(node, UnionType):
            return FakeType(
                "union",
                kind="union",
                members=tuple(self.resolve_type(t) for t in node.types),
            )
        if isinstance(node, ObjectLiteralType):
            return FakeType("literal", reference="Object")
        return None

    def canonical_reference(self, handle: Any) -> str | None:
        return handle.reference

    def is_enum_type(self, handle: Any) -> bool:
        return handle.kind in ("enum", "member")

    def is_enum_member(self, handle: Any) -> bool:
        return handle.kind == "member"

    def is_auto_generated_type_union(self, handle: Any) -> bool:
        return handle.auto

    def union_constituents(self, handle: Any) -> Sequence[Any]:
        return handle.members

    def enum_of_member_union(self, handle: Any) -> Any | None:
        return handle.enum_owner

    def unwrap_array(self, handle: Any) -> tuple[Any, bool] | None:
        if handle.kind != "array":
            return handle, False
        if handle.element is None:
            return None
        return handle.element, True

    def type_name(self, handle: Any) -> str:
        return handle.name


def named(handle: FakeType) -> NamedType:
    return NamedType(handle)


def prop(name: str | None = "value", type_: TypeNode | FakeType | None = None, **kwargs: Any) -> PropertyDecl:
    """Build a `PropertyDecl`; a bare `FakeType` is wrapped in a `NamedType`."""
    node: TypeNode | None = NamedType(type_) if isinstance(type_, FakeType) else type_
    return PropertyDecl(name=name, type=node, **kwargs)


def resolve(
    declaration: PropertyDecl,
    *,
    config: Config | None = None,
    oracle: FakeOracle | None = None,
    source: Any = None,
    **services: Any,
) -> PropertyMetadata:
    """Assemble one property with a `FakeOracle` and return its record."""
    return assemble_property(
        declaration,
        services=ResolverServices(oracle=oracle or FakeOracle(), **services),
        config=config or Config(),
        host_file="",
        source=source,
    )
