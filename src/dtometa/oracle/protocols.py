# topmark:header:start
#
#   project      : DtoMeta
#   file         : protocols.py
#   file_relpath : src/dtometa/oracle/protocols.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Collaborator protocols injected into the resolution engine.

The engine never inspects a type system directly. It asks a `TypeOracle`,
normalizes reference names with an `ImportPathNormalizer`, and obtains
documentation from a `DocExtractor`. All three are read-only query surfaces;
the engine may call them any number of times in any order.

Handles returned by the oracle (``TypeHandle``) are opaque to the engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dtometa.model.nodes import PropertyDecl, TypeNode

TypeHandle: TypeAlias = Any


class TypeOracle(Protocol):
    """Read-only type-system query surface."""

    def resolve_type(self, node: TypeNode | PropertyDecl | None) -> TypeHandle | None:
        """Return the resolved type of a type expression or of a property.

        For a property, the resolved type reflects its declaration as a whole,
        including a synthesized ``undefined | T`` union for optional properties.
        """
        ...

    def canonical_reference(self, handle: TypeHandle) -> str | None:
        """Return the canonical reference name of a type, or None.

        Arrays are spelled ``[Item]``. Enum types yield None: they are reported
        through the ``enum`` key instead.
        """
        ...

    def is_enum_type(self, handle: TypeHandle) -> bool:
        """Whether ``handle`` is an enum type (or a member of one)."""
        ...

    def is_enum_member(self, handle: TypeHandle) -> bool:
        """Whether ``handle`` is a single enum member rather than the enum type."""
        ...

    def is_auto_generated_type_union(self, handle: TypeHandle) -> bool:
        """Whether ``handle`` is a union the type system synthesized around a type.

        The last constituent of such a union is the representative type.
        """
        ...

    def union_constituents(self, handle: TypeHandle) -> Sequence[TypeHandle]:
        """Return the constituents of a union type, in declaration order."""
        ...

    def enum_of_member_union(self, handle: TypeHandle) -> TypeHandle | None:
        """Return the enum type when ``handle`` is a synthesized union of its members."""
        ...

    def unwrap_array(self, handle: TypeHandle) -> tuple[TypeHandle, bool] | None:
        """Unwrap an array type.

        Returns:
            tuple[TypeHandle, bool] | None: ``(element, True)`` for arrays,
                ``(handle, False)`` for any other type, and None for an array
                whose element type cannot be determined.
        """
        ...

    def type_name(self, handle: TypeHandle) -> str:
        """Return the display name of a type (used to name enums)."""
        ...


class ImportPathNormalizer(Protocol):
    """Rewrite a reference name so it resolves from the host file."""

    def __call__(self, reference: str, host_file: str) -> str: ...


class DocExtractor(Protocol):
    """Extract a description and example values for a property."""

    def __call__(
        self,
        prop: PropertyDecl,
        source: Any,
        oracle: TypeOracle,
    ) -> tuple[str, Sequence[Any]]: ...
