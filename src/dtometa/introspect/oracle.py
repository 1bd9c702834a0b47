# topmark:header:start
#
#   project      : DtoMeta
#   file         : oracle.py
#   file_relpath : src/dtometa/introspect/oracle.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type oracle over Python type hints.

Handles are the typing objects found in annotations (``str``, ``list[Role]``,
``Literal[Role.A]``, user classes...), plus a few values synthesized here:

- `SyntheticUnion`: a union built from `UnionType` nodes, or wrapped around the
  type of an optional (``NotRequired``) property together with `UNDEFINED`;
- `UNDEFINED`: the "absent" constituent of an optional property's type;
- `OBJECT_LITERAL`: the type of an inline object literal (a ``TypedDict``).

Canonical reference names:

=====================================  ==================================
Hint                                   Reference
=====================================  ==================================
``str``                                ``String``
``int``, ``float``                     ``Number``
``bool``                               ``Boolean``
``datetime``, ``date``                 ``Date``
``list[T]``, ``set[T]``,               ``[T]``
``tuple[T, ...]``, ``Sequence[T]``
``dict``, ``Any``, ``object``,         ``Object``
multi-member unions, object literals
user classes                           ``module.Qualified.Name``
``"Name"`` (forward reference)         ``Name``
enums and enum members                 none (reported as ``enum``)
=====================================  ==================================
"""

from __future__ import annotations

import collections.abc
import datetime
import enum
import types
import typing
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, ForwardRef

from dtometa.config.logging import get_logger
from dtometa.model.nodes import NamedType, NullType, ObjectLiteralType, PropertyDecl, UnionType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dtometa.config.logging import DtoMetaLogger
    from dtometa.model.nodes import TypeNode

logger: DtoMetaLogger = get_logger(__name__)

NoneType: Final[type] = type(None)


class _Sentinel:
    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name


UNDEFINED: Final[Any] = _Sentinel("UNDEFINED")
OBJECT_LITERAL: Final[Any] = _Sentinel("OBJECT_LITERAL")


@dataclass(frozen=True)
class SyntheticUnion:
    """A union handle; nested unions are flattened on construction."""

    members: tuple[Any, ...]

    def __post_init__(self) -> None:
        flat: list[Any] = []
        for member in self.members:
            flat.extend(member.members if isinstance(member, SyntheticUnion) else (member,))
        object.__setattr__(self, "members", tuple(flat))


PRIMITIVE_NAMES: Final[tuple[tuple[type, str], ...]] = (
    # bool before int: bool is a subclass of int.
    (bool, "Boolean"),
    (str, "String"),
    (int, "Number"),
    (float, "Number"),
    (datetime.datetime, "Date"),
    (datetime.date, "Date"),
)

ARRAY_ORIGINS: Final[tuple[Any, ...]] = (
    list,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
    collections.abc.Iterable,
)

OBJECT_HINTS: Final[tuple[Any, ...]] = (dict, object, typing.Any, collections.abc.Mapping)

_UNION_ORIGINS: Final[tuple[Any, ...]] = (typing.Union, types.UnionType)


def _is_enum_class(hint: Any) -> bool:
    return isinstance(hint, enum.EnumMeta)


def _literal_values(hint: Any) -> tuple[Any, ...] | None:
    if typing.get_origin(hint) is typing.Literal:
        return typing.get_args(hint)
    return None


def _strip_annotated(hint: Any) -> Any:
    while typing.get_origin(hint) is typing.Annotated:
        hint = typing.get_args(hint)[0]
    return hint


class PythonTypeOracle:
    """`TypeOracle` implementation for Python type hints. Stateless."""

    def resolve_type(self, node: TypeNode | PropertyDecl | None) -> Any | None:
        if node is None:
            return None
        if isinstance(node, PropertyDecl):
            handle: Any | None = self.resolve_type(node.type)
            if handle is None or not node.optional:
                return handle
            return SyntheticUnion((UNDEFINED, handle))
        if isinstance(node, NamedType):
            return _strip_annotated(node.hint)
        if isinstance(node, NullType):
            return NoneType
        if isinstance(node, UnionType):
            return SyntheticUnion(tuple(self.resolve_type(item) for item in node.types))
        if isinstance(node, ObjectLiteralType):
            return OBJECT_LITERAL
        return None

    def canonical_reference(self, handle: Any) -> str | None:
        handle = _strip_annotated(handle)
        if handle is UNDEFINED or handle is NoneType or handle is None:
            return None
        if handle is OBJECT_LITERAL:
            return "Object"
        if isinstance(handle, str):
            return handle
        if isinstance(handle, ForwardRef):
            return handle.__forward_arg__
        if self.is_enum_type(handle):
            return None

        if isinstance(handle, SyntheticUnion) or typing.get_origin(handle) in _UNION_ORIGINS:
            return self._union_reference(handle)

        literals: tuple[Any, ...] | None = _literal_values(handle)
        if literals is not None:
            names: set[str | None] = {self.canonical_reference(type(value)) for value in literals}
            return names.pop() if len(names) == 1 else "Object"

        unwrapped: tuple[Any, bool] | None = self.unwrap_array(handle)
        if unwrapped is None:
            return "Array"
        element, is_array = unwrapped
        if is_array:
            item: str | None = self.canonical_reference(element)
            return f"[{item}]" if item else None

        if isinstance(handle, type):
            for cls, name in PRIMITIVE_NAMES:
                if handle is cls:
                    return name
        origin: Any = typing.get_origin(handle) or handle
        if origin in OBJECT_HINTS or typing.is_typeddict(origin):
            return "Object"
        if isinstance(origin, type):
            if origin.__module__ == "builtins":
                return origin.__qualname__
            return f"{origin.__module__}.{origin.__qualname__}"
        logger.debug("No canonical reference for %r", handle)
        return None

    def _union_reference(self, handle: Any) -> str | None:
        if self.is_auto_generated_type_union(handle):
            return self.canonical_reference(self.union_constituents(handle)[-1])
        remaining: list[Any] = [
            member
            for member in self.union_constituents(handle)
            if member is not NoneType and member is not UNDEFINED
        ]
        if len(remaining) == 1:
            return self.canonical_reference(remaining[0])
        return "Object"

    def is_enum_type(self, handle: Any) -> bool:
        handle = _strip_annotated(handle)
        return _is_enum_class(handle) or self.is_enum_member(handle)

    def is_enum_member(self, handle: Any) -> bool:
        handle = _strip_annotated(handle)
        if isinstance(handle, enum.Enum):
            return True
        literals: tuple[Any, ...] | None = _literal_values(handle)
        return literals is not None and len(literals) == 1 and isinstance(literals[0], enum.Enum)

    def is_auto_generated_type_union(self, handle: Any) -> bool:
        return (
            isinstance(handle, SyntheticUnion)
            and len(handle.members) == 2
            and handle.members[0] is UNDEFINED
        )

    def union_constituents(self, handle: Any) -> Sequence[Any]:
        if isinstance(handle, SyntheticUnion):
            return handle.members
        if typing.get_origin(handle) in _UNION_ORIGINS:
            return typing.get_args(handle)
        literals: tuple[Any, ...] | None = _literal_values(handle)
        if literals is not None and len(literals) > 1:
            return tuple(typing.Literal[value] for value in literals)
        return ()

    def enum_of_member_union(self, handle: Any) -> Any | None:
        members: list[Any] = [
            _strip_annotated(member)
            for member in self.union_constituents(handle) or (handle,)
            if member is not NoneType and member is not UNDEFINED
        ]
        if not members:
            return None

        owners: set[type] = set()
        for member in members:
            value: Any = member
            literals: tuple[Any, ...] | None = _literal_values(member)
            if literals is not None and len(literals) == 1:
                value = literals[0]
            if not isinstance(value, enum.Enum):
                break
            owners.add(type(value))
        else:
            if len(owners) == 1:
                return owners.pop()
            return None

        if len(members) == 1:
            candidate: Any = members[0]
            unwrapped: tuple[Any, bool] | None = self.unwrap_array(candidate)
            if unwrapped is not None and _is_enum_class(unwrapped[0]):
                return candidate
        return None

    def unwrap_array(self, handle: Any) -> tuple[Any, bool] | None:
        handle = _strip_annotated(handle)
        if handle in ARRAY_ORIGINS or handle is tuple:
            return None
        origin: Any = typing.get_origin(handle)
        args: tuple[Any, ...] = typing.get_args(handle)
        if origin in ARRAY_ORIGINS:
            return (_strip_annotated(args[0]), True) if args else None
        if origin is tuple:
            if len(args) == 2 and args[1] is Ellipsis:
                return _strip_annotated(args[0]), True
            return handle, False
        return handle, False

    def type_name(self, handle: Any) -> str:
        handle = _strip_annotated(handle)
        literals: tuple[Any, ...] | None = _literal_values(handle)
        if literals is not None and len(literals) == 1:
            handle = literals[0]
        if isinstance(handle, enum.Enum):
            owner: type = type(handle)
            return f"{owner.__module__}.{owner.__qualname__}.{handle.name}"
        if isinstance(handle, type):
            return f"{handle.__module__}.{handle.__qualname__}"
        return repr(handle)
