# topmark:header:start
#
#   project      : DtoMeta
#   file         : types.py
#   file_relpath : src/dtometa/metadata/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type descriptors and literal values.

A `TypeDescriptor` is the value stored under the ``type`` key of a metadata
record (and, for enums, under ``enum``). It is a small tagged union:

- `Primitive`: a built-in scalar named directly;
- `Reference`: a type referenced by (normalized) name;
- `ArrayOf`: an array of another descriptor;
- `ObjectLiteral`: an inline object schema, mapping member names to records;
- `Thunk`: a deferred descriptor.

Thunks let forward and circular class references be emitted without forcing
resolution order: a consumer calls `Thunk.evaluate` (or `evaluate_descriptor`)
when it actually needs the descriptor.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeAlias

from dtometa.core.errors import LiteralConversionError

if TYPE_CHECKING:
    from dtometa.metadata.record import PropertyMetadata


@dataclass(frozen=True)
class Primitive:
    """A built-in scalar type named directly (``String``, ``Number``...)."""

    name: str


@dataclass(frozen=True)
class Reference:
    """A type referenced by name."""

    name: str


@dataclass(frozen=True)
class ArrayOf:
    """An array whose items are described by ``item``."""

    item: TypeDescriptor


@dataclass(frozen=True)
class ObjectLiteral:
    """An inline object schema.

    Attributes:
        properties (Mapping[str, PropertyMetadata]): Member name to member record,
            in declaration order.
    """

    properties: Mapping[str, PropertyMetadata]


class Thunk:
    """A lazily evaluated type descriptor.

    The factory runs at most once; its result is cached. Two thunks, or a thunk
    and a plain descriptor, compare equal when their evaluated descriptors do.
    """

    __slots__ = ("_factory", "_value", "_evaluated")

    def __init__(self, factory: Callable[[], TypeDescriptor]) -> None:
        self._factory = factory
        self._value: TypeDescriptor | None = None
        self._evaluated: bool = False

    @classmethod
    def of(cls, descriptor: TypeDescriptor) -> Thunk:
        """Wrap an already built descriptor."""
        return cls(lambda: descriptor)

    @property
    def evaluated(self) -> bool:
        """Whether the factory has already run."""
        return self._evaluated

    def evaluate(self) -> TypeDescriptor:
        """Run the factory (once) and return the wrapped descriptor."""
        if not self._evaluated:
            self._value = self._factory()
            self._evaluated = True
        return self._value  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Thunk):
            return evaluate_descriptor(self) == evaluate_descriptor(other)
        if isinstance(other, (Primitive, Reference, ArrayOf, ObjectLiteral)):
            return evaluate_descriptor(self) == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._evaluated:
            return f"Thunk({self._value!r})"
        return "Thunk(<pending>)"


TypeDescriptor: TypeAlias = Primitive | Reference | ArrayOf | ObjectLiteral | Thunk

# Scalars and (nested) sequences of scalars.
LiteralValue: TypeAlias = "str | int | float | bool | None | tuple[LiteralValue, ...]"


def evaluate_descriptor(descriptor: TypeDescriptor) -> TypeDescriptor:
    """Follow thunks until a concrete descriptor is reached."""
    while isinstance(descriptor, Thunk):
        descriptor = descriptor.evaluate()
    return descriptor


def reference_from_name(name: str) -> TypeDescriptor:
    """Build a descriptor from a canonical reference name.

    Array references are spelled ``[Item]`` (possibly nested) and become
    `ArrayOf` descriptors; any other name becomes a `Reference`.
    """
    if len(name) > 2 and name.startswith("[") and name.endswith("]"):
        return ArrayOf(reference_from_name(name[1:-1]))
    return Reference(name)


def to_literal(value: Any) -> LiteralValue:
    """Convert an arbitrary nested scalar/sequence value into a `LiteralValue`.

    Raises:
        LiteralConversionError: If ``value`` (or a nested item) is neither a
            scalar nor a sequence.
    """
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return tuple(to_literal(item) for item in value)
    raise LiteralConversionError(f"Cannot convert {type(value).__name__} to a literal: {value!r}")
