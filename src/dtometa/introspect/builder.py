# topmark:header:start
#
#   project      : DtoMeta
#   file         : builder.py
#   file_relpath : src/dtometa/introspect/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build a `ClassDecl` from a Python class.

Only annotations declared on the class itself are considered (inherited ones are
described by the base class). For every annotation:

- ``ClassVar[T]`` marks a static member;
- ``NotRequired[T]`` is the presence marker (``optional``);
- ``Annotated[T, ...]`` contributes markers: `ApiProperty` keys become explicit
  metadata, the other markers become annotations;
- ``T | None`` and ``Union[...]`` become `UnionType` nodes with a `NullType`
  variant for ``None``;
- a ``TypedDict`` becomes an inline `ObjectLiteralType`;
- anything else is kept as a `NamedType` for the oracle.

The initializer is the class attribute value, or the default of a dataclass
field. Attribute docstrings become the property comment.
"""

from __future__ import annotations

import dataclasses
import inspect
import sys
import types
import typing
from typing import TYPE_CHECKING, Any, Final

from dtometa.config.logging import get_logger
from dtometa.introspect.docstrings import attribute_docstrings
from dtometa.introspect.markers import ApiProperty, Marker
from dtometa.model.nodes import (
    ClassDecl,
    Expression,
    NamedType,
    NullType,
    ObjectLiteralType,
    PropertyDecl,
    UnionType,
)

if TYPE_CHECKING:
    from dtometa.config.logging import DtoMetaLogger
    from dtometa.model.nodes import Annotation, Initializer, TypeNode

logger: DtoMetaLogger = get_logger(__name__)

_UNION_ORIGINS: Final[tuple[Any, ...]] = (typing.Union, types.UnionType)
_NO_VALUE: Final[object] = object()


def evaluate_annotation(cls: type, name: str, annotation: Any) -> Any:
    """Resolve a single string (or ``ForwardRef``) annotation of ``cls``.

    Names are looked up in the module of ``cls`` first, then in the class
    namespace, the same order `typing.get_type_hints` uses. ``TypedDict``
    classes store their annotations as ``ForwardRef`` objects. Annotations that
    cannot be resolved (forward references to names defined later) are returned
    as the original string.
    """
    if isinstance(annotation, typing.ForwardRef):
        annotation = annotation.__forward_arg__
    if not isinstance(annotation, str):
        return annotation
    module = sys.modules.get(cls.__module__)
    class_ns: dict[str, Any] = dict(vars(cls))
    class_ns.setdefault(cls.__name__, cls)
    module_ns: dict[str, Any] = dict(vars(module)) if module is not None else {}
    holder: type = type(
        "_AnnotationHolder", (), {"__annotations__": {name: annotation}, "__module__": cls.__module__}
    )
    try:
        return typing.get_type_hints(holder, class_ns, module_ns, include_extras=True)[name]
    except (NameError, TypeError, SyntaxError) as e:
        logger.debug("%s.%s: keeping unevaluated annotation %r (%s)", cls.__qualname__, name, annotation, e)
        return annotation


def class_annotations(cls: type) -> dict[str, Any]:
    """Return the resolved annotations declared on ``cls`` itself.

    `typing.get_type_hints` resolves the whole class at once; when one name
    cannot be resolved each annotation is resolved on its own.
    """
    own: dict[str, Any] = inspect.get_annotations(cls)
    try:
        hints: dict[str, Any] = typing.get_type_hints(cls, include_extras=True)
    except (NameError, TypeError, SyntaxError) as e:
        logger.debug("%s: resolving annotations one by one (%s)", cls.__qualname__, e)
        return {name: evaluate_annotation(cls, name, raw) for name, raw in own.items()}
    return {name: hints.get(name, raw) for name, raw in own.items()}


def unwrap_qualifiers(hint: Any) -> tuple[Any, dict[str, Any]]:
    """Peel ``ClassVar``, ``NotRequired``/``Required`` and ``Annotated`` off ``hint``.

    Returns:
        tuple[Any, dict[str, Any]]: The bare hint and the collected flags
            (``static``, ``optional``, ``explicit``, ``annotations``).
    """
    flags: dict[str, Any] = {
        "static": False,
        "optional": False,
        "explicit": [],
        "annotations": [],
    }
    while True:
        origin: Any = typing.get_origin(hint)
        if hint is typing.ClassVar or origin is typing.ClassVar:
            flags["static"] = True
            args: tuple[Any, ...] = typing.get_args(hint)
            hint = args[0] if args else typing.Any
        elif origin is typing.NotRequired:
            flags["optional"] = True
            hint = typing.get_args(hint)[0]
        elif origin is typing.Required:
            hint = typing.get_args(hint)[0]
        elif origin is typing.Annotated:
            # get_args flattens nested Annotated into one metadata tuple.
            hint, *metadata = typing.get_args(hint)
            for item in metadata:
                if isinstance(item, type) and issubclass(item, Marker):
                    item = item()
                if isinstance(item, ApiProperty):
                    flags["explicit"].extend(item.explicit)
                elif isinstance(item, Marker):
                    flags["annotations"].append(item.annotation())
        else:
            return hint, flags


def type_node(hint: Any, expanding: frozenset[type] = frozenset()) -> TypeNode:
    """Convert a bare type hint into a type expression node.

    ``expanding`` holds the ``TypedDict`` classes being expanded; a class that
    refers back to one of them is kept as a `NamedType`.
    """
    if hint is None or hint is type(None):
        return NullType()
    if typing.get_origin(hint) in _UNION_ORIGINS:
        return UnionType(tuple(type_node(arg, expanding) for arg in typing.get_args(hint)))
    if typing.is_typeddict(hint) and hint not in expanding:
        return ObjectLiteralType(typed_dict_members(hint, expanding | {hint}))
    return NamedType(hint)


def typed_dict_members(
    td: type, expanding: frozenset[type] = frozenset()
) -> tuple[PropertyDecl, ...]:
    """Return the members of a ``TypedDict`` as property declarations."""
    optional_keys: frozenset[str] = getattr(td, "__optional_keys__", frozenset())
    members: list[PropertyDecl] = []
    try:
        hints: dict[str, Any] = typing.get_type_hints(td, include_extras=True)
    except NameError as e:
        logger.debug("%s: unresolved forward reference (%s)", td.__qualname__, e)
        hints = dict(td.__annotations__)
    for name, raw in hints.items():
        hint, flags = unwrap_qualifiers(raw)
        members.append(
            PropertyDecl(
                name=name,
                type=type_node(hint, expanding),
                optional=flags["optional"] or name in optional_keys,
                annotations=tuple(flags["annotations"]),
                explicit=tuple(flags["explicit"]),
            )
        )
    return tuple(members)


def _initializer(cls: type, name: str) -> Initializer | None:
    value: Any = cls.__dict__.get(name, _NO_VALUE)
    if isinstance(value, dataclasses.Field):
        if value.default is not dataclasses.MISSING:
            return Expression(value.default)
        return None
    if value is _NO_VALUE or inspect.isroutine(value) or isinstance(value, (property, classmethod, staticmethod)):
        return None
    return Expression(value)


def build_class_decl(cls: type, *, name: str | None = None) -> ClassDecl:
    """Describe ``cls`` as a `ClassDecl`.

    Args:
        cls (type): The class to describe.
        name (str | None): Override for the class name (``""`` for an anonymous class).

    Returns:
        ClassDecl: The declaration, hosted in the class's module.
    """
    annotations: dict[str, Any] = class_annotations(cls)
    docs: dict[str, str] = attribute_docstrings(cls) if annotations else {}

    properties: list[PropertyDecl] = []
    for attr, raw in annotations.items():
        hint, flags = unwrap_qualifiers(raw)
        prop = PropertyDecl(
            name=attr,
            type=type_node(hint),
            optional=flags["optional"],
            initializer=_initializer(cls, attr),
            annotations=tuple(flags["annotations"]),
            explicit=tuple(flags["explicit"]),
            is_static=flags["static"],
            comment=docs.get(attr),
        )
        logger.trace("%s.%s -> %r", cls.__qualname__, attr, prop)
        properties.append(prop)

    return ClassDecl(
        name=cls.__name__ if name is None else name,
        properties=tuple(properties),
        host_file=cls.__module__,
        source=cls,
    )
