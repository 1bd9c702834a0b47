# topmark:header:start
#
#   project      : DtoMeta
#   file         : strategies_dtometa.py
#   file_relpath : tests/strategies_dtometa.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hypothesis strategies for property declarations and explicit metadata.

Declarations carry `FakeType` handles from `tests.pipeline.conftest`, so they
drive the resolution engine through `FakeOracle` without the Python frontend.
Every drawn declaration gives each step something to contribute: a type, an
optional initializer and validation annotations.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

from dtometa.metadata.keys import MetaKey
from dtometa.model.nodes import Annotation, ClassDecl, Expression, NullType, PropertyDecl, UnionType
from tests.pipeline.conftest import NUMBER, STRING, FakeType, array_of, enum_type, named, prop

Draw = Callable[[st.SearchStrategy[Any]], Any]

META_KEYS: tuple[str, ...] = tuple(
    value for name, value in vars(MetaKey).items() if name.isupper() and isinstance(value, str)
)

ROLE: FakeType = enum_type("Role")

FAKE_TYPES: tuple[FakeType, ...] = (
    STRING,
    NUMBER,
    ROLE,
    array_of(STRING, reference="[String]"),
    array_of(ROLE),
    array_of(None),
)

BOUND_NAMES: tuple[str, ...] = ("Min", "Max", "MinLength", "MaxLength")

PROPERTY_NAMES: st.SearchStrategy[str] = st.from_regex(r"[a-z][a-z0-9_]{0,11}", fullmatch=True)

# Values an explicit annotation may carry.
EXPLICIT_VALUES: st.SearchStrategy[Any] = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-1000, max_value=1000),
    st.text(max_size=12),
)


@st.composite
def s_explicit_pairs(draw: Draw) -> list[tuple[str, Any]]:
    """Explicit ``(key, value)`` pairs over every `MetaKey`, repeats allowed.

    ``example`` and ``examples`` are mutually exclusive, so one of them is left out.
    """
    excluded: str = draw(st.sampled_from((MetaKey.EXAMPLE, MetaKey.EXAMPLES)))
    keys: tuple[str, ...] = tuple(key for key in META_KEYS if key != excluded)
    return draw(
        st.lists(st.tuples(st.sampled_from(keys), EXPLICIT_VALUES), max_size=2 * len(keys))
    )


def expected_explicit(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    """The explicit values a record must keep, in first-seen order."""
    first: dict[str, Any] = {}
    for key, value in pairs:
        first.setdefault(key, value)
    return first


@st.composite
def s_annotations(draw: Draw) -> tuple[Annotation, ...]:
    names: list[str] = draw(st.lists(st.sampled_from(BOUND_NAMES), unique=True, max_size=4))
    return tuple(
        Annotation(name, (draw(st.integers(min_value=0, max_value=100)),)) for name in names
    )


@st.composite
def s_property_decl(
    draw: Draw,
    explicit: st.SearchStrategy[list[tuple[str, Any]]] | None = None,
) -> PropertyDecl:
    """A named property over a fake type, possibly nullable or optional."""
    handle: FakeType = draw(st.sampled_from(FAKE_TYPES))
    nullable: bool = draw(st.booleans())
    initializer: Expression | None = draw(
        st.one_of(st.none(), st.builds(Expression, st.integers(min_value=0, max_value=9)))
    )
    pairs: list[tuple[str, Any]] = draw(explicit) if explicit is not None else []
    return prop(
        draw(PROPERTY_NAMES),
        UnionType((named(handle), NullType())) if nullable else handle,
        optional=draw(st.booleans()),
        initializer=initializer,
        annotations=draw(s_annotations()),
        explicit=tuple(pairs),
    )


@st.composite
def s_class_decl(draw: Draw) -> ClassDecl:
    """A class with uniquely named properties, some carrying explicit metadata."""
    props: list[PropertyDecl] = draw(
        st.lists(
            s_property_decl(explicit=s_explicit_pairs()),
            max_size=6,
            unique_by=lambda p: p.name,
        )
    )
    return ClassDecl(name="Generated", properties=tuple(props), host_file="app.models")
