# topmark:header:start
#
#   project      : DtoMeta
#   file         : test_enum_step.py
#   file_relpath : tests/pipeline/steps/test_enum_step.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `EnumStep` (``enum`` and ``isArray``)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dtometa.metadata.keys import MetaKey
from dtometa.metadata.types import Reference
from tests.conftest import mark_pipeline
from tests.pipeline.conftest import (
    NULL,
    STRING,
    FakeType,
    array_of,
    enum_type,
    prop,
    resolve,
)

if TYPE_CHECKING:
    from dtometa.metadata.record import PropertyMetadata

ROLE = enum_type("Role")


@mark_pipeline
def test_enum_type() -> None:
    record: PropertyMetadata = resolve(prop("role", ROLE))

    assert record[MetaKey.ENUM] == Reference("Role")
    assert MetaKey.IS_ARRAY not in record
    assert MetaKey.TYPE not in record


@mark_pipeline
def test_array_of_enum() -> None:
    """An array of enum ``E`` yields ``enum = E`` and ``isArray``."""
    record: PropertyMetadata = resolve(prop("roles", array_of(ROLE)))

    assert record[MetaKey.ENUM] == Reference("Role")
    assert record[MetaKey.IS_ARRAY] is True


@mark_pipeline
def test_array_of_enum_behind_auto_generated_union() -> None:
    """The optional wrapper is an auto-generated union; its last constituent is used."""
    record: PropertyMetadata = resolve(prop("roles", array_of(ROLE), optional=True))

    assert record[MetaKey.REQUIRED] is False
    assert record[MetaKey.ENUM] == Reference("Role")
    assert record[MetaKey.IS_ARRAY] is True


@mark_pipeline
def test_last_constituent_of_auto_generated_union_is_representative() -> None:
    other = enum_type("Other")
    union = FakeType("auto", kind="union", members=(other, ROLE), auto=True)

    record: PropertyMetadata = resolve(prop("role", union))

    assert record[MetaKey.ENUM] == Reference("Role")


@mark_pipeline
def test_array_with_unknown_element_stops() -> None:
    record: PropertyMetadata = resolve(prop("things", array_of(None)))

    assert MetaKey.ENUM not in record
    assert MetaKey.IS_ARRAY not in record


@mark_pipeline
def test_non_enum_contributes_nothing() -> None:
    record: PropertyMetadata = resolve(prop("name", STRING))

    assert MetaKey.ENUM not in record


@mark_pipeline
def test_enum_member_union_is_detected() -> None:
    """A union of enum members resolves to its enum through the second pass."""
    union = FakeType("Role.A | Role.B", kind="union", enum_owner=ROLE)

    record: PropertyMetadata = resolve(prop("role", union))

    assert record[MetaKey.ENUM] == Reference("Role")
    assert MetaKey.IS_ARRAY not in record


@mark_pipeline
def test_second_pass_unwraps_array_again() -> None:
    union = FakeType("Role[] | null", kind="union", members=(array_of(ROLE), NULL), enum_owner=array_of(ROLE))

    record: PropertyMetadata = resolve(prop("roles", union))

    assert record[MetaKey.ENUM] == Reference("Role")
    assert record[MetaKey.IS_ARRAY] is True


@mark_pipeline
def test_single_enum_member_is_named_directly() -> None:
    member = FakeType("Role.ADMIN", kind="member", enum_owner=ROLE)

    record: PropertyMetadata = resolve(prop("role", member))

    assert record[MetaKey.ENUM] == Reference("Role.ADMIN")


@mark_pipeline
def test_explicit_enum_wins() -> None:
    record: PropertyMetadata = resolve(
        prop("roles", array_of(ROLE), explicit=((MetaKey.ENUM, ["a", "b"]),))
    )

    assert record[MetaKey.ENUM] == ["a", "b"]
    assert MetaKey.IS_ARRAY not in record


@mark_pipeline
def test_explicit_is_array_is_kept() -> None:
    record: PropertyMetadata = resolve(
        prop("roles", array_of(ROLE), explicit=((MetaKey.IS_ARRAY, False),))
    )

    assert record[MetaKey.ENUM] == Reference("Role")
    assert record[MetaKey.IS_ARRAY] is False


@mark_pipeline
def test_enum_name_is_normalized_for_host() -> None:
    from dtometa.config.model import Config
    from dtometa.pipeline.assembler import assemble_property
    from dtometa.pipeline.context import ResolverServices
    from tests.pipeline.conftest import FakeOracle

    record = assemble_property(
        prop("role", enum_type("app.models.Role")),
        services=ResolverServices(oracle=FakeOracle()),
        config=Config(),
        host_file="app.models",
    )

    assert record[MetaKey.ENUM] == Reference("Role")
