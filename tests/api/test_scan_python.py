# topmark:header:start
#
#   project      : DtoMeta
#   file         : test_scan_python.py
#   file_relpath : tests/api/test_scan_python.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end tests: scan Python classes through the public API."""

from __future__ import annotations

import datetime
import types
from typing import TYPE_CHECKING

import pytest

from dtometa.api import module_classes, resolve_config, scan_module, scan_python_class
from dtometa.config.model import Config
from dtometa.core.errors import ConfigError
from dtometa.metadata.keys import MetaKey
from dtometa.metadata.serializers import to_data
from dtometa.metadata.types import ArrayOf, ObjectLiteral, Reference, Thunk
from tests import models
from tests.conftest import mark_integration

if TYPE_CHECKING:
    from dtometa.pipeline.scanner import ScanResult

COMMENTS_ON = {"plugin": {"introspect_comments": True}}


@mark_integration
def test_cat() -> None:
    result: ScanResult = scan_python_class(models.Cat)

    assert result.class_name == "Cat"
    assert to_data(result.metadata) == {
        "name": {"required": False, "type": "String"},
        "age": {"required": True, "type": "Number", "default": 3},
        "roles": {"required": True, "enum": "Role", "isArray": True},
    }
    assert result.diagnostics == ()


@mark_integration
def test_type_is_lazy() -> None:
    record = scan_python_class(models.Cat).metadata["age"]

    assert isinstance(record[MetaKey.TYPE], Thunk)
    assert record[MetaKey.TYPE] == Reference("Number")


@mark_integration
def test_explicit_properties() -> None:
    metadata = scan_python_class(models.Explicit).metadata

    assert metadata["owner"][MetaKey.TYPE] == Reference("String")
    assert dict(metadata["nickname"]) == {
        "required": True,
        "description": "Alias",
        "type": Reference("String"),
    }


@mark_integration
def test_nullable_properties() -> None:
    data = to_data(scan_python_class(models.Nullable).metadata)

    assert data["owner"] == {"required": True, "type": "Owner", "nullable": True}
    assert data["maybe"] == {"required": True, "type": "Number", "nullable": True}
    assert data["either"] == {"required": True}


@mark_integration
def test_enum_properties() -> None:
    data = to_data(scan_python_class(models.Enums).metadata)

    assert data["roles"] == {"required": True, "enum": "Role", "isArray": True}
    assert data["tags"] == {"required": False, "enum": "Role", "isArray": True}
    assert data["status"] == {"required": True, "default": 1, "enum": "Status"}
    assert data["primary"] == {"required": True, "enum": "Role.ADMIN"}
    assert data["either"] == {"required": True, "enum": "Role"}
    assert data["maybe"] == {"required": True, "nullable": True, "enum": "Role"}
    assert data["pair"] == {"required": True, "enum": "Role", "isArray": True}


@mark_integration
def test_annotated_enum_elements() -> None:
    data = to_data(scan_python_class(models.AnnotatedEnums).metadata)

    assert data["roles"] == data["plain"] == {"required": True, "enum": "Role", "isArray": True}
    assert data["maybe"] == {"required": True, "nullable": True, "enum": "Role"}


@mark_integration
def test_field_named_after_its_type() -> None:
    metadata = scan_python_class(models.Event).metadata

    assert metadata["date"][MetaKey.TYPE] == Reference("Date")
    assert metadata["date"][MetaKey.DEFAULT] == datetime.date(2020, 1, 1)
    assert to_data(metadata)["when"] == {"required": True, "type": "Date"}
    assert scan_python_class(models.Event).diagnostics == ()


@mark_integration
def test_typed_dicts_become_object_literals() -> None:
    metadata = scan_python_class(models.Shipment).metadata
    address = metadata["address"][MetaKey.TYPE]

    assert isinstance(address.evaluate(), ObjectLiteral)
    assert to_data(metadata) == {
        "address": {
            "required": True,
            "type": {
                "street": {"required": True, "type": "String"},
                "zip": {"required": False, "type": "Number"},
            },
        },
        "tree": {
            "required": True,
            "type": {
                "label": {"required": True, "type": "String"},
                "child": {"required": False, "type": "Object"},
            },
        },
    }


@mark_integration
def test_typed_dict_scanned_as_class() -> None:
    data = to_data(scan_python_class(models.Address).metadata)

    assert data == {
        "street": {"required": True, "type": "String"},
        "zip": {"required": False, "type": "Number"},
    }


@mark_integration
def test_validation_bounds() -> None:
    data = to_data(scan_python_class(models.Bounded).metadata)

    assert data["name"] == {"required": True, "type": "String", "minLength": 1, "maxLength": 20}
    assert data["score"] == {"required": True, "type": "Number", "minimum": 0, "maximum": 10}


@mark_integration
def test_validation_bounds_disabled() -> None:
    data = to_data(
        scan_python_class(models.Bounded, config={"plugin": {"class_validator_shim": False}}).metadata
    )

    assert data["score"] == {"required": True, "type": "Number"}


@mark_integration
def test_hidden_and_static_members_are_skipped() -> None:
    assert list(scan_python_class(models.Hidden).metadata) == ["visible"]


@mark_integration
def test_dataclass() -> None:
    data = to_data(scan_python_class(models.Pet).metadata)

    assert data == {
        "name": {"required": True, "type": "String"},
        "born": {"required": True, "type": "Date"},
        "weight": {"required": True, "type": "Number", "default": 1.5},
        "toys": {"required": True, "type": ["String"]},
        "owner": {"required": True, "type": "Owner", "nullable": True, "default": None},
    }


@mark_integration
def test_documentation_is_opt_in() -> None:
    assert MetaKey.DESCRIPTION not in scan_python_class(models.Documented).metadata["name"]


@mark_integration
def test_documentation() -> None:
    data = to_data(scan_python_class(models.Documented, config=COMMENTS_ON).metadata)

    assert data["name"] == {
        "required": True,
        "type": "String",
        "description": "The display name.",
        "example": "Felix",
    }
    assert data["age"]["examples"] == [3, 4]
    assert data["plain"] == {"required": True, "type": "String", "description": "No examples here."}
    assert data["bare"] == {"required": True, "type": "String"}


@mark_integration
def test_documentation_key() -> None:
    config = {"plugin": {"introspect_comments": True, "dto_key_of_comment": "title"}}
    record = scan_python_class(models.Documented, config=config).metadata["plain"]

    assert record["title"] == "No examples here."
    assert MetaKey.DESCRIPTION not in record


@mark_integration
def test_forward_references() -> None:
    metadata = scan_python_class(models.Forward).metadata

    assert metadata["buddy"][MetaKey.TYPE] == Reference("Later")
    assert metadata["tags"][MetaKey.TYPE] == ArrayOf(Reference("Later"))


@mark_integration
def test_rescanning_is_idempotent() -> None:
    assert scan_python_class(models.Enums).metadata == scan_python_class(models.Enums).metadata


def test_resolve_config() -> None:
    frozen = Config(introspect_comments=True)

    assert resolve_config(None) == Config()
    assert resolve_config(frozen) is frozen
    assert resolve_config({"plugin": {"max_literal_depth": 2}}).max_literal_depth == 2


def test_resolve_config_rejects_invalid_depth() -> None:
    with pytest.raises(ConfigError):
        resolve_config({"plugin": {"max_literal_depth": 0}})


def test_resolve_config_reports_unknown_keys() -> None:
    config: Config = resolve_config({"plugin": {"bogus": 1}})

    assert any("bogus" in d.message for d in config.diagnostics)


def test_scan_module() -> None:
    results = scan_module(models, class_names=["Owner", "Cat"])

    assert [r.class_name for r in results] == ["Owner", "Cat"]
    assert dict(results[0].metadata["name"]) == {"required": True, "type": Reference("String")}


def test_scan_module_unknown_class() -> None:
    with pytest.raises(LookupError, match="NoSuchClass"):
        scan_module(models, class_names=["NoSuchClass"])


def test_module_classes_skips_imported_names() -> None:
    module = types.ModuleType("fake_models")
    exec("from tests.models import Cat\nclass Local:\n    x: int\n", module.__dict__)

    assert [c.__name__ for c in module_classes(module)] == ["Local"]
