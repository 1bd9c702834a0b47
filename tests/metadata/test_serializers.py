# topmark:header:start
#
#   project      : DtoMeta
#   file         : test_serializers.py
#   file_relpath : tests/metadata/test_serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the metadata renderers."""

from __future__ import annotations

import enum
import json

import tomlkit

from dtometa.metadata.keys import MetaKey
from dtometa.metadata.record import ClassMetadata, PropertyMetadata
from dtometa.metadata.serializers import to_data, to_json, to_text, to_toml_text
from dtometa.metadata.types import ArrayOf, ObjectLiteral, Primitive, Reference, Thunk


class Color(enum.Enum):
    RED = "red"


def sample() -> ClassMetadata:
    return ClassMetadata(
        {
            "name": PropertyMetadata(
                {MetaKey.REQUIRED: False, MetaKey.TYPE: Thunk(lambda: Reference("String"))}
            ),
            "tags": PropertyMetadata(
                {MetaKey.REQUIRED: True, MetaKey.TYPE: ArrayOf(Primitive("String")), MetaKey.EXAMPLE: ("a", "b")}
            ),
            "owner": PropertyMetadata({MetaKey.REQUIRED: True, MetaKey.DEFAULT: None}),
        }
    )


def test_to_data() -> None:
    assert to_data(sample()) == {
        "name": {"required": False, "type": "String"},
        "tags": {"required": True, "type": ["String"], "example": ["a", "b"]},
        "owner": {"required": True, "default": None},
    }


def test_to_data_special_values() -> None:
    literal = ObjectLiteral({"x": PropertyMetadata({MetaKey.REQUIRED: True})})

    assert to_data(literal) == {"x": {"required": True}}
    assert to_data(Color.RED) == "red"
    assert to_data(Color) == "Color"
    assert to_data(lambda: Reference("Cat")) == "Cat"
    assert to_data(frozenset()) == []


def test_to_json_round_trips_through_json() -> None:
    assert json.loads(to_json(sample())) == to_data(sample())


def test_to_toml_omits_none() -> None:
    parsed = tomlkit.parse(to_toml_text(sample())).unwrap()

    assert parsed["name"] == {"required": False, "type": "String"}
    assert parsed["owner"] == {"required": True}


def test_to_text() -> None:
    text: str = to_text("Cat", sample())

    assert text.splitlines()[:4] == [
        "Cat:",
        "  name:",
        "    required: false",
        '    type: "String"',
    ]
    assert '    example: ["a", "b"]' in text
