# topmark:header:start
#
#   project      : DtoMeta
#   file         : test_record.py
#   file_relpath : tests/metadata/test_record.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for metadata records and their builders."""

from __future__ import annotations

import pytest

from dtometa.metadata.keys import MetaKey
from dtometa.metadata.record import (
    ClassMetadata,
    ClassMetadataBuilder,
    MutablePropertyMetadata,
    PropertyMetadata,
)


def test_explicit_values_are_seeded_and_win() -> None:
    """It should keep explicit values over later offers."""
    builder = MutablePropertyMetadata([(MetaKey.REQUIRED, False)])

    assert builder.is_explicit(MetaKey.REQUIRED)
    assert builder.offer(MetaKey.REQUIRED, True) is False
    assert builder.offer(MetaKey.TYPE, "String") is True
    assert not builder.is_explicit(MetaKey.TYPE)

    record: PropertyMetadata = builder.freeze()
    assert dict(record) == {MetaKey.REQUIRED: False, MetaKey.TYPE: "String"}


def test_first_write_wins_between_steps() -> None:
    builder = MutablePropertyMetadata()
    builder.offer_all([(MetaKey.DEFAULT, 1), (MetaKey.DEFAULT, 2)])

    assert builder.freeze()[MetaKey.DEFAULT] == 1


def test_none_is_a_value() -> None:
    """It should treat an offered None as present."""
    builder = MutablePropertyMetadata()
    builder.offer(MetaKey.DEFAULT, None)

    assert builder.has(MetaKey.DEFAULT)
    assert builder.offer(MetaKey.DEFAULT, 0) is False


def test_property_metadata_is_read_only() -> None:
    record = PropertyMetadata({MetaKey.REQUIRED: True})

    with pytest.raises(TypeError):
        record[MetaKey.REQUIRED] = False  # type: ignore[index]
    assert record == {MetaKey.REQUIRED: True}
    assert "PropertyMetadata" in repr(record)


def test_example_keys_are_exclusive() -> None:
    builder = MutablePropertyMetadata([(MetaKey.EXAMPLE, 1), (MetaKey.EXAMPLES, (1, 2))])

    with pytest.raises(ValueError):
        builder.freeze()


def test_class_builder_replaces_wholesale() -> None:
    """It should replace a record instead of merging keys."""
    builder = ClassMetadataBuilder()
    builder.put("name", PropertyMetadata({MetaKey.REQUIRED: True, MetaKey.TYPE: "String"}))
    builder.put("name", PropertyMetadata({MetaKey.REQUIRED: False}))

    metadata: ClassMetadata = builder.freeze()

    assert "name" in builder
    assert len(metadata) == 1
    assert metadata["name"] == {MetaKey.REQUIRED: False}


def test_class_builder_rejects_writes_after_freeze() -> None:
    builder = ClassMetadataBuilder()
    builder.freeze()

    with pytest.raises(RuntimeError):
        builder.put("late", PropertyMetadata())


def test_class_metadata_keeps_insertion_order() -> None:
    metadata = ClassMetadata([("b", PropertyMetadata()), ("a", PropertyMetadata())])

    assert list(metadata) == ["b", "a"]
