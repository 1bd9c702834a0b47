# topmark:header:start
#
#   project      : DtoMeta
#   file         : serializers.py
#   file_relpath : src/dtometa/metadata/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render metadata as plain data, JSON, TOML or text.

`to_data` evaluates lazy type descriptors and converts everything into plain
Python values:

- `Primitive` and `Reference` become their name;
- `ArrayOf` becomes a one-element list (``["String"]``);
- `ObjectLiteral` becomes a nested mapping of member records;
- tuples become lists, enum members their value, classes their qualified name.

Other callables are called and their result rendered; any remaining value is
rendered with ``repr``.
"""

from __future__ import annotations

import enum
import json
from collections.abc import Mapping
from typing import Any

from dtometa.config.io import to_toml
from dtometa.metadata.types import ArrayOf, ObjectLiteral, Primitive, Reference, Thunk


def to_data(value: Any) -> Any:
    """Convert metadata (records, maps, descriptors, literals) into plain data."""
    if isinstance(value, Thunk):
        return to_data(value.evaluate())
    if isinstance(value, (Primitive, Reference)):
        return value.name
    if isinstance(value, ArrayOf):
        return [to_data(value.item)]
    if isinstance(value, ObjectLiteral):
        return to_data(value.properties)
    if isinstance(value, enum.Enum):
        return value.value
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, Mapping):
        return {str(key): to_data(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_data(item) for item in value]
    if isinstance(value, type):
        return value.__qualname__
    if callable(value):
        return to_data(value())
    return repr(value)


def to_json(metadata: Mapping[str, Any], *, indent: int | None = 2) -> str:
    """Render ``metadata`` as JSON."""
    return json.dumps(to_data(metadata), indent=indent)


def to_toml_text(metadata: Mapping[str, Any]) -> str:
    """Render ``metadata`` as TOML. ``None`` values are omitted (TOML has no null)."""
    return to_toml(to_data(metadata))


def to_text(class_name: str, metadata: Mapping[str, Any]) -> str:
    """Render ``metadata`` as an indented, human-readable listing."""
    lines: list[str] = [f"{class_name}:"]
    for prop, record in to_data(metadata).items():
        lines.append(f"  {prop}:")
        for key, value in record.items():
            lines.append(f"    {key}: {json.dumps(value)}")
    return "\n".join(lines)
