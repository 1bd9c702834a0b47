# topmark:header:start
#
#   project      : DtoMeta
#   file         : __init__.py
#   file_relpath : src/dtometa/introspect/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Python frontend: describe Python classes for the resolution engine.

- `build_class_decl` turns a class into a `ClassDecl`;
- `PythonTypeOracle` answers type queries over Python type hints;
- the markers (`ApiProperty`, `ApiHideProperty`, `Min`, ...) are placed in
  ``typing.Annotated`` metadata.
"""

from __future__ import annotations

from dtometa.introspect.builder import build_class_decl
from dtometa.introspect.markers import (
    ApiHideProperty,
    ApiProperty,
    Marker,
    Max,
    MaxLength,
    Min,
    MinLength,
)
from dtometa.introspect.oracle import PythonTypeOracle

__all__ = [
    "ApiHideProperty",
    "ApiProperty",
    "Marker",
    "Max",
    "MaxLength",
    "Min",
    "MinLength",
    "PythonTypeOracle",
    "build_class_decl",
]
