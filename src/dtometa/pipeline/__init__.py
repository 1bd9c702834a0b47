# topmark:header:start
#
#   project      : DtoMeta
#   file         : __init__.py
#   file_relpath : src/dtometa/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-property resolution pipeline and class scanner.

`scan_class` walks the properties of a `ClassDecl`; `assemble_property` runs the
ordered `PROPERTY_PIPELINE` over one property and freezes its record.
"""
