# topmark:header:start
#
#   project      : DtoMeta
#   file         : __init__.py
#   file_relpath : src/dtometa/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DtoMeta package.

DtoMeta synthesizes per-property schema metadata for data-transfer classes. It
resolves each declared property (type, presence, initializer, explicit
annotations, documentation) into a structured metadata record and aggregates the
records into a per-class map that API schema generators consume.
"""

from __future__ import annotations
