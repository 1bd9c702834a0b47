# topmark:header:start
#
#   project      : DtoMeta
#   file         : __init__.py
#   file_relpath : src/dtometa/oracle/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Collaborators consumed by the engine: type oracle, path normalizer, docs, annotations."""

from __future__ import annotations

from dtometa.oracle.annotations import arguments, first_matching
from dtometa.oracle.docs import extract_comment_and_examples
from dtometa.oracle.paths import normalize_import_path
from dtometa.oracle.protocols import DocExtractor, ImportPathNormalizer, TypeHandle, TypeOracle

__all__ = [
    "DocExtractor",
    "ImportPathNormalizer",
    "TypeHandle",
    "TypeOracle",
    "arguments",
    "extract_comment_and_examples",
    "first_matching",
    "normalize_import_path",
]
