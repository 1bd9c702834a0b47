# topmark:header:start
#
#   project      : DtoMeta
#   file         : annotations.py
#   file_relpath : src/dtometa/oracle/annotations.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Annotation reader helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable

    from dtometa.model.nodes import Annotation


def first_matching(names: Collection[str], annotations: Iterable[Annotation]) -> Annotation | None:
    """Return the first annotation whose name is one of ``names``."""
    for annotation in annotations:
        if annotation.name in names:
            return annotation
    return None


def arguments(annotation: Annotation) -> tuple[Any, ...]:
    """Return the positional arguments of ``annotation``, in order."""
    return annotation.arguments
