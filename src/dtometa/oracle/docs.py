# topmark:header:start
#
#   project      : DtoMeta
#   file         : docs.py
#   file_relpath : src/dtometa/oracle/docs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Default documentation extractor working on property comments.

A property comment is free text. Lines starting with an ``@example`` tag or an
``Example:`` label carry one example each; all other non-empty lines form the
description. Example text is parsed as a Python literal when possible, so
``@example 42`` yields the number ``42`` and ``@example ["a", "b"]`` a list;
anything else is kept as the raw string::

    The cat's display name.
    @example "Felix"
    @example "Tom"
"""

from __future__ import annotations

import ast
import re
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from dtometa.model.nodes import PropertyDecl
    from dtometa.oracle.protocols import TypeOracle

_EXAMPLE_RE: Final[re.Pattern[str]] = re.compile(r"^(?:@example\b|example:)\s*(?P<body>.*)$", re.I)


def parse_example(text: str) -> Any:
    """Parse one example body into a value.

    Literal scalars and (nested) lists or tuples of scalars are evaluated;
    anything else, including mappings, is returned as the stripped text.
    """
    body: str = text.strip()
    try:
        value: Any = ast.literal_eval(body)
    except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError):
        return body
    if _is_literal_shape(value):
        return value
    return body


def _is_literal_shape(value: Any) -> bool:
    if value is None or isinstance(value, (str, bool, int, float)):
        return True
    if isinstance(value, (list, tuple)):
        return all(_is_literal_shape(item) for item in value)
    return False


def split_comment(comment: str | None) -> tuple[str, list[Any]]:
    """Split a comment into its description and example values."""
    if not comment:
        return "", []

    description: list[str] = []
    examples: list[Any] = []
    for raw in comment.splitlines():
        line: str = raw.strip()
        if not line:
            continue
        match: re.Match[str] | None = _EXAMPLE_RE.match(line)
        if match is not None:
            if match.group("body"):
                examples.append(parse_example(match.group("body")))
            continue
        description.append(line)
    return "\n".join(description), examples


def extract_comment_and_examples(
    prop: PropertyDecl,
    source: Any,
    oracle: TypeOracle,
) -> tuple[str, Sequence[Any]]:
    """`DocExtractor` reading the property's own comment text."""
    return split_comment(prop.comment)
