# topmark:header:start
#
#   project      : DtoMeta
#   file         : test_docs.py
#   file_relpath : tests/oracle/test_docs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the comment-based documentation extractor."""

from __future__ import annotations

from typing import Any

from dtometa.model.nodes import PropertyDecl
from dtometa.oracle.docs import extract_comment_and_examples, parse_example, split_comment
from tests.conftest import parametrize


@parametrize(
    "text, expected",
    [
        ('"Felix"', "Felix"),
        ("42", 42),
        ("1.5", 1.5),
        ("True", True),
        ('["a", "b"]', ["a", "b"]),
        ("Felix", "Felix"),
        ("  spaced  ", "spaced"),
        ('{"a": 1}', '{"a": 1}'),
    ],
)
def test_parse_example(text: str, expected: Any) -> None:
    assert parse_example(text) == expected


def test_split_comment() -> None:
    comment = """The cat's display name.

    Shown in listings.
    @example "Felix"
    Example: "Tom"
    @example
    """

    description, examples = split_comment(comment)

    assert description == "The cat's display name.\nShown in listings."
    assert examples == ["Felix", "Tom"]


@parametrize("comment", [None, "", "   \n  "])
def test_split_empty_comment(comment: str | None) -> None:
    assert split_comment(comment) == ("", [])


def test_extractor_reads_property_comment() -> None:
    prop = PropertyDecl(name="age", comment="Age in years.\n@example 3\n@example 4")

    description, examples = extract_comment_and_examples(prop, source=None, oracle=None)  # type: ignore[arg-type]

    assert description == "Age in years."
    assert list(examples) == [3, 4]
