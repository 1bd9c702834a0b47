# topmark:header:start
#
#   project      : DtoMeta
#   file         : test_explicit_property.py
#   file_relpath : tests/pipeline/test_explicit_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property tests for explicit precedence and repeatable scans.

Generated declarations assert that:
1) an explicit value wins for every metadata key, whatever the steps infer, and
2) scanning the same class declaration again gives equal metadata.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from dtometa.pipeline.scanner import scan_class
from tests.conftest import parametrize
from tests.pipeline.conftest import FakeOracle, resolve
from tests.strategies_dtometa import (
    EXPLICIT_VALUES,
    META_KEYS,
    expected_explicit,
    s_class_decl,
    s_explicit_pairs,
    s_property_decl,
)

if TYPE_CHECKING:
    from dtometa.metadata.record import PropertyMetadata
    from dtometa.model.nodes import ClassDecl, PropertyDecl
    from dtometa.pipeline.scanner import ScanResult


# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

PROPERTY_SETTINGS = settings(
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
    deadline=None,
    max_examples=50,
)


@PROPERTY_SETTINGS
@given(decl=s_property_decl(explicit=s_explicit_pairs()))
def test_explicit_values_win_and_come_first(decl: PropertyDecl) -> None:
    expected: dict[str, Any] = expected_explicit(list(decl.explicit))

    record: PropertyMetadata = resolve(decl)

    for key, value in expected.items():
        assert record[key] is value
    assert list(record)[: len(expected)] == list(expected)


@parametrize("key", META_KEYS)
@PROPERTY_SETTINGS
@given(decl=s_property_decl(), value=EXPLICIT_VALUES)
def test_explicit_value_wins_for_key(key: str, decl: PropertyDecl, value: Any) -> None:
    record: PropertyMetadata = resolve(dataclasses.replace(decl, explicit=((key, value),)))

    assert record[key] is value


@PROPERTY_SETTINGS
@given(decl=s_class_decl())
def test_rescanning_gives_equal_results(decl: ClassDecl) -> None:
    first: ScanResult = scan_class(decl, oracle=FakeOracle())
    second: ScanResult = scan_class(decl, oracle=FakeOracle())

    assert first.diagnostics == ()
    assert first.metadata == second.metadata
    assert list(first.metadata) == [p.name for p in decl.properties]


@PROPERTY_SETTINGS
@given(decl=s_class_decl(), runs=st.integers(min_value=2, max_value=4))
def test_shared_oracle_rescans_are_stable(decl: ClassDecl, runs: int) -> None:
    oracle = FakeOracle()
    results: list[ScanResult] = [scan_class(decl, oracle=oracle) for _ in range(runs)]

    assert all(result.metadata == results[0].metadata for result in results)
