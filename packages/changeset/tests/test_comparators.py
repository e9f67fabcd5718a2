"""Tests for comparison operators and the comparator registry."""

from __future__ import annotations

import pytest

from ddd_changeset.comparators import (
    build_default_registry,
    EqualComparator,
    GreaterEqualComparator,
    GreaterThanComparator,
    LessEqualComparator,
    LessThanComparator,
    NotEqualComparator,
)
from ddd_changeset.evaluator import ComparatorRegistry
from ddd_changeset.exceptions import OperatorNotFoundError
from ddd_changeset.operators import ComparisonOperator

# -- ComparisonOperator ------------------------------------------------------


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("eq", ComparisonOperator.EQ),
        ("==", ComparisonOperator.EQ),
        ("neq", ComparisonOperator.NEQ),
        ("!=", ComparisonOperator.NEQ),
        ("gt", ComparisonOperator.GT),
        (">", ComparisonOperator.GT),
        ("gte", ComparisonOperator.GTE),
        (">=", ComparisonOperator.GTE),
        ("lt", ComparisonOperator.LT),
        ("<", ComparisonOperator.LT),
        ("lte", ComparisonOperator.LTE),
        ("<=", ComparisonOperator.LTE),
        (ComparisonOperator.GT, ComparisonOperator.GT),
    ],
)
def test_parse(name, expected):
    assert ComparisonOperator.parse(name) is expected


def test_parse_unknown_suggests():
    with pytest.raises(OperatorNotFoundError) as exc_info:
        ComparisonOperator.parse("gtt")
    assert "gt" in exc_info.value.suggestions


def test_names_cover_symbols():
    names = set(ComparisonOperator.names())
    assert {"eq", "neq", "gt", "gte", "lt", "lte"} <= names
    assert {"==", "!=", ">", ">=", "<", "<="} <= names
    assert len(names) == 12


# -- Comparators -------------------------------------------------------------


@pytest.mark.parametrize(
    ("comparator", "a", "b", "expected"),
    [
        (EqualComparator(), 3, 3, True),
        (EqualComparator(), 3, 4, False),
        (NotEqualComparator(), 3, 4, True),
        (NotEqualComparator(), 3, 3, False),
        (GreaterThanComparator(), 19, 18, True),
        (GreaterThanComparator(), 18, 18, False),
        (GreaterEqualComparator(), 18, 18, True),
        (GreaterEqualComparator(), 17, 18, False),
        (LessThanComparator(), 17, 18, True),
        (LessThanComparator(), 18, 18, False),
        (LessEqualComparator(), 18, 18, True),
        (LessEqualComparator(), 19, 18, False),
    ],
)
def test_comparator(comparator, a, b, expected):
    assert comparator.compare(a, b) is expected


# -- ComparatorRegistry ------------------------------------------------------


def test_default_registry_supports_all(registry):
    assert registry.supported_operators == set(ComparisonOperator)


def test_default_registry_is_fresh(registry):
    registry.unregister("gt")
    assert not registry.has("gt")
    assert build_default_registry().has("gt")


def test_registry_compare_by_symbol(registry):
    assert registry.compare(">=", 18, 18)
    assert not registry.compare("<", 18, 18)


def test_registry_get_unknown_returns_none(registry):
    assert registry.get("foo") is None
    assert not registry.has("foo")


def test_registry_resolve_unregistered():
    registry = ComparatorRegistry()
    registry.register(EqualComparator())
    with pytest.raises(OperatorNotFoundError) as exc_info:
        registry.resolve(ComparisonOperator.GT)
    assert exc_info.value.operator == "gt"
    assert sorted(exc_info.value.valid_operators) == ["==", "eq"]
