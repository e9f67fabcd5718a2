"""
Built-in comparators: eq, neq, gt, gte, lt, lte.

Usage::

    from ddd_changeset.comparators import build_default_registry

    registry = build_default_registry()
    registry.compare(">=", 18, 18)
"""

from __future__ import annotations

from typing import Any

from .evaluator import Comparator, ComparatorRegistry
from .operators import ComparisonOperator


class EqualComparator(Comparator):
    @property
    def name(self) -> ComparisonOperator:
        return ComparisonOperator.EQ

    def compare(self, actual: Any, threshold: Any) -> bool:
        return bool(actual == threshold)


class NotEqualComparator(Comparator):
    @property
    def name(self) -> ComparisonOperator:
        return ComparisonOperator.NEQ

    def compare(self, actual: Any, threshold: Any) -> bool:
        return bool(actual != threshold)


class GreaterThanComparator(Comparator):
    @property
    def name(self) -> ComparisonOperator:
        return ComparisonOperator.GT

    def compare(self, actual: Any, threshold: Any) -> bool:
        return bool(actual > threshold)


class GreaterEqualComparator(Comparator):
    @property
    def name(self) -> ComparisonOperator:
        return ComparisonOperator.GTE

    def compare(self, actual: Any, threshold: Any) -> bool:
        return bool(actual >= threshold)


class LessThanComparator(Comparator):
    @property
    def name(self) -> ComparisonOperator:
        return ComparisonOperator.LT

    def compare(self, actual: Any, threshold: Any) -> bool:
        return bool(actual < threshold)


class LessEqualComparator(Comparator):
    @property
    def name(self) -> ComparisonOperator:
        return ComparisonOperator.LTE

    def compare(self, actual: Any, threshold: Any) -> bool:
        return bool(actual <= threshold)


def build_default_registry() -> ComparatorRegistry:
    """
    Create a registry with all built-in comparators.

    Returns a fresh instance each call, so callers may register or
    unregister comparators without affecting other changesets.

    Example:
        >>> registry = build_default_registry()
        >>> registry.compare("gt", 19, 18)
        True
    """
    registry = ComparatorRegistry()
    registry.register_all(
        EqualComparator(),
        NotEqualComparator(),
        GreaterThanComparator(),
        GreaterEqualComparator(),
        LessThanComparator(),
        LessEqualComparator(),
    )
    return registry


__all__ = [
    "EqualComparator",
    "GreaterEqualComparator",
    "GreaterThanComparator",
    "LessEqualComparator",
    "LessThanComparator",
    "NotEqualComparator",
    "build_default_registry",
]
