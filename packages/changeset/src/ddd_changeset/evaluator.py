"""
Comparator strategy used by the length validator.

Provides the Comparator interface and a registry that maps
ComparisonOperator -> comparator instance.

New comparators are added by subclassing Comparator and registering
via ``register()``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from .exceptions import OperatorNotFoundError
from .operators import ComparisonOperator

logger = logging.getLogger("ddd_changeset.evaluator")


class Comparator(ABC):
    """
    Strategy interface for a binary numeric predicate.

    Each comparator is an isolated class with a single ``compare`` method.
    """

    @property
    @abstractmethod
    def name(self) -> ComparisonOperator:
        """The operator this strategy handles."""
        ...

    @abstractmethod
    def compare(self, actual: Any, threshold: Any) -> bool:
        """
        Compare a measured length against a threshold.

        Args:
            actual: The length measured from the field value.
            threshold: The value supplied in the validator options.

        Returns:
            True if the constraint is satisfied.
        """
        ...


class ComparatorRegistry:
    """
    Registry of Comparator instances keyed by ComparisonOperator.

    Usage::

        registry = ComparatorRegistry()
        registry.register(GreaterThanComparator())

        registry.compare(">", 19, 18)  # True
    """

    def __init__(self) -> None:
        self._comparators: dict[ComparisonOperator, Comparator] = {}

    # -- registration --------------------------------------------------------

    def register(self, comparator: Comparator) -> None:
        """Register a comparator strategy instance."""
        logger.debug("Registering comparator %s", comparator.name.value)
        self._comparators[comparator.name] = comparator

    def register_all(self, *comparators: Comparator) -> None:
        for comparator in comparators:
            self.register(comparator)

    def unregister(self, name: ComparisonOperator | str) -> None:
        """Remove a comparator from the registry."""
        self._comparators.pop(ComparisonOperator.parse(name), None)

    # -- look-up -------------------------------------------------------------

    def get(self, name: ComparisonOperator | str) -> Comparator | None:
        """Return the registered comparator or ``None``."""
        try:
            return self._comparators.get(ComparisonOperator.parse(name))
        except OperatorNotFoundError:
            return None

    def has(self, name: ComparisonOperator | str) -> bool:
        return self.get(name) is not None

    @property
    def supported_operators(self) -> set[ComparisonOperator]:
        return set(self._comparators.keys())

    def resolve(self, name: ComparisonOperator | str) -> Comparator:
        """
        Look up a comparator by name or symbol.

        Raises:
            OperatorNotFoundError: If *name* is unknown or not registered.
        """
        comparator = self._comparators.get(ComparisonOperator.parse(name))
        if comparator is None:
            valid = [op.value for op in self._comparators] + [
                symbol
                for symbol, op in ComparisonOperator.symbols().items()
                if op in self._comparators
            ]
            label = name.value if isinstance(name, ComparisonOperator) else name
            raise OperatorNotFoundError(str(label), valid)
        return comparator

    # -- evaluation shortcut -------------------------------------------------

    def compare(
        self,
        name: ComparisonOperator | str,
        actual: Any,
        threshold: Any,
    ) -> bool:
        return self.resolve(name).compare(actual, threshold)

