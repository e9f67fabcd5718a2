"""Comparison operators accepted by the length validator, with their symbols."""

from __future__ import annotations

from enum import Enum

from .exceptions import OperatorNotFoundError


class ComparisonOperator(str, Enum):
    """Comparison operators understood by the length validator."""

    EQ = "eq"
    NEQ = "neq"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"

    @classmethod
    def symbols(cls) -> dict[str, ComparisonOperator]:
        """Symbolic aliases accepted in place of the operator names."""
        return dict(_SYMBOLS)

    @classmethod
    def names(cls) -> list[str]:
        """Every spelling ``parse`` accepts."""
        return [op.value for op in cls] + list(_SYMBOLS)

    @classmethod
    def parse(cls, name: str | ComparisonOperator) -> ComparisonOperator:
        """
        Resolve an operator name or symbol.

        Raises:
            OperatorNotFoundError: If *name* is neither a known operator
                name nor one of its symbols.
        """
        if isinstance(name, ComparisonOperator):
            return name
        if name in _SYMBOLS:
            return _SYMBOLS[name]
        try:
            return cls(name)
        except ValueError:
            raise OperatorNotFoundError(str(name), cls.names()) from None


_SYMBOLS: dict[str, ComparisonOperator] = {
    "==": ComparisonOperator.EQ,
    "!=": ComparisonOperator.NEQ,
    ">": ComparisonOperator.GT,
    ">=": ComparisonOperator.GTE,
    "<": ComparisonOperator.LT,
    "<=": ComparisonOperator.LTE,
}
