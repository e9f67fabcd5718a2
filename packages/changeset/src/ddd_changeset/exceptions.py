"""
Changeset exception hierarchy.

Validation failures are never raised: they are recorded on the changeset
as :class:`~ddd_changeset.errors.FieldError` records.  The exceptions below
signal defects in how a validator chain is put together, plus the opt-in
``Changeset.raise_if_invalid()`` escape hatch.

All exceptions inherit from ``ChangesetError`` and provide ``to_dict()``
for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .errors import FieldError


class ChangesetError(Exception):
    """Base exception for all changeset errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ConfigurationError(ChangesetError):
    """A validator chain is defined incorrectly."""


class OperatorNotFoundError(ConfigurationError):
    """
    Unknown comparison operator passed to the length validator.

    Provides fuzzy-matched suggestions for likely intended operators.
    """

    def __init__(self, operator: str, valid_operators: list[str]) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.suggestions = get_close_matches(operator, valid_operators, n=3, cutoff=0.6)

        message = f"No comparison for operator '{operator}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid operators: {', '.join(sorted(valid_operators))}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OPERATOR_NOT_FOUND",
            "operator": self.operator,
            "suggestions": self.suggestions,
            "valid_operators": sorted(self.valid_operators),
        }


class InvalidValidatorError(ConfigurationError):
    """A validator returned something other than a changeset."""

    def __init__(self, validator: Any, result: Any) -> None:
        self.validator = validator
        self.result_type = type(result).__name__
        name = getattr(validator, "__qualname__", None) or repr(validator)
        self.validator_name = name
        super().__init__(
            f"Validator {name} must return a Changeset, got {self.result_type}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_VALIDATOR",
            "validator": self.validator_name,
            "result_type": self.result_type,
        }


class ChangesetValidationError(ChangesetError):
    """
    Raised by ``Changeset.raise_if_invalid()``.

    Carries structured errors: ``{field: [FieldError, ...]}``.
    """

    def __init__(self, errors: dict[Any, list[FieldError]]) -> None:
        self.errors = errors
        fields = ", ".join(str(f) for f in errors)
        super().__init__(f"Changeset is invalid: {fields}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "CHANGESET_INVALID",
            "errors": {
                str(field): [error.to_dict() for error in field_errors]
                for field, field_errors in self.errors.items()
            },
        }


class InvalidThresholdError(ConfigurationError):
    """A length threshold has no numeric reading."""

    def __init__(self, operator: Any, threshold: Any) -> None:
        self.operator = operator
        self.threshold = threshold
        super().__init__(
            f"Threshold for operator '{operator}' must be numeric, got {threshold!r}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_THRESHOLD",
            "operator": str(self.operator),
            "threshold": repr(self.threshold),
        }
