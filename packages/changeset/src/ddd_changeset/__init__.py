"""ddd-changeset: track, validate and apply proposed changes to a record.

Pure in-memory and synchronous; error records are pydantic value objects.
"""

from __future__ import annotations

from .changeset import Changeset
from .comparators import build_default_registry
from .config import ChangesetConfig
from .errors import FieldError
from .evaluator import Comparator, ComparatorRegistry
from .exceptions import (
    ChangesetError,
    ChangesetValidationError,
    ConfigurationError,
    InvalidThresholdError,
    InvalidValidatorError,
    OperatorNotFoundError,
)
from .operators import ComparisonOperator
from .validators import (
    measure_length,
    validate_acceptance,
    validate_format,
    validate_length,
    validate_required,
)

__all__ = [
    # Core types
    "Changeset",
    "ChangesetConfig",
    "FieldError",
    # Comparators
    "ComparisonOperator",
    "Comparator",
    "ComparatorRegistry",
    "build_default_registry",
    # Validators
    "measure_length",
    "validate_acceptance",
    "validate_format",
    "validate_length",
    "validate_required",
    # Exceptions
    "ChangesetError",
    "ConfigurationError",
    "OperatorNotFoundError",
    "InvalidValidatorError",
    "InvalidThresholdError",
    "ChangesetValidationError",
]
