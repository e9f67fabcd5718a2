"""
Built-in validators.

A validator takes a changeset and returns a changeset carrying the same
defaults and changes plus any new errors.  Validators only read effective
values (``get_field``) and only ever append errors.  Configuration
mistakes, such as an unknown comparison operator, raise before anything
is recorded.

Each function is also exposed as a ``Changeset.validate_*`` method::

    changeset = validate_length(changeset, "age", {"gt": 18})
    changeset = changeset.validate_length("age", {"gt": 18})
"""

from __future__ import annotations

import re
from collections.abc import Hashable, Iterable, Mapping, Sized
from typing import TYPE_CHECKING, Any

from .comparators import build_default_registry
from .exceptions import InvalidThresholdError

if TYPE_CHECKING:
    from .changeset import Changeset
    from .evaluator import ComparatorRegistry
    from .operators import ComparisonOperator

ACCEPTANCE = "acceptance"
FORMAT = "format"
LENGTH = "length"
REQUIRED = "required"

_default_registry = build_default_registry()


def as_field_list(fields: Hashable | Iterable[Hashable]) -> list[Hashable]:
    """Normalise a field list.  A bare string names a single field."""
    if isinstance(fields, str):
        return [fields]
    return list(fields)  # type: ignore[arg-type]


def validate_acceptance(changeset: Changeset, name: Hashable) -> Changeset:
    """Fail unless the effective value is truthy."""
    if not changeset.get_field(name):
        return changeset.add_error(name, ACCEPTANCE)
    return changeset


def validate_required(
    changeset: Changeset, fields: Hashable | Iterable[Hashable]
) -> Changeset:
    """Fail each field whose effective value is ``None`` or ``""``.

    ``0`` and ``False`` count as present.
    """
    for name in as_field_list(fields):
        value = changeset.get_field(name)
        if value is None or (isinstance(value, str) and value == ""):
            changeset = changeset.add_error(name, REQUIRED)
    return changeset


def validate_format(
    changeset: Changeset,
    name: Hashable,
    pattern: str | re.Pattern[str],
) -> Changeset:
    """Fail unless *pattern* matches somewhere in ``str(value)``.

    A missing value is tested as ``""``.  The error carries *pattern* as
    it was given.
    """
    value = changeset.get_field(name)
    text = "" if value is None else str(value)
    if re.search(pattern, text) is None:
        return changeset.add_error(name, FORMAT, [pattern])
    return changeset


def coerce_threshold(operator: Any, threshold: Any) -> int | float:
    """Convert a length threshold to a number.

    Numeric strings such as ``"18"`` are accepted.  Integral values come back
    as ``int``.

    Raises:
        InvalidThresholdError: If *threshold* has no numeric reading.
    """
    if isinstance(threshold, (int, float)) and not isinstance(threshold, bool):
        return threshold
    try:
        number = float(threshold)
    except (TypeError, ValueError):
        raise InvalidThresholdError(operator, threshold) from None
    return int(number) if number.is_integer() else number


def measure_length(value: Any) -> Any:
    """Length used by :func:`validate_length`.

    ``None`` measures 0, sized values measure ``len(value)``, anything else
    (a number) is its own length.
    """
    if value is None:
        return 0
    if isinstance(value, Sized):
        return len(value)
    return value


def validate_length(
    changeset: Changeset,
    name: Hashable,
    opts: Mapping[ComparisonOperator | str, Any] | None = None,
    registry: ComparatorRegistry | None = None,
) -> Changeset:
    """Compare the measured length against each ``{operator: threshold}``.

    Every failing comparison records its own ``length`` error with values
    ``(operator, threshold)``, in the order of *opts*.  A value that cannot
    be compared with the threshold (a date, say) fails the comparison.

    Raises:
        OperatorNotFoundError: If any operator in *opts* is not registered.
            Raised before any comparison runs.
        InvalidThresholdError: If a threshold is not numeric.  Also raised
            before any comparison runs.
    """
    if registry is None:
        registry = _default_registry
    checks = []
    for operator, threshold in (opts or {}).items():
        comparator = registry.resolve(operator)
        label = getattr(operator, "value", operator)
        checks.append((label, comparator, coerce_threshold(label, threshold)))

    length = measure_length(changeset.get_field(name))
    for label, comparator, threshold in checks:
        try:
            passed = comparator.compare(length, threshold)
        except TypeError:
            passed = False
        if not passed:
            changeset = changeset.add_error(name, LENGTH, [label, threshold])
    return changeset


__all__ = [
    "ACCEPTANCE",
    "FORMAT",
    "LENGTH",
    "REQUIRED",
    "as_field_list",
    "coerce_threshold",
    "measure_length",
    "validate_acceptance",
    "validate_format",
    "validate_length",
    "validate_required",
]
