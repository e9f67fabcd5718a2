"""
Changeset: proposed changes to a flat record plus accumulated errors.

A changeset is a persistent value: every mutator returns a new
``Changeset`` and leaves the receiver untouched.  Internal mappings are
copied on construction and accessors hand out copies, so snapshots taken
earlier in a validator chain never change underneath the caller.

Usage::

    changeset = (
        Changeset({"age": 0, "name": ""})
        .add_changes({"age": 20, "name": "Nathan"})
        .filter(["age", "name"])
        .validate_length("age", {"gt": 18})
        .validate_required(["age", "name"])
    )
    if changeset.is_valid():
        save(changeset.apply_changes())
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Hashable, Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Union

from . import validators
from .config import DEFAULT_CONFIG, ChangesetConfig
from .errors import FieldError
from .exceptions import ChangesetValidationError, InvalidValidatorError

if TYPE_CHECKING:
    from .evaluator import ComparatorRegistry
    from .operators import ComparisonOperator

logger = logging.getLogger("ddd_changeset.changeset")

FieldValues = Union[Mapping[Hashable, Any], Iterable[tuple[Hashable, Any]]]
Validator = Callable[["Changeset"], "Changeset"]


def _to_dict(values: FieldValues | None) -> dict[Hashable, Any]:
    if values is None:
        return {}
    return dict(values)


def _union(*groups: Iterable[Hashable]) -> tuple[Hashable, ...]:
    # dict.fromkeys keeps first-seen order while de-duplicating
    merged: dict[Hashable, None] = {}
    for group in groups:
        merged.update(dict.fromkeys(group))
    return tuple(merged)


@dataclass(frozen=True)
class Changeset:
    """
    Defaults, proposed changes, per-field errors and modification flags
    for one validation attempt.

    Args:
        defaults: Base record, as a mapping or ``(field, value)`` pairs.
        allowed_fields: Extra field names to accept besides the default
            field names.  Only enforced when ``config.strict`` is set.
        config: Behaviour switches, see :class:`ChangesetConfig`.

    The remaining fields hold derived state and are written by the
    mutators.  ``valid`` is always recomputed from ``errors``.

    Changesets compare by value but are not hashable.
    """

    defaults: FieldValues | None = None
    allowed_fields: Iterable[Hashable] | None = None
    config: ChangesetConfig = DEFAULT_CONFIG
    changes: Mapping[Hashable, Any] = field(default_factory=dict, kw_only=True)
    errors: Mapping[Hashable, Iterable[FieldError]] = field(
        default_factory=dict, kw_only=True
    )
    modified: Mapping[Hashable, bool] = field(default_factory=dict, kw_only=True)
    valid: bool = field(default=True, kw_only=True)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.config is None:
            object.__setattr__(self, "config", DEFAULT_CONFIG)
        object.__setattr__(self, "defaults", _to_dict(self.defaults))
        allowed = validators.as_field_list(self.allowed_fields or ())
        object.__setattr__(self, "allowed_fields", _union(allowed))
        object.__setattr__(self, "changes", dict(self.changes))
        errors = {name: tuple(errs) for name, errs in self.errors.items()}
        errors = {name: errs for name, errs in errors.items() if errs}
        object.__setattr__(self, "errors", errors)
        object.__setattr__(self, "valid", not errors)
        object.__setattr__(self, "modified", dict(self.modified))

    # -- inspection ----------------------------------------------------------

    def is_valid(self) -> bool:
        return self.valid

    def is_invalid(self) -> bool:
        return not self.is_valid()

    def is_allowed(self, name: Hashable) -> bool:
        """True if *name* may receive changes and errors."""
        if not self.config.strict:
            return True
        return name in self.allowed_fields or name in self.defaults

    def get_allowed_fields(self) -> list[Hashable]:
        """Explicit allowed fields followed by default field names."""
        return list(_union(self.allowed_fields, self.defaults))

    def has_change(self, name: Hashable) -> bool:
        return name in self.changes

    def get_change(self, name: Hashable, default: Any = None) -> Any:
        """
        Return the proposed value for *name*.

        Presence decides: a change explicitly set to ``None`` is returned
        as ``None`` rather than *default*.
        """
        return self.changes.get(name, default)

    def get_default(self, name: Hashable, default: Any = None) -> Any:
        return self.defaults.get(name, default)

    def get_field(self, name: Hashable, default: Any = None) -> Any:
        """Effective value: the change if present, else the default."""
        return self.get_change(name, self.get_default(name, default))

    def get_modified(self, name: Hashable) -> bool:
        return bool(self.modified.get(name, False))

    def get_error(self, name: Hashable) -> list[FieldError]:
        return list(self.errors.get(name, ()))

    def get_errors(self) -> dict[Hashable, list[FieldError]]:
        return {name: list(errs) for name, errs in self.errors.items()}

    def get_changes(self) -> dict[Hashable, Any]:
        return dict(self.changes)

    def get_defaults(self) -> dict[Hashable, Any]:
        return dict(self.defaults)

    def apply_changes(self) -> dict[Hashable, Any]:
        """Return the would-be-persisted record: defaults overlaid by changes."""
        merged = dict(self.defaults)
        merged.update(self.changes)
        return merged

    def errors_to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {
            str(name): [error.to_dict() for error in errs]
            for name, errs in self.errors.items()
        }

    def raise_if_invalid(self) -> Changeset:
        """
        Return ``self`` if valid.

        Raises:
            ChangesetValidationError: Carrying ``get_errors()`` otherwise.
        """
        if self.is_invalid():
            raise ChangesetValidationError(self.get_errors())
        return self

    # -- mutators ------------------------------------------------------------

    def add_change(self, name: Hashable, value: Any) -> Changeset:
        if not self.is_allowed(name):
            logger.debug("Ignoring change for non-allowed field %r", name)
            return self
        changes = dict(self.changes)
        changes[name] = value
        modified = dict(self.modified)
        modified[name] = True
        return replace(self, changes=changes, modified=modified)

    def add_changes(self, values: FieldValues) -> Changeset:
        changeset = self
        for name, value in _to_dict(values).items():
            changeset = changeset.add_change(name, value)
        return changeset

    def add_default(self, name: Hashable, value: Any) -> Changeset:
        defaults = dict(self.defaults)
        defaults[name] = value
        return replace(self, defaults=defaults)

    def add_defaults(self, values: FieldValues) -> Changeset:
        defaults = dict(self.defaults)
        defaults.update(_to_dict(values))
        return replace(self, defaults=defaults)

    def add_error(
        self,
        name: Hashable,
        message: str,
        values: Iterable[Any] = (),
        meta: Any = None,
    ) -> Changeset:
        """Append one error record for *name* and mark the changeset invalid."""
        if not self.is_allowed(name):
            logger.debug("Ignoring %r error for non-allowed field %r", message, name)
            return self
        logger.debug("Field %r failed %r %r", name, message, values)
        error = FieldError(message=message, values=tuple(values), meta=meta)
        errors = dict(self.errors)
        errors[name] = (*errors.get(name, ()), error)
        return replace(self, errors=errors, valid=False)

    def clear_errors(self) -> Changeset:
        return replace(self, errors={}, valid=True)

    def clear_changes(self, reset_to_defaults: bool | None = None) -> Changeset:
        """
        Drop every change and modification flag.

        Args:
            reset_to_defaults: Reset changes to a copy of the defaults
                instead of emptying them.  ``None`` uses
                ``config.reset_changes_to_defaults``.
        """
        if reset_to_defaults is None:
            reset_to_defaults = self.config.reset_changes_to_defaults
        changes = dict(self.defaults) if reset_to_defaults else {}
        return replace(self, changes=changes, modified={})

    def clear_defaults(self) -> Changeset:
        return replace(self, defaults={})

    def clear(self) -> Changeset:
        """Clear errors and changes.  Defaults are kept."""
        return self.clear_errors().clear_changes()

    def filter(self, fields: Iterable[Hashable]) -> Changeset:
        """
        Restrict changes, errors and modification flags to *fields*.

        Each listed field keeps its current change (if any) and its current
        error list verbatim, and is marked modified.  Everything else is
        dropped.  Defaults are not affected.
        """
        changes: dict[Hashable, Any] = {}
        errors: dict[Hashable, tuple[FieldError, ...]] = {}
        modified: dict[Hashable, bool] = {}
        for name in validators.as_field_list(fields):
            if name in self.changes:
                changes[name] = self.changes[name]
            if self.errors.get(name):
                errors[name] = self.errors[name]
            modified[name] = True
        return replace(
            self,
            changes=changes,
            errors=errors,
            modified=modified,
            valid=not errors,
        )

    # -- validation ----------------------------------------------------------

    def validate(self, validator: Validator) -> Changeset:
        """
        Run a validator against this changeset.

        Raises:
            InvalidValidatorError: If *validator* returns anything other
                than a ``Changeset``.
        """
        result = validator(self)
        if not isinstance(result, Changeset):
            raise InvalidValidatorError(validator, result)
        return result

    def validate_acceptance(self, name: Hashable) -> Changeset:
        return self.validate(lambda cs: validators.validate_acceptance(cs, name))

    def validate_required(self, fields: Iterable[Hashable]) -> Changeset:
        fields = validators.as_field_list(fields)
        return self.validate(lambda cs: validators.validate_required(cs, fields))

    def validate_format(
        self, name: Hashable, pattern: str | re.Pattern[str]
    ) -> Changeset:
        return self.validate(lambda cs: validators.validate_format(cs, name, pattern))

    def validate_length(
        self,
        name: Hashable,
        opts: Mapping[ComparisonOperator | str, Any] | None = None,
        registry: ComparatorRegistry | None = None,
    ) -> Changeset:
        return self.validate(
            lambda cs: validators.validate_length(cs, name, opts, registry=registry)
        )
