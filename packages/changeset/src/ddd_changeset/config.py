"""
Changeset behaviour switches.

``ChangesetConfig`` is handed to a changeset on construction and carried
by every changeset derived from it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChangesetConfig:
    """
    Immutable container for changeset options.

    Attributes:
        strict: If ``True``, ``add_change`` and ``add_error`` ignore fields
            outside the allow-list (explicit allowed fields plus default
            field names).  If ``False`` every field is accepted and scoping
            is left to ``Changeset.filter``.
        reset_changes_to_defaults: What ``clear_changes()`` resets changes
            to when not told explicitly: a copy of the defaults (``True``)
            or an empty mapping (``False``).
    """

    strict: bool = False
    reset_changes_to_defaults: bool = False

    def with_strict(self, strict: bool = True) -> ChangesetConfig:
        """Return a copy with allow-list enforcement switched."""
        return ChangesetConfig(
            strict=strict,
            reset_changes_to_defaults=self.reset_changes_to_defaults,
        )

    def with_reset_changes_to_defaults(self, reset: bool = True) -> ChangesetConfig:
        """Return a copy with the ``clear_changes`` default switched."""
        return ChangesetConfig(
            strict=self.strict,
            reset_changes_to_defaults=reset,
        )


DEFAULT_CONFIG = ChangesetConfig()
