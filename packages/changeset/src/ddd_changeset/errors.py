"""FieldError: immutable record of a single validation failure."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class FieldError(BaseModel):
    """One failed rule for one field.

    ``message`` is a fixed tag (``"required"``, ``"format"``, ``"length"``,
    ``"acceptance"`` or a custom validator's tag).  ``values`` holds the
    diagnostic arguments of the failed rule, e.g. ``("gt", 18)`` or the
    regular expression.  ``meta`` is an opaque caller annotation.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    message: str
    values: tuple[Any, ...] = ()
    meta: Any = None

    def __hash__(self) -> int:
        return hash((self.message, self.values))

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "values": list(self.values),
            "meta": self.meta,
        }
