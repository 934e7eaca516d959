"""Send-time defaulting of request params.

Each request model lists its defaults explicitly in ``send_defaults``; this
module only fills the listed fields that are still zero-valued. Construction
time defaults live on the pydantic fields themselves.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from ankrkit.models.base import AnkrRequest
from ankrkit.utils.exceptions import DefaultingError

RequestT = TypeVar("RequestT")


def _is_zero(value: Any) -> bool:
    if value is None:
        return True
    # An explicit False is a deliberate choice, never a missing value.
    if isinstance(value, bool):
        return False
    if isinstance(value, Enum):
        return False
    if isinstance(value, (str, int, float, list, dict)):
        return not value
    raise TypeError(f"unsupported value kind for defaulting: {type(value).__name__}")


def apply_defaults(request: RequestT) -> RequestT:
    """Return a copy of ``request`` with zero-valued fields set to their send defaults."""
    if not isinstance(request, AnkrRequest):
        raise DefaultingError(f"expected an AnkrRequest, got {type(request).__name__}")

    fields = type(request).model_fields
    updates: dict[str, Any] = {}
    for name, default in type(request).send_defaults.items():
        if name not in fields:
            raise DefaultingError(
                f"{type(request).__name__} declares a default for unknown field '{name}'",
                field=name,
            )
        if _is_zero(getattr(request, name)):
            updates[name] = default
    return request.model_copy(update=updates, deep=True)
