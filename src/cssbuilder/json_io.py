"""JSON round-trip helpers.

``get_json`` encodes any value compactly; ``from_json`` rebuilds an instance
of a given type by passing the decoded values to its constructor
positionally, in the order the keys appear in the JSON text.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

T = TypeVar("T")

_SEPARATORS = (",", ":")


def _to_jsonable(value: Any) -> Any:
    """Reduce objects the json module can't encode to plain dicts."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if hasattr(value, "__dict__"):
        return {k: v for k, v in vars(value).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def get_json(value: Any) -> str:
    """Return the compact JSON text for *value*.

    Keys keep their insertion order, e.g. ``{"height": 10, "width": 20}``
    encodes as ``'{"height":10,"width":20}'``.
    Non-finite floats (NaN, Infinity) have no JSON form and raise ValueError.
    """
    return json.dumps(
        value, separators=_SEPARATORS, allow_nan=False, default=_to_jsonable
    )


def from_json(cls: type[T], json_text: str) -> T:
    """Build a *cls* instance from *json_text*.

    An object payload is reduced to its values in key order; an array is used
    as-is.  The values are bound positionally, so the key order must match
    the constructor's parameter order.  Whatever the constructor raises on a
    mismatch propagates unchanged.
    """
    data = json.loads(json_text)
    if isinstance(data, dict):
        values = list(data.values())
    elif isinstance(data, list):
        values = data
    else:
        raise TypeError(
            f"Expected a JSON object or array, got {type(data).__name__}"
        )
    return cls(*values)
