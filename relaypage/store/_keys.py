"""
Key derivation — how the host addresses entities and field variants.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from relaypage._types import Variables


def _canonical(value: Any) -> Any:
    # JSON has one number type: 1.0 and 1 are the same value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, Mapping):
        return {k: _canonical(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_canonical(v) for v in value]
    return value


def stringify_variables(value: Any) -> str:
    """
    Canonical serialization of argument values.

    Mapping keys are sorted, so two values that differ only in key order
    serialize identically. Integral floats serialize as integers. Values
    that are not JSON types fall back to str().
    """
    return json.dumps(
        _canonical(value), sort_keys=True, separators=(",", ":"), default=str
    )


def normalize_arguments(args: Variables | None) -> dict[str, Any] | None:
    """Drop null arguments. Returns None when nothing is left."""
    if not args:
        return None
    kept = {k: v for k, v in args.items() if v is not None}
    return kept or None


def field_key(field_name: str, args: Variables | None = None) -> str:
    """
    Key of one arguments-variant of a field.

    Example:
        field_key("items", {"first": 1}) == 'items({"first":1})'
        field_key("items") == "items"
    """
    normalized = normalize_arguments(args)
    if normalized is None:
        return field_name
    return f"{field_name}({stringify_variables(normalized)})"


def entity_key(data: Mapping[str, Any]) -> str | None:
    """Key of a keyable entity (`Typename:id`), None for embedded objects."""
    typename = data.get("__typename")
    ident = data.get("id", data.get("_id"))
    if not isinstance(typename, str) or ident is None:
        return None
    return f"{typename}:{ident}"


def join_keys(parent: str, key: str) -> str:
    """Key of an embedded object below its parent field."""
    return f"{parent}.{key}"


__all__ = (
    "stringify_variables",
    "normalize_arguments",
    "field_key",
    "entity_key",
    "join_keys",
)
