"""
Arguments — connection identity and page window classification.

compare_args() decides whether two argument sets address the same
connection. classify() turns one set into the window it fetched.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from relaypage._types import Variables, PAGINATION_KEYS
from relaypage.store import stringify_variables
from relaypage.pagination._params import MergeMode


# ═══════════════════════════════════════════════════════════════════════════════
# Argument Matching
# ═══════════════════════════════════════════════════════════════════════════════


def _kind(value: Any) -> str:
    # bool before int: True is an int in Python but never equals a number here
    if value is None or isinstance(value, (Mapping, list, tuple)):
        return "object"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return type(value).__name__


def _same_value(a: Any, b: Any) -> bool:
    kind = _kind(a)
    if kind != _kind(b):
        return False
    if kind == "object":
        return stringify_variables(a) == stringify_variables(b)
    return a == b


def compare_args(requested: Variables, cached: Variables) -> bool:
    """
    Same connection, any pagination window.

    Pagination keys are ignored on both sides. Filter keys must be present
    on both sides with equal values; nested objects compare independent of
    key order.

    Example:
        compare_args({"first": 2, "filter": "a"}, {"after": "x", "filter": "a"})  # True
        compare_args({"filter": "a"}, {"filter": "b"})  # False
    """
    for key, value in cached.items():
        if key in PAGINATION_KEYS:
            continue
        if key not in requested:
            return False
        if not _same_value(requested[key], value):
            return False

    for key in requested:
        if key in PAGINATION_KEYS:
            continue
        if key not in cached:
            return False

    return True


# ═══════════════════════════════════════════════════════════════════════════════
# Window — Which Part of the Connection a Page Holds
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Bidirectional:
    """Fetched with both `first` and `last`: a window anchored at both ends."""

    first: int
    last: int


@dataclass(frozen=True, slots=True)
class Forward:
    """Fetched with `after`: extends the list forward."""


@dataclass(frozen=True, slots=True)
class Backward:
    """Fetched with `before`: extends the list backward."""


@dataclass(frozen=True, slots=True)
class Tail:
    """Fetched with `last` only: the end of the list."""


@dataclass(frozen=True, slots=True)
class Head:
    """Fetched with `first` only, or without pagination: the start of the list."""


type Window = Bidirectional | Forward | Backward | Tail | Head


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def classify(args: Variables, merge_mode: MergeMode) -> Window:
    """
    Classify a cached page by the pagination arguments it was fetched with.

    Precedence: bidirectional (inwards only) → after → before → last → first.
    """
    first = args.get("first")
    last = args.get("last")

    if merge_mode == MergeMode.INWARDS and _is_number(first) and _is_number(last):
        return Bidirectional(first=int(first), last=int(last))
    if args.get("after"):
        return Forward()
    if args.get("before"):
        return Backward()
    if _is_number(last):
        return Tail()
    return Head()


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "compare_args",
    "Bidirectional",
    "Forward",
    "Backward",
    "Tail",
    "Head",
    "Window",
    "classify",
)
