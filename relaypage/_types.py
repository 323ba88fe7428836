"""
Core types for relaypage.

Re-exports from kungfu + shared type aliases.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# Re-export from kungfu
from kungfu import Result, Ok, Error, Option, Some, Nothing

# ═══════════════════════════════════════════════════════════════════════════════
# Argument & Reference Aliases
# ═══════════════════════════════════════════════════════════════════════════════

type Variables = Mapping[str, Any]
"""Field arguments: argument name → scalar or nested value."""

type Link = str
"""Key of a normalized entity in the host cache."""

type NodeList = tuple[str | None, ...]
"""Ordered node references. None marks a reference that failed to resolve."""

PAGINATION_KEYS: frozenset[str] = frozenset({"first", "last", "after", "before"})
"""Arguments that select a window of a connection rather than filter it."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "Option",
    "Some",
    "Nothing",
    # Aliases
    "Variables",
    "Link",
    "NodeList",
    "PAGINATION_KEYS",
)
