"""
Pagination types — pages, results, errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from relaypage._types import NodeList


# ═══════════════════════════════════════════════════════════════════════════════
# Page Info
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class PageInfo:
    """Cursor state of a connection page."""

    typename: str = "PageInfo"
    end_cursor: str | None = None
    start_cursor: str | None = None
    has_next_page: bool = False
    has_previous_page: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "__typename": self.typename,
            "endCursor": self.end_cursor,
            "startCursor": self.start_cursor,
            "hasNextPage": self.has_next_page,
            "hasPreviousPage": self.has_previous_page,
        }


DEFAULT_PAGE_INFO = PageInfo()


# ═══════════════════════════════════════════════════════════════════════════════
# Page — One Connection Value
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Page:
    """
    A connection value: typename, node references, page info.

    Used both for a single cached page and for the assembled connection.
    """

    typename: str
    nodes: NodeList = ()
    page_info: PageInfo = DEFAULT_PAGE_INFO

    def to_dict(self) -> dict[str, Any]:
        """GraphQL-shaped field value. Nodes stay references."""
        return {
            "__typename": self.typename,
            "nodes": list(self.nodes),
            "pageInfo": self.page_info.to_dict(),
        }


# ═══════════════════════════════════════════════════════════════════════════════
# Completeness
# ═══════════════════════════════════════════════════════════════════════════════


class Completeness(Enum):
    """
    How far an assembled connection answers the exact request.

    COMPLETE: the exact argument set was cached.
    PARTIAL:  best-effort data, the host can accept it as partial.
    MISS:     best-effort data the host cannot validate; refetch.
    """

    COMPLETE = auto()
    PARTIAL = auto()
    MISS = auto()


# ═══════════════════════════════════════════════════════════════════════════════
# Resolution — Assembled Result
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Resolution:
    """
    Assembled connection with its completeness flag.

    Note: partial is part of the result, not a flag set on the read context.
    """

    data: Page
    partial: bool = False


# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════


class PaginationErrorKind(Enum):
    """Pagination error kinds."""

    MISS = auto()  # Nothing usable cached, fetch over the network
    MULTIPLE_PIVOTS = auto()  # More than one bidirectional page matched


@dataclass(frozen=True, slots=True)
class PaginationError:
    """Pagination read error."""

    kind: PaginationErrorKind
    message: str

    @property
    def is_miss(self) -> bool:
        return self.kind == PaginationErrorKind.MISS


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "PageInfo",
    "DEFAULT_PAGE_INFO",
    "Page",
    "Completeness",
    "Resolution",
    "PaginationErrorKind",
    "PaginationError",
)
