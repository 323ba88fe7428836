"""
Pagination — one connection from many cached pages.

    from relaypage import pagination as P

    resolvers = {"Query": {"items": P.relay_node_pagination()}}

    match cache.read("Query", "items", {"first": 10}):
        case Ok(resolution):
            ...  # resolution.data.nodes, resolution.partial
        case Error(e):
            ...  # e.kind == P.PaginationErrorKind.MISS → fetch

Architecture:

    inspect_fields(entity)
         │
         ▼
    compare_args ── drop other filters
         │
         ▼
    get_page ── drop unreadable variants
         │
         ▼
    classify ── Bidirectional │ Forward │ Backward │ Tail │ Head
         │
         ▼
    concat_nodes into start / end
         │
         ▼
    decide ── COMPLETE │ PARTIAL │ MISS
"""

from relaypage.pagination._types import (
    PageInfo,
    DEFAULT_PAGE_INFO,
    Page,
    Completeness,
    Resolution,
    PaginationErrorKind,
    PaginationError,
)
from relaypage.pagination._params import (
    MergeMode,
    INWARDS,
    OUTWARDS,
    PaginationParams,
)
from relaypage.pagination._args import (
    compare_args,
    Bidirectional,
    Forward,
    Backward,
    Tail,
    Head,
    Window,
    classify,
)
from relaypage.pagination._nodes import concat_nodes
from relaypage.pagination._page import get_page
from relaypage.pagination._partial import decide
from relaypage.pagination._assemble import assemble
from relaypage.pagination._resolver import (
    Resolver,
    resolve_connection,
    relay_node_pagination,
)

__all__ = (
    # Types
    "PageInfo",
    "DEFAULT_PAGE_INFO",
    "Page",
    "Completeness",
    "Resolution",
    "PaginationErrorKind",
    "PaginationError",
    # Params
    "MergeMode",
    "INWARDS",
    "OUTWARDS",
    "PaginationParams",
    # Arguments
    "compare_args",
    "Bidirectional",
    "Forward",
    "Backward",
    "Tail",
    "Head",
    "Window",
    "classify",
    # Algorithm
    "concat_nodes",
    "get_page",
    "decide",
    "assemble",
    # Resolver
    "Resolver",
    "resolve_connection",
    "relay_node_pagination",
)
