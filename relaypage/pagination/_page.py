"""
Page reader — one cached field variant as a Page.
"""

from __future__ import annotations

from typing import Any

from relaypage._types import Option, Some, Nothing
from relaypage.store import Cache
from relaypage.pagination._types import Page, PageInfo, DEFAULT_PAGE_INFO


def _ensure_key(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _read_page_info(cache: Cache, link: str) -> PageInfo:
    typename = _ensure_key(cache.resolve(link, "__typename"))
    end_cursor = _ensure_key(cache.resolve(link, "endCursor"))
    start_cursor = _ensure_key(cache.resolve(link, "startCursor"))
    has_next_page = cache.resolve(link, "hasNextPage")
    has_previous_page = cache.resolve(link, "hasPreviousPage")

    # Partially written page info: infer from the cursors
    return PageInfo(
        typename=typename if typename is not None else "PageInfo",
        end_cursor=end_cursor,
        start_cursor=start_cursor,
        has_next_page=(
            has_next_page if isinstance(has_next_page, bool) else bool(end_cursor)
        ),
        has_previous_page=(
            has_previous_page
            if isinstance(has_previous_page, bool)
            else bool(start_cursor)
        ),
    )


def get_page(cache: Cache, entity_key: str, field_key: str) -> Option[Page]:
    """
    Read the connection cached under (entity_key, field_key).

    Returns Nothing() when no link is cached or the linked connection has
    no typename. A cached page with no nodes is Some(page) with empty nodes.
    """
    link = _ensure_key(cache.resolve_field_by_key(entity_key, field_key))
    if link is None:
        return Nothing()

    typename = cache.resolve(link, "__typename")
    if not isinstance(typename, str):
        return Nothing()

    nodes = cache.resolve(link, "nodes")
    if not isinstance(nodes, (list, tuple)):
        nodes = ()
    page_info_link = _ensure_key(cache.resolve(link, "pageInfo"))
    page_info = (
        _read_page_info(cache, page_info_link)
        if page_info_link is not None
        else DEFAULT_PAGE_INFO
    )

    return Some(Page(typename=typename, nodes=tuple(nodes), page_info=page_info))


__all__ = ("get_page",)
