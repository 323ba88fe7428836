"""
Assembler — one connection from every cached page of a field.

Each cached variant of the field whose filters match the request is read,
classified by its pagination window and folded into two accumulators:

    start ─ pages read from the front (first / after)
    end   ─ pages read from the back  (last / before)

    INWARDS:   start + end
    OUTWARDS:  end + start

The running page info takes forward cursor state from `after` pages and
backward cursor state from `before` pages; other pages replace it whole.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

import structlog

from relaypage._types import Result, Ok, Error, Some, NodeList, Variables
from relaypage.store import Cache, ResolveInfo
from relaypage.pagination._types import (
    Page,
    PageInfo,
    DEFAULT_PAGE_INFO,
    Completeness,
    Resolution,
    PaginationError,
    PaginationErrorKind,
)
from relaypage.pagination._params import MergeMode
from relaypage.pagination._args import (
    Window,
    Bidirectional,
    Forward,
    Backward,
    Tail,
    Head,
    compare_args,
    classify,
)
from relaypage.pagination._nodes import concat_nodes
from relaypage.pagination._page import get_page
from relaypage.pagination._partial import decide

logger = structlog.get_logger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# Accumulator
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class _Accumulator:
    start: NodeList = ()
    end: NodeList = ()
    page_info: PageInfo = DEFAULT_PAGE_INFO
    typename: str | None = None

    def add(self, window: Window, page: Page) -> _Accumulator:
        start, end, page_info = self.start, self.end, self.page_info

        match window:
            case Bidirectional(first=first, last=last):
                start = concat_nodes(start, page.nodes[: first + 1])
                end = concat_nodes(page.nodes[-last:], end)
                page_info = page.page_info
            case Forward():
                start = concat_nodes(start, page.nodes)
                page_info = replace(
                    page_info,
                    end_cursor=page.page_info.end_cursor,
                    has_next_page=page.page_info.has_next_page,
                )
            case Backward():
                end = concat_nodes(page.nodes, end)
                page_info = replace(
                    page_info,
                    start_cursor=page.page_info.start_cursor,
                    has_previous_page=page.page_info.has_previous_page,
                )
            case Tail():
                end = concat_nodes(end, page.nodes)
                page_info = page.page_info
            case Head():
                start = concat_nodes(start, page.nodes)
                page_info = page.page_info

        if page_info.typename != page.page_info.typename:
            page_info = replace(page_info, typename=page.page_info.typename)

        return _Accumulator(
            start=start,
            end=end,
            page_info=page_info,
            typename=page.typename,
        )

    def nodes(self, merge_mode: MergeMode) -> NodeList:
        if merge_mode == MergeMode.INWARDS:
            return concat_nodes(self.start, self.end)
        return concat_nodes(self.end, self.start)


# ═══════════════════════════════════════════════════════════════════════════════
# assemble()
# ═══════════════════════════════════════════════════════════════════════════════


def _miss(message: str, info: ResolveInfo) -> Result[Resolution, PaginationError]:
    logger.debug(
        "Connection cache miss",
        reason=message,
        entity=info.parent_key,
        field=info.field_name,
    )
    return Error(PaginationError(PaginationErrorKind.MISS, message))


def assemble(
    cache: Cache,
    info: ResolveInfo,
    args: Variables,
    merge_mode: MergeMode = MergeMode.INWARDS,
) -> Result[Resolution, PaginationError]:
    """
    Assemble the connection at (info.parent_key, info.field_name).

    Returns:
        Ok(Resolution) with the merged page and its partial flag.
        Error(MISS) when nothing usable is cached or the result cannot be
        proven complete; the caller should fetch over the network.
        Error(MULTIPLE_PIVOTS) when more than one cached page was fetched
        with both `first` and `last` in INWARDS mode.

    Example:
        match assemble(cache, ResolveInfo("Query", "items"), {"first": 2}):
            case Ok(resolution):
                render(resolution.data)
            case Error(e) if e.is_miss:
                fetch()
    """
    entity = info.parent_key
    fields = [f for f in cache.inspect_fields(entity) if f.field_name == info.field_name]
    if not fields:
        return _miss("No cached variants of field", info)

    acc = _Accumulator()
    matched = 0
    pivots = 0

    for field in fields:
        if field.arguments is None or not compare_args(args, field.arguments):
            continue
        matched += 1

        match get_page(cache, entity, field.field_key):
            case Some(page):
                window = classify(field.arguments, merge_mode)
            case _:
                logger.debug(
                    "Skipping unreadable page",
                    entity=entity,
                    field_key=field.field_key,
                )
                continue

        if isinstance(window, Bidirectional):
            pivots += 1
            if pivots > 1:
                logger.warning(
                    "Multiple bidirectional pages for one connection",
                    entity=entity,
                    field=info.field_name,
                    field_key=field.field_key,
                )
                return Error(
                    PaginationError(
                        PaginationErrorKind.MULTIPLE_PIVOTS,
                        f"More than one page of {entity}.{info.field_name} "
                        "was fetched with both 'first' and 'last'",
                    )
                )

        acc = acc.add(window, page)

    if matched == 0:
        return _miss("No cached variants with matching arguments", info)
    if acc.typename is None:
        return _miss("No readable cached page", info)

    completeness = decide(cache, entity, info.field_name, args, info.has_schema)
    if completeness == Completeness.MISS:
        return _miss("Exact arguments not cached and no schema to accept partial data", info)

    return Ok(
        Resolution(
            data=Page(
                typename=acc.typename,
                nodes=acc.nodes(merge_mode),
                page_info=acc.page_info,
            ),
            partial=completeness == Completeness.PARTIAL,
        )
    )


__all__ = ("assemble",)
