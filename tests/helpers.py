"""Builders and Result helpers shared by the test modules."""

from __future__ import annotations

from typing import Any

import pytest
from kungfu import Ok, Error

from relaypage import pagination as P


def item_node(num: int | str) -> dict[str, Any]:
    return {"__typename": "Item", "id": str(num)}


def item_key(num: int | str) -> str:
    return f"Item:{num}"


def connection(items: list[int | str], **page_info: Any) -> dict[str, Any]:
    """An ItemsConnection result with the given page info fields (camelCase)."""
    return {
        "__typename": "ItemsConnection",
        "nodes": [item_node(n) for n in items],
        "pageInfo": {"__typename": "PageInfo", **page_info},
    }


def unwrap_ok(result: Any) -> P.Resolution:
    match result:
        case Ok(resolution):
            return resolution
        case Error(e):
            pytest.fail(f"Expected a resolution, got {e}")
    pytest.fail(f"Not a Result: {result!r}")


def unwrap_error(result: Any) -> P.PaginationError:
    match result:
        case Error(e):
            return e
        case Ok(resolution):
            pytest.fail(f"Expected an error, got {resolution}")
    pytest.fail(f"Not a Result: {result!r}")
