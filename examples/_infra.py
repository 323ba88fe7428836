"""Shared infrastructure for examples."""

from __future__ import annotations

from typing import Any


# Builders
def item(num: int) -> dict[str, Any]:
    return {"__typename": "Item", "id": str(num)}


def items_page(nums: list[int], **page_info: Any) -> dict[str, Any]:
    return {
        "__typename": "ItemsConnection",
        "nodes": [item(n) for n in nums],
        "pageInfo": {"__typename": "PageInfo", **page_info},
    }


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")
