"""
Node merging — order-preserving, deduplicating concatenation.
"""

from __future__ import annotations

from collections.abc import Sequence

from relaypage._types import NodeList


def concat_nodes(left: Sequence[str | None], right: Sequence[str | None]) -> NodeList:
    """
    Left verbatim, then every new key of right in order.

    Membership is by key, so separately read pages dedupe correctly.
    Unresolved (None) entries of right are dropped.

    Example:
        concat_nodes(("Item:1", "Item:2"), ("Item:2", "Item:3"))
        # ("Item:1", "Item:2", "Item:3")
    """
    seen = {node for node in left if isinstance(node, str)}
    merged = list(left)
    for node in right:
        if isinstance(node, str) and node not in seen:
            seen.add(node)
            merged.append(node)
    return tuple(merged)


__all__ = ("concat_nodes",)
