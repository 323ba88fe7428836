"""
Resolver — the entry point a host registers against a (type, field) pair.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from relaypage._types import Result, Variables
from relaypage.store import Cache, ResolveInfo
from relaypage.pagination._types import Resolution, PaginationError
from relaypage.pagination._params import MergeMode, PaginationParams
from relaypage.pagination._assemble import assemble

type Resolver = Callable[
    [Any, Variables, Cache, ResolveInfo], Result[Resolution, PaginationError]
]


def resolve_connection(
    args: Variables,
    cache: Cache,
    info: ResolveInfo,
    merge_mode: MergeMode | str = MergeMode.INWARDS,
) -> Result[Resolution, PaginationError]:
    """Read the connection for `args` from every matching cached page."""
    return assemble(cache, info, args, MergeMode.parse(merge_mode))


def relay_node_pagination(params: PaginationParams | None = None) -> Resolver:
    """
    Create a resolver for a `nodes` + `pageInfo` connection field.

    Example:
        from relaypage import pagination as P

        resolvers = {
            "Query": {
                "items": P.relay_node_pagination(),
                "feed": P.relay_node_pagination(
                    P.PaginationParams().with_merge_mode(P.OUTWARDS)
                ),
            },
        }
    """
    merge_mode = (params or PaginationParams()).merge_mode

    def resolver(
        _parent: Any,
        args: Variables,
        cache: Cache,
        info: ResolveInfo,
    ) -> Result[Resolution, PaginationError]:
        return assemble(cache, info, args, merge_mode)

    return resolver


__all__ = ("Resolver", "resolve_connection", "relay_node_pagination")
