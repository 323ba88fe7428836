"""
Store — the host cache as a narrow read capability.

    from relaypage import store as S

    cache = S.MemoryCache(resolvers={"Query": {"items": P.relay_node_pagination()}})
    cache.write("Query", "items", {"first": 2}, page)

    # Or adapt an existing host
    cache = S.cache_from(
        resolve=host.resolve,
        resolve_field_by_key=host.resolve_field_by_key,
        inspect_fields=host.inspect_fields,
    )
"""

from relaypage.store._keys import (
    stringify_variables,
    normalize_arguments,
    field_key,
    entity_key,
    join_keys,
)
from relaypage.store._protocol import (
    FieldInfo,
    ResolveInfo,
    Cache,
    FunctionalCache,
    cache_from,
)
from relaypage.store._memory import (
    MemoryCache,
    FieldResolver,
    ResolverMap,
)

__all__ = (
    # Keys
    "stringify_variables",
    "normalize_arguments",
    "field_key",
    "entity_key",
    "join_keys",
    # Protocol
    "FieldInfo",
    "ResolveInfo",
    "Cache",
    "FunctionalCache",
    "cache_from",
    # Memory
    "MemoryCache",
    "FieldResolver",
    "ResolverMap",
)
