"""
Memory cache — in-memory normalized cache for tests and examples.

Writes GraphQL-shaped results the way a normalized cache does: keyable
objects (`__typename` + `id`) become entities of their own, embedded
objects are keyed below their parent field, and fields hold links.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

import structlog

from relaypage._types import Variables
from relaypage.store._keys import (
    field_key,
    normalize_arguments,
    entity_key,
    join_keys,
)
from relaypage.store._protocol import Cache, FieldInfo, ResolveInfo

logger = structlog.get_logger(__name__)

type FieldResolver = Callable[[Any, Variables, Cache, ResolveInfo], Any]
type ResolverMap = Mapping[str, Mapping[str, FieldResolver]]


class MemoryCache:
    """
    In-memory normalized cache.

    Example:
        cache = MemoryCache(
            resolvers={"Query": {"items": P.relay_node_pagination()}},
        )
        cache.write("Query", "items", {"first": 1}, page_one)
        result = cache.read("Query", "items", {"first": 1})
    """

    def __init__(
        self,
        resolvers: ResolverMap | None = None,
        has_schema: bool = False,
    ) -> None:
        self._resolvers: ResolverMap = resolvers or {}
        self.has_schema = has_schema
        self._records: dict[str, dict[str, Any]] = {}
        self._links: dict[str, dict[str, Any]] = {}
        self._fields: dict[str, dict[str, FieldInfo]] = {}

    # ───────────────────────────────────────────────────────────────────────────
    # Cache protocol
    # ───────────────────────────────────────────────────────────────────────────

    def resolve(
        self, entity: str | None, field_name: str, args: Variables | None = None
    ) -> Any:
        return self.resolve_field_by_key(entity, field_key(field_name, args))

    def resolve_field_by_key(self, entity: str | None, key: str) -> Any:
        if entity is None:
            return None
        links = self._links.get(entity, {})
        if key in links:
            return links[key]
        return self._records.get(entity, {}).get(key)

    def inspect_fields(self, entity: str | None) -> Sequence[FieldInfo]:
        if entity is None:
            return []
        return list(self._fields.get(entity, {}).values())

    # ───────────────────────────────────────────────────────────────────────────
    # Writes
    # ───────────────────────────────────────────────────────────────────────────

    def write(
        self,
        entity: str,
        field_name: str,
        args: Variables | None,
        value: Any,
    ) -> None:
        """
        Write one field result, normalizing nested objects.

        Null arguments are dropped before the field key is derived, so
        `{"first": 1, "after": None}` and `{"first": 1}` share a key.
        """
        key = field_key(field_name, args)
        self._fields.setdefault(entity, {})[key] = FieldInfo(
            field_name=field_name,
            field_key=key,
            arguments=normalize_arguments(args),
        )

        if isinstance(value, (Mapping, list, tuple)):
            link = self._normalize(join_keys(entity, key), value)
            self.write_link(entity, key, link)
        else:
            self.write_record(entity, key, value)

        logger.debug("Cache field written", entity=entity, field_key=key)

    def write_record(self, entity: str, key: str, value: Any) -> None:
        """Store a scalar under an exact field key."""
        self._records.setdefault(entity, {})[key] = value
        self._links.get(entity, {}).pop(key, None)

    def write_link(self, entity: str, key: str, link: Any) -> None:
        """Store a link (entity key, or tuple of them) under an exact field key."""
        self._links.setdefault(entity, {})[key] = link
        self._records.get(entity, {}).pop(key, None)

    def _normalize(self, path: str, value: Any) -> Any:
        if isinstance(value, Mapping):
            child = entity_key(value) or path
            for name, field_value in value.items():
                self.write(child, name, None, field_value)
            return child
        if isinstance(value, (list, tuple)):
            return tuple(
                None if item is None else self._normalize(f"{path}.{index}", item)
                for index, item in enumerate(value)
            )
        return value

    # ───────────────────────────────────────────────────────────────────────────
    # Reads through resolvers
    # ───────────────────────────────────────────────────────────────────────────

    def typename_of(self, entity: str) -> str:
        typename = self._records.get(entity, {}).get("__typename")
        if isinstance(typename, str):
            return typename
        return entity.split(":", 1)[0]

    def read(
        self, entity: str, field_name: str, args: Variables | None = None
    ) -> Any:
        """
        Read a field the way the host's query execution does.

        Dispatches to the resolver registered for (typename, field_name);
        without one, returns the exact cached value.
        """
        resolver = self._resolvers.get(self.typename_of(entity), {}).get(field_name)
        if resolver is None:
            return self.resolve(entity, field_name, args)

        info = ResolveInfo(
            parent_key=entity,
            field_name=field_name,
            has_schema=self.has_schema,
        )
        return resolver(None, normalize_arguments(args) or {}, self, info)


__all__ = ("MemoryCache", "FieldResolver", "ResolverMap")
