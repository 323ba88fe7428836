"""
Cache capability — the host's normalized cache as seen from a resolver.

Cache — the three read operations a resolver may use.
All reads are side-effect free; the host owns the storage.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from relaypage._types import Variables


# ═══════════════════════════════════════════════════════════════════════════════
# Field Info — One Cached Variant of a Field
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class FieldInfo:
    """
    One previously cached variant of a field at an entity.

    Note: arguments is None when the field was cached without arguments.
    """

    field_name: str
    field_key: str
    arguments: Variables | None


# ═══════════════════════════════════════════════════════════════════════════════
# Resolve Info — Read Context
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ResolveInfo:
    """
    Context of the field being read.

    has_schema: the host can tell optional from required fields, so it
    may accept a partial result instead of refetching.
    """

    parent_key: str
    field_name: str
    has_schema: bool = False


# ═══════════════════════════════════════════════════════════════════════════════
# Cache Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class Cache(Protocol):
    """
    Read-only cache protocol.

    Implement this to run pagination over your own normalized store.

    Example:
        class GraphCacheAdapter:
            def __init__(self, store: Store) -> None:
                self.store = store

            def resolve(self, entity, field_name, args=None):
                return self.store.read(entity, field_key(field_name, args))

            def resolve_field_by_key(self, entity, key):
                return self.store.read(entity, key)

            def inspect_fields(self, entity):
                return [FieldInfo(...) for ... in self.store.fields(entity)]
    """

    def resolve(
        self, entity: str | None, field_name: str, args: Variables | None = None
    ) -> Any:
        """Read one field's value or link. None if not cached."""
        ...

    def resolve_field_by_key(self, entity: str | None, key: str) -> Any:
        """Read one specific field variant by its key. None if not cached."""
        ...

    def inspect_fields(self, entity: str | None) -> Sequence[FieldInfo]:
        """Every cached field variant at an entity, in host order."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Function-based Cache Builder
# ═══════════════════════════════════════════════════════════════════════════════

type ResolveFn = Callable[[str | None, str, Variables | None], Any]
type ResolveFieldByKeyFn = Callable[[str | None, str], Any]
type InspectFieldsFn = Callable[[str | None], Sequence[FieldInfo]]


@dataclass(frozen=True)
class FunctionalCache:
    """
    Cache built from functions.

    Example:
        cache = cache_from(
            resolve=host.resolve,
            resolve_field_by_key=host.resolve_field_by_key,
            inspect_fields=host.inspect_fields,
        )
    """

    _resolve: ResolveFn
    _resolve_field_by_key: ResolveFieldByKeyFn
    _inspect_fields: InspectFieldsFn

    def resolve(
        self, entity: str | None, field_name: str, args: Variables | None = None
    ) -> Any:
        return self._resolve(entity, field_name, args)

    def resolve_field_by_key(self, entity: str | None, key: str) -> Any:
        return self._resolve_field_by_key(entity, key)

    def inspect_fields(self, entity: str | None) -> Sequence[FieldInfo]:
        return self._inspect_fields(entity)


def cache_from(
    resolve: ResolveFn,
    resolve_field_by_key: ResolveFieldByKeyFn,
    inspect_fields: InspectFieldsFn,
) -> FunctionalCache:
    """
    Create Cache from functions.

    Example:
        cache = cache_from(
            resolve=lambda entity, name, args: host.resolve(entity, name, args),
            resolve_field_by_key=lambda entity, key: host.by_key(entity, key),
            inspect_fields=lambda entity: host.inspect(entity),
        )
    """
    return FunctionalCache(
        _resolve=resolve,
        _resolve_field_by_key=resolve_field_by_key,
        _inspect_fields=inspect_fields,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "FieldInfo",
    "ResolveInfo",
    "Cache",
    "FunctionalCache",
    "cache_from",
)
