"""
Partiality — is an assembled connection an answer to the exact request?
"""

from __future__ import annotations

from relaypage._types import Variables
from relaypage.store import Cache
from relaypage.pagination._types import Completeness


def decide(
    cache: Cache,
    entity_key: str,
    field_name: str,
    args: Variables,
    has_schema: bool,
) -> Completeness:
    """
    Look up the exact requested arguments, not equivalent ones.

    Cached exactly → COMPLETE. Otherwise a host with a schema can accept
    PARTIAL data; a host without one cannot prove it sufficient → MISS.
    """
    if isinstance(cache.resolve(entity_key, field_name, args), str):
        return Completeness.COMPLETE
    if not has_schema:
        return Completeness.MISS
    return Completeness.PARTIAL


__all__ = ("decide",)
