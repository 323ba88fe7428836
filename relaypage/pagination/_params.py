"""
Pagination params — resolver configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ═══════════════════════════════════════════════════════════════════════════════
# Merge Mode — Which Accumulator Is the Base
# ═══════════════════════════════════════════════════════════════════════════════


class MergeMode(Enum):
    """
    How pages fetched in both directions are put together.

    INWARDS: forward pages lead, backward pages trail. A page fetched with
             both `first` and `last` is folded in from both ends.
             Use when: the list is loaded from both ends toward the middle.

    OUTWARDS: backward pages lead, forward pages trail. The pivot page is
              the base and the list grows away from it.
              Use when: the list is loaded from a point outwards.
    """

    INWARDS = "inwards"
    OUTWARDS = "outwards"

    @classmethod
    def parse(cls, value: MergeMode | str) -> MergeMode:
        """Accept a MergeMode or its string name."""
        if isinstance(value, MergeMode):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Unknown merge mode: {value!r} (expected 'inwards' or 'outwards')"
            ) from None


# Singleton instances for convenience
INWARDS = MergeMode.INWARDS
OUTWARDS = MergeMode.OUTWARDS


# ═══════════════════════════════════════════════════════════════════════════════
# Params — Full Configuration
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class PaginationParams:
    """
    Resolver configuration, fixed at registration time.

    Example:
        params = PaginationParams().with_merge_mode(OUTWARDS)
        resolver = relay_node_pagination(params)

    Note: Immutable — each method returns new PaginationParams.
    """

    merge_mode: MergeMode = MergeMode.INWARDS

    def __post_init__(self) -> None:
        if not isinstance(self.merge_mode, MergeMode):
            object.__setattr__(self, "merge_mode", MergeMode.parse(self.merge_mode))

    def with_merge_mode(self, mode: MergeMode | str) -> PaginationParams:
        """
        Set merge mode.

        Example:
            .with_merge_mode(P.OUTWARDS)
            .with_merge_mode("outwards")
        """
        return PaginationParams(merge_mode=MergeMode.parse(mode))


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "MergeMode",
    "INWARDS",
    "OUTWARDS",
    "PaginationParams",
)
