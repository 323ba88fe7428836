"""Resolver configuration."""

from __future__ import annotations

import pytest

from relaypage import pagination as P


def test_default_merge_mode_is_inwards() -> None:
    assert P.PaginationParams().merge_mode is P.INWARDS


def test_with_merge_mode_returns_new_params() -> None:
    params = P.PaginationParams()

    outwards = params.with_merge_mode(P.OUTWARDS)

    assert outwards.merge_mode is P.OUTWARDS
    assert params.merge_mode is P.INWARDS


def test_merge_mode_accepts_names() -> None:
    assert P.PaginationParams().with_merge_mode("outwards").merge_mode is P.OUTWARDS
    assert P.PaginationParams(merge_mode="inwards").merge_mode is P.INWARDS  # type: ignore[arg-type]


def test_unknown_merge_mode_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown merge mode"):
        P.MergeMode.parse("sideways")
