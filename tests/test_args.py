"""Argument matching and page window classification."""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from relaypage import pagination as P

# =============================================================================
# Strategies
# =============================================================================

filter_names = st.text(min_size=1, max_size=8).filter(
    lambda name: name not in {"first", "last", "after", "before"}
)

json_values = st.recursive(
    st.none() | st.booleans() | st.integers() | st.text(max_size=6),
    lambda children: st.lists(children, max_size=3)
    | st.dictionaries(st.text(max_size=5), children, max_size=3),
    max_leaves=10,
)

filter_args = st.dictionaries(filter_names, json_values, max_size=4)

pagination_args = st.fixed_dictionaries(
    {},
    optional={
        "first": st.integers(min_value=0, max_value=10),
        "last": st.integers(min_value=0, max_value=10),
        "after": st.text(min_size=1, max_size=4),
        "before": st.text(min_size=1, max_size=4),
    },
)


def _reordered(value: Any) -> Any:
    """Same value, every mapping in reversed insertion order."""
    if isinstance(value, dict):
        return {k: _reordered(v) for k, v in reversed(list(value.items()))}
    if isinstance(value, list):
        return [_reordered(v) for v in value]
    return value


# =============================================================================
# compare_args
# =============================================================================


@given(filters=filter_args, left_window=pagination_args, right_window=pagination_args)
def test_reordered_filters_match_both_ways(
    filters: dict[str, Any],
    left_window: dict[str, Any],
    right_window: dict[str, Any],
) -> None:
    left = {**filters, **left_window}
    right = {**_reordered(filters), **right_window}

    assert P.compare_args(left, right)
    assert P.compare_args(right, left)


@given(filters=filter_args.filter(bool), window=pagination_args, data=st.data())
def test_missing_filter_never_matches(
    filters: dict[str, Any], window: dict[str, Any], data: st.DataObject
) -> None:
    dropped = data.draw(st.sampled_from(sorted(filters)))
    fewer = {k: v for k, v in filters.items() if k != dropped}

    assert not P.compare_args({**filters, **window}, fewer)
    assert not P.compare_args(fewer, {**filters, **window})


def test_different_filter_values_do_not_match() -> None:
    assert not P.compare_args({"filter": "one"}, {"filter": "two"})


@pytest.mark.parametrize(
    ("requested", "cached"),
    [
        ({"flag": True}, {"flag": 1}),
        ({"count": 1}, {"count": "1"}),
        ({"where": {"a": 1}}, {"where": "a"}),
        ({"where": None}, {"where": {}}),
    ],
)
def test_type_class_mismatch_does_not_match(
    requested: dict[str, Any], cached: dict[str, Any]
) -> None:
    assert not P.compare_args(requested, cached)


def test_null_filters_match() -> None:
    assert P.compare_args({"where": None}, {"where": None})


def test_pagination_only_arguments_match_anything_unfiltered() -> None:
    assert P.compare_args({}, {"first": 1, "after": "x"})
    assert P.compare_args({"last": 3}, {})


# =============================================================================
# classify
# =============================================================================


@pytest.mark.parametrize(
    ("args", "mode", "expected"),
    [
        ({"first": 2, "last": 3}, P.INWARDS, P.Bidirectional(first=2, last=3)),
        ({"first": 2, "last": 3, "after": "x"}, P.INWARDS, P.Bidirectional(2, 3)),
        ({"first": 2, "last": 3, "after": "x"}, P.OUTWARDS, P.Forward()),
        ({"first": 2, "last": 3}, P.OUTWARDS, P.Tail()),
        ({"first": 1, "after": "x"}, P.INWARDS, P.Forward()),
        ({"last": 1, "before": "x"}, P.INWARDS, P.Backward()),
        ({"after": "x", "before": "y"}, P.INWARDS, P.Forward()),
        ({"last": 1}, P.INWARDS, P.Tail()),
        ({"first": 1}, P.INWARDS, P.Head()),
        ({"first": 1, "after": ""}, P.INWARDS, P.Head()),
        ({}, P.OUTWARDS, P.Head()),
        ({"first": True, "last": 2}, P.INWARDS, P.Tail()),
        ({"last": "2"}, P.INWARDS, P.Head()),
    ],
)
def test_classify(args: dict[str, Any], mode: P.MergeMode, expected: P.Window) -> None:
    assert P.classify(args, mode) == expected


def test_nested_numbers_compare_by_value() -> None:
    assert P.compare_args({"w": {"n": 1}}, {"w": {"n": 1.0}})
    assert P.compare_args({"w": [1.0]}, {"w": [1]})
    assert not P.compare_args({"w": {"n": 1}}, {"w": {"n": 1.5}})
