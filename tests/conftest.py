"""Shared fixtures and hypothesis profiles.

Hypothesis Configuration:
- "ci" profile: Fast runs (100 examples) - default
- "nightly" profile: Thorough runs (1000 examples)
- "debug" profile: Minimal runs with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/
"""

from __future__ import annotations

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from relaypage import pagination as P
from relaypage import store as S

settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


@pytest.fixture
def inwards_cache() -> S.MemoryCache:
    return S.MemoryCache(resolvers={"Query": {"items": P.relay_node_pagination()}})


@pytest.fixture
def outwards_cache() -> S.MemoryCache:
    params = P.PaginationParams().with_merge_mode(P.OUTWARDS)
    return S.MemoryCache(resolvers={"Query": {"items": P.relay_node_pagination(params)}})


@pytest.fixture
def schema_cache() -> S.MemoryCache:
    return S.MemoryCache(
        resolvers={"Query": {"items": P.relay_node_pagination()}},
        has_schema=True,
    )
