"""
relaypage — cursor pagination over a normalized GraphQL cache.

    from relaypage import pagination as P  # Connection assembly
    from relaypage import store as S       # Cache capability + in-memory cache
"""

from relaypage import store
from relaypage import pagination
from relaypage._types import (
    Result,
    Ok,
    Error,
    Option,
    Some,
    Nothing,
    Variables,
    Link,
    NodeList,
)

__version__ = "0.1.0"

__all__ = (
    "store",
    "pagination",
    "Result",
    "Ok",
    "Error",
    "Option",
    "Some",
    "Nothing",
    "Variables",
    "Link",
    "NodeList",
)
