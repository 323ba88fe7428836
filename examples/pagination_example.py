"""
Pagination — one list from many cached pages.

Key concepts:
- Every page fetch is cached under its own arguments
- The resolver merges all pages that share the same filters
- Merge mode decides where backward pages go

Level 2: relaypage.pagination
Level 1: relaypage.store (MemoryCache stands in for the host cache)
"""

from kungfu import Ok, Error

from relaypage import pagination as P
from relaypage import store as S
from examples._infra import banner, items_page


# ═══════════════════════════════════════════════════════════════════════════════
# 1. REGISTER — one resolver per connection field
# ═══════════════════════════════════════════════════════════════════════════════

feed_params = P.PaginationParams().with_merge_mode(P.OUTWARDS)

cache = S.MemoryCache(
    resolvers={
        "Query": {
            "items": P.relay_node_pagination(),
            "feed": P.relay_node_pagination(feed_params),
        },
    },
)


# ═══════════════════════════════════════════════════════════════════════════════
# 2. WRITE — pages arrive from the network one by one
# ═══════════════════════════════════════════════════════════════════════════════

cache.write("Query", "items", {"first": 2}, items_page([1, 2], hasNextPage=True, endCursor="2"))
cache.write("Query", "items", {"first": 2, "after": "2"}, items_page([3, 4], hasNextPage=False))

cache.write("Query", "feed", {"first": 1, "after": "10"}, items_page([11], hasNextPage=True, endCursor="11"))
cache.write("Query", "feed", {"last": 1, "before": "10"}, items_page([9], hasPreviousPage=True, startCursor="9"))


def show(field: str, args: dict[str, object]) -> None:
    match cache.read("Query", field, args):
        case Ok(r):
            info = r.data.page_info
            print(f"   {field}{args} → {list(r.data.nodes)}")
            print(f"   hasNextPage={info.has_next_page} hasPreviousPage={info.has_previous_page} partial={r.partial}")
        case Error(e):
            print(f"   {field}{args} → {e.kind.name}: {e.message}")


def main() -> None:
    banner("Pagination: Merging Cached Pages")

    print("\n1. Forward pages (inwards):")
    show("items", {"first": 2})

    print("\n2. Pages around a pivot (outwards):")
    show("feed", {"last": 1, "before": "10"})

    print("\n3. Different filter (miss → fetch from network):")
    show("items", {"first": 2, "filter": "archived"})


if __name__ == "__main__":
    main()
