"""
Recursive resolution over a tree of search indices.

Child containers are opened lazily while walking, breadth first, so the walk
mirrors the live containment tree. Every container is opened at most once per
walk, which also makes the walk terminate on cyclic containment.
"""

import logging
from collections import deque
from typing import Callable, Iterator, List, Optional, TYPE_CHECKING

from .item import AliasKind, SearchItem

if TYPE_CHECKING:
    from .index import SearchIndex

logger = logging.getLogger(__name__)

# Literal names are tried over the whole tree before any display name.
ALIAS_PRECEDENCE = (AliasKind.NAME, AliasKind.DISPLAY_NAME)


def _open(child) -> "SearchIndex":
    from .index import SearchIndex

    if isinstance(child, SearchIndex):
        return child
    return child.get_search_index()


def walk(index: "SearchIndex") -> Iterator["SearchIndex"]:
    """Yield ``index`` and every index reachable from it, shallowest first."""
    # Values keep visited objects alive so their ids cannot be reused mid-walk.
    seen = {id(index): index}
    if index.owner is not None:
        seen[id(index.owner)] = index.owner

    queue = deque([index])
    while queue:
        current = queue.popleft()
        yield current
        for child in current.children:
            if id(child) in seen:
                logger.debug(f"Skipping already visited container {child!r}")
                continue
            seen[id(child)] = child
            child_index = _open(child)
            if child_index is not child:
                if id(child_index) in seen:
                    continue
                seen[id(child_index)] = child_index
            queue.append(child_index)


def _matcher(case_sensitive: bool) -> Callable[[str], str]:
    if case_sensitive:
        return lambda value: value
    return lambda value: value.casefold()


def find_exact(
    index: "SearchIndex", query: str, case_sensitive: bool = True
) -> Optional[SearchItem]:
    """
    Find the item whose alias equals ``query``.

    Any literal name match anywhere in the tree wins over a display name
    match. Within one alias kind, shallower indices win over deeper ones and
    the first declared item wins within an index.
    """
    normalize = _matcher(case_sensitive)
    wanted = normalize(query)
    indices = list(walk(index))

    for kind in ALIAS_PRECEDENCE:
        for current in indices:
            for item in current.items:
                if item.kind is kind and normalize(item.name) == wanted:
                    return item
    return None


def collect_suggestions(
    index: "SearchIndex", query: str, limit: Optional[int] = None
) -> List[SearchItem]:
    """
    Collect every reachable item whose alias contains ``query``, ignoring case.

    One entry is kept per (target, alias) pair, in traversal order.
    """
    needle = query.casefold()
    seen = set()
    result: List[SearchItem] = []

    for current in walk(index):
        for item in current.items:
            if needle not in item.name.casefold():
                continue
            key = (id(item.target), item.kind, item.name)
            if key in seen:
                continue
            seen.add(key)
            result.append(item)
            if limit is not None and len(result) >= limit:
                return result
    return result
