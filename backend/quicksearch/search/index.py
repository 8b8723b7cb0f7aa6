"""
Per-container search index.
"""

from typing import Any, List, Optional, Sequence, Tuple

from .item import SearchItem
from .resolver import collect_suggestions, find_exact


class SearchIndex:
    """
    Read-only searchable surface of one container.

    ``items`` are the container's direct aliases, ``children`` the containers
    (or prebuilt indices) whose own indices are consulted recursively when a
    lookup runs.
    """

    __slots__ = ("_items", "_children", "_owner")

    def __init__(
        self,
        items: Sequence[SearchItem] = (),
        children: Sequence[Any] = (),
        owner: Any = None,
    ):
        self._items: Tuple[SearchItem, ...] = tuple(items)
        self._children: Tuple[Any, ...] = tuple(children)
        self._owner = owner

    @property
    def items(self) -> Tuple[SearchItem, ...]:
        return self._items

    @property
    def children(self) -> Tuple[Any, ...]:
        return self._children

    @property
    def owner(self) -> Any:
        """The container this index was built for, if any."""
        return self._owner

    def find_item(self, query: str, case_sensitive: bool = True) -> Optional[SearchItem]:
        return find_exact(self, query, case_sensitive=case_sensitive)

    def find(self, query: str, case_sensitive: bool = True) -> Any:
        """Return the target whose name or display name equals ``query``, or None."""
        item = self.find_item(query, case_sensitive=case_sensitive)
        return item.target if item is not None else None

    def suggest(self, query: str, limit: Optional[int] = None) -> List[SearchItem]:
        """Return the items whose alias contains ``query``, ignoring case."""
        return collect_suggestions(self, query, limit=limit)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"<SearchIndex(items={len(self._items)}, children={len(self._children)})>"
