from typing import Any, Iterable, List, Optional, Union

from .index import SearchIndex
from .item import AliasKind, SearchItem


class SearchIndexBuilder:
    """
    Accumulates the aliases and child containers a container exposes to search.

    Methods return the builder so declarations can be chained::

        SearchIndexBuilder(owner=folder).add_aliases(folder).add_all(folder.items).build()
    """

    def __init__(self, owner: Any = None):
        self.owner = owner
        self._items: List[SearchItem] = []
        self._children: List[Any] = []

    def add(self, item: Union[SearchItem, str], target: Any = None) -> "SearchIndexBuilder":
        """Add a ready made item, or a ``name`` pointing at ``target``."""
        if isinstance(item, SearchItem):
            self._items.append(item)
        else:
            if target is None:
                raise ValueError(f"A target is required to index the name {item!r}")
            self._items.append(SearchItem(item, target.url, target))
        return self

    def add_aliases(self, obj: Any) -> "SearchIndexBuilder":
        """Add ``obj`` under its name and, when it differs, its display name."""
        self._items.append(SearchItem(obj.name, obj.url, obj, AliasKind.NAME))
        display_name: Optional[str] = getattr(obj, "display_name", None)
        if display_name and display_name != obj.name:
            self._items.append(SearchItem(display_name, obj.url, obj, AliasKind.DISPLAY_NAME))
        return self

    def add_all(self, objs: Iterable[Any]) -> "SearchIndexBuilder":
        for obj in objs:
            self.add_aliases(obj)
        return self

    def add_all_recursive(self, container: Any) -> "SearchIndexBuilder":
        """Descend into ``container`` (or a prebuilt index) when searching."""
        self._children.append(container)
        return self

    def build(self) -> SearchIndex:
        return SearchIndex(self._items, self._children, owner=self.owner)
