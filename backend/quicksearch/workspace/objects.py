"""
Live object model of a workspace: jobs, folders, views and the root.

Every object here satisfies the ``Searchable`` capability (name, display
name, url, get_search_index) and builds its search index on demand from its
current state, so an index always reflects the tree it was built from.
"""

from typing import Iterator, List, Optional, Tuple
from urllib.parse import quote

from ..search import SearchIndex, SearchIndexBuilder
from .exceptions import (
    DuplicateItemError,
    InvalidNameError,
    InvalidParentError,
    ItemNotFoundError,
)

FULL_NAME_SEPARATOR = "/"
DISPLAY_PATH_SEPARATOR = " » "
# Would turn into relative url segments
RESERVED_NAMES = frozenset({".", ".."})


def validate_name(name: str) -> str:
    if not name or not name.strip():
        raise InvalidNameError("Name cannot be empty")
    if FULL_NAME_SEPARATOR in name:
        raise InvalidNameError(f"Name cannot contain '{FULL_NAME_SEPARATOR}': {name!r}")
    if name in RESERVED_NAMES:
        raise InvalidNameError(f"{name!r} is not an allowed name")
    return name


def _url_segment(name: str) -> str:
    return quote(name, safe="")


def full_name_from_job_path(path: str) -> str:
    """
    Turn the part of an item url after the leading ``job/`` into a full name.

    ``folder1/job/myjob/`` becomes ``folder1/myjob``.
    """
    parts = [part for part in path.strip("/").split("/")]
    names = parts[0::2]
    markers = parts[1::2]
    if not parts[0] or any(marker != "job" for marker in markers) or len(parts) % 2 == 0:
        raise ItemNotFoundError(f"Not an item path: {path!r}")
    return FULL_NAME_SEPARATOR.join(names)


class ItemGroup:
    """Mixin for objects that own an ordered list of items."""

    def __init__(self):
        self._items: List["Item"] = []

    @property
    def items(self) -> Tuple["Item", ...]:
        return tuple(self._items)

    def get_item(self, name: str) -> Optional["Item"]:
        for item in self._items:
            if item.name == name:
                return item
        return None

    def add_item(self, item: "Item") -> "Item":
        if self.get_item(item.name) is not None:
            raise DuplicateItemError(f"An item named {item.name!r} already exists")
        item.parent = self
        self._items.append(item)
        return item

    def create_job(self, name: str, display_name: Optional[str] = None, **kwargs) -> "Job":
        return self.add_item(Job(name, display_name=display_name, **kwargs))

    def create_folder(self, name: str, display_name: Optional[str] = None, **kwargs) -> "Folder":
        return self.add_item(Folder(name, display_name=display_name, **kwargs))

    def all_items(self) -> Iterator["Item"]:
        """Every item below this group, depth first."""
        for item in self._items:
            yield item
            if isinstance(item, ItemGroup):
                yield from item.all_items()

    def _add_child_indices(self, builder: SearchIndexBuilder) -> SearchIndexBuilder:
        builder.add_all(self._items)
        for item in self._items:
            if isinstance(item, ItemGroup):
                builder.add_all_recursive(item)
        return builder


class Item:
    """A named object living in a workspace or a folder."""

    kind = "item"

    def __init__(
        self,
        name: str,
        display_name: Optional[str] = None,
        id: Optional[int] = None,
    ):
        self.name = validate_name(name)
        self._display_name = display_name or None
        self.id = id
        self.parent: Optional[ItemGroup] = None

    @property
    def display_name(self) -> str:
        """The display name, falling back to the name when unset."""
        return self._display_name or self.name

    @display_name.setter
    def display_name(self, value: Optional[str]) -> None:
        self._display_name = value or None

    def set_display_name(self, value: Optional[str]) -> None:
        self.display_name = value

    @property
    def has_display_name(self) -> bool:
        return self._display_name is not None

    def _ancestors(self) -> List["Item"]:
        chain = [self]
        parent = self.parent
        while isinstance(parent, Item):
            chain.append(parent)
            parent = parent.parent
        chain.reverse()
        return chain

    @property
    def full_name(self) -> str:
        return FULL_NAME_SEPARATOR.join(item.name for item in self._ancestors())

    @property
    def full_display_name(self) -> str:
        return DISPLAY_PATH_SEPARATOR.join(item.display_name for item in self._ancestors())

    @property
    def url(self) -> str:
        return "".join(f"job/{_url_segment(item.name)}/" for item in self._ancestors())

    def get_search_index(self) -> SearchIndex:
        return SearchIndexBuilder(owner=self).add_aliases(self).build()

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(full_name={self.full_name!r})>"


class Job(Item):
    """A runnable project. Being disabled has no effect on search."""

    kind = "job"

    def __init__(self, name: str, display_name: Optional[str] = None, disabled: bool = False, **kwargs):
        super().__init__(name, display_name=display_name, **kwargs)
        self.disabled = disabled

    def disable(self) -> None:
        self.disabled = True

    def enable(self) -> None:
        self.disabled = False


class Folder(Item, ItemGroup):
    """An item that contains other items."""

    kind = "folder"

    def __init__(self, name: str, display_name: Optional[str] = None, **kwargs):
        Item.__init__(self, name, display_name=display_name, **kwargs)
        ItemGroup.__init__(self)

    def get_search_index(self) -> SearchIndex:
        builder = SearchIndexBuilder(owner=self).add_aliases(self)
        return self._add_child_indices(builder).build()


class ListView:
    """A named selection of items. Views filter what is shown, not what is searchable."""

    kind = "view"

    def __init__(self, name: str, owner: Optional["Workspace"] = None, id: Optional[int] = None):
        self.name = validate_name(name)
        self.owner = owner
        self.id = id
        self._members: List[Item] = []

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def full_display_name(self) -> str:
        return self.name

    @property
    def url(self) -> str:
        return f"view/{_url_segment(self.name)}/"

    @property
    def items(self) -> Tuple[Item, ...]:
        return tuple(self._members)

    def add(self, item: Item) -> None:
        if not self.contains(item):
            self._members.append(item)

    def remove(self, item: Item) -> None:
        self._members = [member for member in self._members if member is not item]

    def contains(self, item: Item) -> bool:
        return any(member is item for member in self._members)

    def get_search_index(self) -> SearchIndex:
        return SearchIndexBuilder(owner=self).add_all(self._members).build()

    def __repr__(self) -> str:
        return f"<ListView(name={self.name!r})>"


class Workspace(ItemGroup):
    """
    Root of the object tree.

    Its index covers every top-level item, every view by name and, through
    the folders, everything nested below. The active or primary view plays no
    part in it.
    """

    name = ""
    display_name = ""
    full_display_name = ""
    url = ""

    def __init__(self):
        super().__init__()
        self._views: List[ListView] = []
        self._primary_view: Optional[ListView] = None

    @property
    def views(self) -> Tuple[ListView, ...]:
        return tuple(self._views)

    def get_view(self, name: str) -> Optional[ListView]:
        for view in self._views:
            if view.name == name:
                return view
        return None

    def add_view(self, view: ListView) -> ListView:
        if self.get_view(view.name) is not None:
            raise DuplicateItemError(f"A view named {view.name!r} already exists")
        view.owner = self
        self._views.append(view)
        return view

    def set_primary_view(self, view: ListView) -> None:
        if not any(existing is view for existing in self._views):
            raise ItemNotFoundError(f"View {view.name!r} does not belong to this workspace")
        self._primary_view = view

    def get_primary_view(self) -> Optional[ListView]:
        if self._primary_view is not None:
            return self._primary_view
        return self._views[0] if self._views else None

    def get_item_by_full_name(self, full_name: str) -> Optional[Item]:
        group: ItemGroup = self
        item: Optional[Item] = None
        for name in full_name.strip(FULL_NAME_SEPARATOR).split(FULL_NAME_SEPARATOR):
            if not isinstance(group, ItemGroup):
                return None
            item = group.get_item(name)
            if item is None:
                return None
            group = item
        return item

    def get_folder(self, full_name: Optional[str]) -> ItemGroup:
        """The group named ``full_name``; the workspace itself for an empty name."""
        if not full_name:
            return self
        item = self.get_item_by_full_name(full_name)
        if item is None:
            raise ItemNotFoundError(f"No item named {full_name!r}")
        if not isinstance(item, Folder):
            raise InvalidParentError(f"{full_name!r} is not a folder")
        return item

    def get_search_index(self) -> SearchIndex:
        builder = SearchIndexBuilder(owner=self)
        self._add_child_indices(builder)
        for view in self._views:
            builder.add(view.name, view)
        return builder.build()

    def __repr__(self) -> str:
        return f"<Workspace(items={len(self._items)}, views={len(self._views)})>"
