"""
Search items and the capability interface of indexable objects.
"""

import enum
from typing import Any, Protocol, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from .index import SearchIndex


class AliasKind(enum.Enum):
    """Which alias of an object produced a search item."""
    NAME = "name"
    DISPLAY_NAME = "display_name"


@runtime_checkable
class Searchable(Protocol):
    """Anything that can be located through the quick search."""

    name: str
    display_name: str
    url: str

    def get_search_index(self) -> "SearchIndex":
        ...


class SearchItem:
    """
    Immutable binding of one searchable alias to the object it names.

    Items compare equal when they point at the same target object, whichever
    alias produced them.
    """

    __slots__ = ("_name", "_url", "_target", "_kind")

    def __init__(self, name: str, url: str, target: Any, kind: AliasKind = AliasKind.NAME):
        if not name:
            raise ValueError("Search item name cannot be empty")
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_url", url)
        object.__setattr__(self, "_target", target)
        object.__setattr__(self, "_kind", kind)

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def name(self) -> str:
        return self._name

    @property
    def url(self) -> str:
        return self._url

    @property
    def target(self) -> Any:
        return self._target

    @property
    def kind(self) -> AliasKind:
        return self._kind

    @property
    def path(self) -> str:
        """Human readable location of the target, e.g. ``folder1 » myjob``."""
        return getattr(self._target, "full_display_name", None) or self._name

    def refers_to(self, obj: Any) -> bool:
        return self._target is obj

    def __eq__(self, other):
        if not isinstance(other, SearchItem):
            return NotImplemented
        return self._target is other._target

    def __hash__(self):
        return id(self._target)

    def __repr__(self) -> str:
        return f"<SearchItem(name={self._name!r}, kind={self._kind.value}, url={self._url!r})>"
