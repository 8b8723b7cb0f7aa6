from .item import AliasKind, SearchItem, Searchable
from .index import SearchIndex
from .builder import SearchIndexBuilder
from .exceptions import SearchError, SearchNotFoundError
from .gateway import QuickSearch, SearchOutcome, SearchState

__all__ = [
    "AliasKind",
    "SearchItem",
    "Searchable",
    "SearchIndex",
    "SearchIndexBuilder",
    "SearchError",
    "SearchNotFoundError",
    "QuickSearch",
    "SearchOutcome",
    "SearchState",
]
