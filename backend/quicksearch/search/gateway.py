"""
Quick search entry points.

A query moves through these states::

    RECEIVE_QUERY -> TRY_EXACT -> RESOLVED
                               -> TRY_SUGGEST -> SUGGESTIONS_RETURNED
                               -> NOT_FOUND

``search`` is the exact entry point and ends in RESOLVED or NOT_FOUND.
``lookup`` falls back to suggestions when no alias matches exactly.
``suggest`` goes straight to TRY_SUGGEST.

The query is opaque text throughout. It is compared against aliases and
never parsed, rendered or logged at INFO level.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .exceptions import SearchNotFoundError
from .index import SearchIndex
from .item import SearchItem, Searchable

logger = logging.getLogger(__name__)


class SearchState(str, enum.Enum):
    RECEIVE_QUERY = "receive_query"
    TRY_EXACT = "try_exact"
    RESOLVED = "resolved"
    TRY_SUGGEST = "try_suggest"
    SUGGESTIONS_RETURNED = "suggestions_returned"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class SearchOutcome:
    """Terminal result of a quick search."""
    state: SearchState
    item: Optional[SearchItem] = None
    suggestions: Tuple[SearchItem, ...] = ()

    @property
    def target(self) -> Any:
        return self.item.target if self.item is not None else None

    @property
    def url(self) -> Optional[str]:
        return self.item.url if self.item is not None else None


class QuickSearch:
    """
    Resolves queries against the index of ``root``.

    ``root`` is normally the workspace itself rather than the caller's current
    view, so that nothing indexed becomes unreachable because of a view.
    """

    def __init__(
        self,
        root: Searchable,
        case_sensitive: bool = True,
        max_suggestions: Optional[int] = None,
    ):
        self.root = root
        self.case_sensitive = case_sensitive
        self.max_suggestions = max_suggestions

    def get_index(self) -> SearchIndex:
        return self.root.get_search_index()

    def _transition(self, state: SearchState) -> SearchState:
        logger.debug(f"Quick search state -> {state.value}")
        return state

    def _try_exact(self, index: SearchIndex, query: str) -> Optional[SearchItem]:
        self._transition(SearchState.TRY_EXACT)
        return index.find_item(query, case_sensitive=self.case_sensitive)

    def _try_suggest(self, index: SearchIndex, query: str, limit: Optional[int]) -> SearchOutcome:
        self._transition(SearchState.TRY_SUGGEST)
        if limit is None:
            limit = self.max_suggestions
        elif self.max_suggestions is not None:
            limit = min(limit, self.max_suggestions)
        suggestions = index.suggest(query, limit=limit)
        logger.info(f"Quick search returned {len(suggestions)} suggestion(s)")
        return SearchOutcome(
            state=self._transition(SearchState.SUGGESTIONS_RETURNED),
            suggestions=tuple(suggestions),
        )

    def search(self, query: str) -> SearchOutcome:
        """
        Resolve ``query`` to exactly one target.

        Raises:
            SearchNotFoundError: no name or display name equals the query.
        """
        self._transition(SearchState.RECEIVE_QUERY)
        item = self._try_exact(self.get_index(), query)
        if item is None:
            self._transition(SearchState.NOT_FOUND)
            logger.info("Quick search found no exact match")
            raise SearchNotFoundError()

        logger.info(f"Quick search resolved to {item.url}")
        return SearchOutcome(state=self._transition(SearchState.RESOLVED), item=item)

    def lookup(self, query: str, limit: Optional[int] = None) -> SearchOutcome:
        """Resolve ``query`` exactly, or fall back to suggestions."""
        self._transition(SearchState.RECEIVE_QUERY)
        index = self.get_index()
        item = self._try_exact(index, query)
        if item is not None:
            logger.info(f"Quick search resolved to {item.url}")
            return SearchOutcome(state=self._transition(SearchState.RESOLVED), item=item)
        return self._try_suggest(index, query, limit)

    def suggest(self, query: str, limit: Optional[int] = None) -> SearchOutcome:
        """List every alias containing ``query``. An empty list is a valid outcome."""
        self._transition(SearchState.RECEIVE_QUERY)
        return self._try_suggest(self.get_index(), query, limit)
