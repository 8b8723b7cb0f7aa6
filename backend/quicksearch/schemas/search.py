"""
Quick search API schemas.

Names and urls are returned as plain JSON strings; nothing here is meant to
be inserted into a page as markup.
"""

from pydantic import BaseModel
from typing import List, Optional

from ..search import SearchItem, SearchOutcome, SearchState


class Suggestion(BaseModel):
    """One alias that matched the query."""
    name: str
    url: str
    path: Optional[str] = None

    @classmethod
    def from_item(cls, item: SearchItem, prefix: str = "") -> "Suggestion":
        return cls(name=item.name, url=f"{prefix}/{item.url}", path=item.path)


class SuggestionsResponse(BaseModel):
    suggestions: List[Suggestion]


class LookupResponse(BaseModel):
    state: SearchState
    url: Optional[str] = None
    suggestions: List[Suggestion] = []

    @classmethod
    def from_outcome(cls, outcome: SearchOutcome, prefix: str = "") -> "LookupResponse":
        return cls(
            state=outcome.state,
            url=f"{prefix}/{outcome.url}" if outcome.url is not None else None,
            suggestions=[Suggestion.from_item(item, prefix) for item in outcome.suggestions],
        )
