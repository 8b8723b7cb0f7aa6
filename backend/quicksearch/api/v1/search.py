"""
Quick search endpoints.

- ``GET /search?q=...`` redirects to the single item whose name or display
  name equals the query, or answers 404.
- ``GET /search/suggest?query=...`` lists every alias containing the query.
- ``GET /search/lookup?q=...`` returns the exact match as JSON, or the
  suggestions when there is none.

The query is never echoed back in an error response.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import RedirectResponse
from typing import Optional
import logging

from ...core.config import settings
from ...schemas.search import LookupResponse, Suggestion, SuggestionsResponse
from ...search import QuickSearch, SearchNotFoundError
from ..deps import get_quick_search

router = APIRouter(tags=["search"])
logger = logging.getLogger(__name__)


@router.get("", response_class=RedirectResponse, status_code=status.HTTP_302_FOUND)
async def search(
    q: str = Query("", description="Name or display name to jump to"),
    quick_search: QuickSearch = Depends(get_quick_search),
):
    """Redirect to the item matching the query exactly."""
    try:
        outcome = quick_search.search(q)
    except SearchNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return RedirectResponse(
        url=f"{settings.API_V1_STR}/{outcome.url}",
        status_code=status.HTTP_302_FOUND,
    )


@router.get("/suggest", response_model=SuggestionsResponse)
async def suggest(
    query: str = Query("", description="Text contained in the names to suggest"),
    limit: Optional[int] = Query(None, ge=1, alias="max"),
    quick_search: QuickSearch = Depends(get_quick_search),
):
    """List names and display names containing the query, ignoring case."""
    outcome = quick_search.suggest(query, limit=limit)
    return SuggestionsResponse(
        suggestions=[
            Suggestion.from_item(item, settings.API_V1_STR) for item in outcome.suggestions
        ]
    )


@router.get("/lookup", response_model=LookupResponse)
async def lookup(
    q: str = Query(""),
    limit: Optional[int] = Query(None, ge=1, alias="max"),
    quick_search: QuickSearch = Depends(get_quick_search),
):
    """Resolve the query exactly, falling back to suggestions."""
    outcome = quick_search.lookup(q, limit=limit)
    return LookupResponse.from_outcome(outcome, settings.API_V1_STR)
