from fastapi import Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
import logging

from ..database import get_db
from ..core.config import settings
from ..search import QuickSearch
from ..workspace import Workspace, WorkspaceRepository
from ..workspace.exceptions import (
    DuplicateItemError,
    InvalidNameError,
    InvalidParentError,
    ItemNotFoundError,
    UnsupportedOperationError,
    WorkspaceError,
)

logger = logging.getLogger(__name__)

WORKSPACE_ERROR_STATUS = {
    ItemNotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateItemError: status.HTTP_409_CONFLICT,
    InvalidParentError: status.HTTP_400_BAD_REQUEST,
    InvalidNameError: status.HTTP_400_BAD_REQUEST,
    UnsupportedOperationError: status.HTTP_400_BAD_REQUEST,
}


def workspace_http_error(error: WorkspaceError) -> HTTPException:
    """Map a workspace error onto the HTTP error reported to the client."""
    for error_type, status_code in WORKSPACE_ERROR_STATUS.items():
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))


async def get_repository(db: AsyncSession = Depends(get_db)) -> WorkspaceRepository:
    return WorkspaceRepository(db)


async def get_workspace(
    repository: WorkspaceRepository = Depends(get_repository),
) -> Workspace:
    """
    Dependency returning a fresh snapshot of the workspace for this request.
    """
    try:
        return await repository.load()
    except SQLAlchemyError as e:
        logger.error(f"Failed to load workspace snapshot: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load workspace",
        )


async def get_quick_search(workspace: Workspace = Depends(get_workspace)) -> QuickSearch:
    """
    Dependency returning a quick search rooted at the whole workspace.
    """
    return QuickSearch(
        workspace,
        case_sensitive=settings.SEARCH_EXACT_CASE_SENSITIVE,
        max_suggestions=settings.SEARCH_MAX_SUGGESTIONS,
    )
