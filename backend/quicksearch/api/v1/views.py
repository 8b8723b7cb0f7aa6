from fastapi import APIRouter, Depends, status
import logging

from ...schemas.workspace import ViewCreate, ViewListResponse, ViewResponse
from ...workspace import ListView, Workspace, WorkspaceRepository
from ...workspace.exceptions import ItemNotFoundError, WorkspaceError
from ..deps import get_repository, get_workspace, workspace_http_error

router = APIRouter(tags=["views"])
logger = logging.getLogger(__name__)


def _view_response(view: ListView, workspace: Workspace) -> ViewResponse:
    return ViewResponse(
        id=view.id,
        name=view.name,
        url=view.url,
        primary=workspace.get_primary_view() is view,
        members=[item.full_name for item in view.items],
    )


async def _reload(repository: WorkspaceRepository, name: str) -> ViewResponse:
    workspace = await repository.load()
    view = workspace.get_view(name)
    if view is None:
        raise workspace_http_error(ItemNotFoundError(f"No view named {name!r}"))
    return _view_response(view, workspace)


@router.post("/views", response_model=ViewResponse, status_code=status.HTTP_201_CREATED)
async def create_view(
    payload: ViewCreate,
    repository: WorkspaceRepository = Depends(get_repository),
):
    """Create a view listing the given items."""
    try:
        await repository.create_view(payload.name, members=payload.members, primary=payload.primary)
    except WorkspaceError as e:
        raise workspace_http_error(e)
    return await _reload(repository, payload.name)


@router.get("/views", response_model=ViewListResponse)
async def list_views(workspace: Workspace = Depends(get_workspace)):
    primary = workspace.get_primary_view()
    return ViewListResponse(
        views=[_view_response(view, workspace) for view in workspace.views],
        primary_view=primary.name if primary is not None else None,
    )


@router.get("/view/{name}", response_model=ViewResponse)
@router.get("/view/{name}/", response_model=ViewResponse, include_in_schema=False)
async def get_view(name: str, workspace: Workspace = Depends(get_workspace)):
    view = workspace.get_view(name)
    if view is None:
        raise workspace_http_error(ItemNotFoundError(f"No view named {name!r}"))
    return _view_response(view, workspace)


@router.post("/view/{name}/members/{full_name:path}", response_model=ViewResponse)
async def add_view_member(
    name: str,
    full_name: str,
    repository: WorkspaceRepository = Depends(get_repository),
):
    try:
        await repository.add_view_member(name, full_name)
    except WorkspaceError as e:
        raise workspace_http_error(e)
    return await _reload(repository, name)


@router.post("/view/{name}/primary", response_model=ViewResponse)
async def set_primary_view(
    name: str,
    repository: WorkspaceRepository = Depends(get_repository),
):
    """Make this view the one shown by default. Search is not affected."""
    try:
        await repository.set_primary_view(name)
    except WorkspaceError as e:
        raise workspace_http_error(e)
    return await _reload(repository, name)
