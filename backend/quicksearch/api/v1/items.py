from fastapi import APIRouter, Depends, Response, status
import logging

from ...schemas.workspace import ItemCreate, ItemResponse, ItemUpdate
from ...workspace import ItemGroup, Workspace, WorkspaceRepository
from ...workspace.exceptions import ItemNotFoundError, WorkspaceError
from ...workspace.objects import Item, full_name_from_job_path
from ..deps import get_repository, get_workspace, workspace_http_error

router = APIRouter(tags=["items"])
logger = logging.getLogger(__name__)


def _item_response(item: Item) -> ItemResponse:
    return ItemResponse(
        id=item.id,
        kind=item.kind,
        name=item.name,
        display_name=item.display_name,
        full_name=item.full_name,
        full_display_name=item.full_display_name,
        url=item.url,
        disabled=getattr(item, "disabled", False),
        items=[child.name for child in item.items] if isinstance(item, ItemGroup) else [],
    )


async def _reload(repository: WorkspaceRepository, full_name: str) -> ItemResponse:
    workspace = await repository.load()
    item = workspace.get_item_by_full_name(full_name)
    if item is None:
        raise workspace_http_error(ItemNotFoundError(f"No item named {full_name!r}"))
    return _item_response(item)


@router.post("/items", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
async def create_item(
    payload: ItemCreate,
    repository: WorkspaceRepository = Depends(get_repository),
):
    """Create a job or a folder, at the root or inside a folder."""
    try:
        await repository.create_item(
            payload.name,
            kind=payload.kind,
            display_name=payload.display_name,
            parent=payload.parent,
        )
    except WorkspaceError as e:
        raise workspace_http_error(e)

    full_name = f"{payload.parent.strip('/')}/{payload.name}" if payload.parent else payload.name
    return await _reload(repository, full_name)


@router.get("/job/{item_path:path}", response_model=ItemResponse)
async def get_item(
    item_path: str,
    workspace: Workspace = Depends(get_workspace),
):
    """Item page, the target of a successful search."""
    try:
        full_name = full_name_from_job_path(item_path)
    except WorkspaceError as e:
        raise workspace_http_error(e)

    item = workspace.get_item_by_full_name(full_name)
    if item is None:
        raise workspace_http_error(ItemNotFoundError(f"No item named {full_name!r}"))
    return _item_response(item)


@router.patch("/job/{item_path:path}", response_model=ItemResponse)
async def update_item(
    item_path: str,
    payload: ItemUpdate,
    repository: WorkspaceRepository = Depends(get_repository),
):
    """Change the display name of an item or enable/disable a job."""
    changes = payload.model_dump(exclude_unset=True)
    try:
        full_name = full_name_from_job_path(item_path)
        await repository.update_item(full_name, **changes)
    except WorkspaceError as e:
        raise workspace_http_error(e)
    return await _reload(repository, full_name)


@router.delete("/job/{item_path:path}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    item_path: str,
    repository: WorkspaceRepository = Depends(get_repository),
):
    """Delete an item and everything below it."""
    try:
        await repository.delete_item(full_name_from_job_path(item_path))
    except WorkspaceError as e:
        raise workspace_http_error(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
