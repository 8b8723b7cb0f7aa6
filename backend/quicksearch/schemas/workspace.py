from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional

from ..models.item import ItemKind
from ..workspace.objects import RESERVED_NAMES


def _check_name(v: str) -> str:
    if not v or not v.strip():
        raise ValueError('name cannot be empty')
    if '/' in v:
        raise ValueError("name cannot contain '/'")
    if v in RESERVED_NAMES:
        raise ValueError(f"{v!r} is not an allowed name")
    return v


class ItemCreate(BaseModel):
    name: str
    kind: ItemKind = ItemKind.JOB
    display_name: Optional[str] = None
    parent: Optional[str] = Field(
        default=None, description="Full name of the folder to create the item in"
    )

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return _check_name(v)


class ItemUpdate(BaseModel):
    display_name: Optional[str] = None
    disabled: Optional[bool] = None


class ItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    kind: str
    name: str
    display_name: str
    full_name: str
    full_display_name: str
    url: str
    disabled: bool = False
    items: List[str] = []


class ViewCreate(BaseModel):
    name: str
    members: List[str] = Field(default_factory=list, description="Full names of member items")
    primary: bool = False

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return _check_name(v)


class ViewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    name: str
    url: str
    primary: bool = False
    members: List[str] = []


class ViewListResponse(BaseModel):
    views: List[ViewResponse]
    primary_view: Optional[str] = None
