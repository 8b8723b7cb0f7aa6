from .objects import Folder, Item, ItemGroup, Job, ListView, Workspace
from .repository import WorkspaceRepository

__all__ = ["Folder", "Item", "ItemGroup", "Job", "ListView", "Workspace", "WorkspaceRepository"]
