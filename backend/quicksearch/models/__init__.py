from .item import ItemKind, ItemRecord
from .view import ViewRecord, ViewMemberRecord

__all__ = ["ItemKind", "ItemRecord", "ViewRecord", "ViewMemberRecord"]
