"""
Persistence of the workspace tree and loading of per-request snapshots.
"""

import logging
from typing import Dict, Iterable, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import ItemKind, ItemRecord, ViewMemberRecord, ViewRecord
from .exceptions import (
    DuplicateItemError,
    InvalidParentError,
    ItemNotFoundError,
    UnsupportedOperationError,
)
from .objects import (
    FULL_NAME_SEPARATOR,
    Folder,
    Item,
    ItemGroup,
    Job,
    ListView,
    Workspace,
    validate_name,
)

logger = logging.getLogger(__name__)


def _to_object(record: ItemRecord) -> Item:
    if record.kind == ItemKind.FOLDER:
        return Folder(record.name, display_name=record.display_name, id=record.id)
    return Job(
        record.name,
        display_name=record.display_name,
        disabled=record.disabled,
        id=record.id,
    )


class WorkspaceRepository:
    """Reads and writes the workspace tree through an AsyncSession."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def load(self) -> Workspace:
        """
        Build a point-in-time Workspace from the stored rows.

        Rows are read once and in insertion order, which becomes declaration
        order in the snapshot. Rows that no longer fit the tree (orphans,
        duplicate names) are skipped with a warning.
        """
        item_rows = (
            await self.db.execute(select(ItemRecord).order_by(ItemRecord.id))
        ).scalars().all()
        view_rows = (
            await self.db.execute(select(ViewRecord).order_by(ViewRecord.id))
        ).scalars().all()
        member_rows = (
            await self.db.execute(
                select(ViewMemberRecord).order_by(
                    ViewMemberRecord.view_id, ViewMemberRecord.item_id
                )
            )
        ).scalars().all()

        workspace = Workspace()
        by_id: Dict[int, Item] = {}
        for record in item_rows:
            parent = workspace if record.parent_id is None else by_id.get(record.parent_id)
            if not isinstance(parent, ItemGroup):
                logger.warning(f"Skipping item {record.id}: parent {record.parent_id} is not loaded")
                continue
            item = _to_object(record)
            try:
                parent.add_item(item)
            except DuplicateItemError as e:
                logger.warning(f"Skipping item {record.id}: {e}")
                continue
            by_id[record.id] = item

        views_by_id: Dict[int, ListView] = {}
        for record in view_rows:
            view = workspace.add_view(ListView(record.name, id=record.id))
            views_by_id[record.id] = view
            if record.is_primary:
                workspace.set_primary_view(view)

        for member in member_rows:
            view = views_by_id.get(member.view_id)
            item = by_id.get(member.item_id)
            if view is not None and item is not None:
                view.add(item)

        logger.debug(
            f"Loaded workspace snapshot with {len(by_id)} item(s) and {len(views_by_id)} view(s)"
        )
        return workspace

    async def _find_child(self, parent_id: Optional[int], name: str) -> Optional[ItemRecord]:
        stmt = select(ItemRecord).where(ItemRecord.name == name)
        if parent_id is None:
            stmt = stmt.where(ItemRecord.parent_id.is_(None))
        else:
            stmt = stmt.where(ItemRecord.parent_id == parent_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_record(self, full_name: str) -> ItemRecord:
        """Look up an item by its full name, e.g. ``folder1/myjob``."""
        record: Optional[ItemRecord] = None
        parent_id: Optional[int] = None
        for name in full_name.strip(FULL_NAME_SEPARATOR).split(FULL_NAME_SEPARATOR):
            record = await self._find_child(parent_id, name)
            if record is None:
                raise ItemNotFoundError(f"No item named {full_name!r}")
            parent_id = record.id
        if record is None:
            raise ItemNotFoundError(f"No item named {full_name!r}")
        return record

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

    async def create_item(
        self,
        name: str,
        kind: ItemKind = ItemKind.JOB,
        display_name: Optional[str] = None,
        parent: Optional[str] = None,
    ) -> ItemRecord:
        validate_name(name)
        parent_id = None
        if parent:
            parent_record = await self.get_record(parent)
            if parent_record.kind != ItemKind.FOLDER:
                raise InvalidParentError(f"{parent!r} is not a folder")
            parent_id = parent_record.id

        if await self._find_child(parent_id, name) is not None:
            raise DuplicateItemError(f"An item named {name!r} already exists")

        record = ItemRecord(
            parent_id=parent_id,
            kind=kind,
            name=name,
            display_name=display_name or None,
            disabled=False,
        )
        self.db.add(record)
        try:
            await self._commit()
        except IntegrityError as e:
            raise DuplicateItemError(f"An item named {name!r} already exists") from e
        await self.db.refresh(record)
        logger.info(f"Created {kind.value} {record.id} named {name!r} under {parent or 'the workspace root'}")
        return record

    async def update_item(self, full_name: str, **changes) -> ItemRecord:
        """Apply ``display_name`` and/or ``disabled`` changes to an item."""
        record = await self.get_record(full_name)
        if "display_name" in changes:
            record.display_name = changes["display_name"] or None
        if "disabled" in changes and changes["disabled"] is not None:
            if record.kind != ItemKind.JOB:
                raise UnsupportedOperationError(f"{full_name!r} is a folder and cannot be disabled")
            record.disabled = changes["disabled"]
        await self._commit()
        await self.db.refresh(record)
        logger.info(f"Updated item {record.id}: {sorted(changes)}")
        return record

    async def _descendant_ids(self, root_id: int) -> List[int]:
        ids = [root_id]
        frontier = [root_id]
        while frontier:
            result = await self.db.execute(
                select(ItemRecord.id).where(ItemRecord.parent_id.in_(frontier))
            )
            frontier = [row for row in result.scalars().all() if row not in ids]
            ids.extend(frontier)
        return ids

    async def delete_item(self, full_name: str) -> None:
        """Delete an item together with everything below it."""
        record = await self.get_record(full_name)
        ids = await self._descendant_ids(record.id)
        await self.db.execute(delete(ViewMemberRecord).where(ViewMemberRecord.item_id.in_(ids)))
        # Children first so parent references never dangle
        for item_id in reversed(ids):
            await self.db.execute(delete(ItemRecord).where(ItemRecord.id == item_id))
        await self._commit()
        logger.info(f"Deleted item {record.id} and {len(ids) - 1} descendant(s)")

    async def get_view_record(self, name: str) -> ViewRecord:
        result = await self.db.execute(select(ViewRecord).where(ViewRecord.name == name))
        record = result.scalar_one_or_none()
        if record is None:
            raise ItemNotFoundError(f"No view named {name!r}")
        return record

    async def create_view(
        self, name: str, members: Iterable[str] = (), primary: bool = False
    ) -> ViewRecord:
        validate_name(name)
        existing = await self.db.execute(select(ViewRecord).where(ViewRecord.name == name))
        if existing.scalar_one_or_none() is not None:
            raise DuplicateItemError(f"A view named {name!r} already exists")

        member_records = [await self.get_record(full_name) for full_name in members]

        record = ViewRecord(name=name, is_primary=False)
        self.db.add(record)
        seen = set()
        try:
            await self.db.flush()
            for member in member_records:
                if member.id not in seen:
                    seen.add(member.id)
                    self.db.add(ViewMemberRecord(view_id=record.id, item_id=member.id))
            await self._commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise DuplicateItemError(f"A view named {name!r} already exists") from e
        await self.db.refresh(record)
        logger.info(f"Created view {record.id} named {name!r} with {len(seen)} member(s)")

        if primary:
            record = await self.set_primary_view(name)
        return record

    async def add_view_member(self, name: str, full_name: str) -> None:
        view = await self.get_view_record(name)
        item = await self.get_record(full_name)
        existing = await self.db.get(ViewMemberRecord, (view.id, item.id))
        if existing is None:
            self.db.add(ViewMemberRecord(view_id=view.id, item_id=item.id))
            await self._commit()

    async def set_primary_view(self, name: str) -> ViewRecord:
        record = await self.get_view_record(name)
        others = await self.db.execute(select(ViewRecord).where(ViewRecord.is_primary.is_(True)))
        for other in others.scalars().all():
            other.is_primary = False
        record.is_primary = True
        await self._commit()
        await self.db.refresh(record)
        logger.info(f"Primary view is now {name!r}")
        return record
