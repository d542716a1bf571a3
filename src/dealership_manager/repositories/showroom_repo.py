"""Repository for consigned showroom vehicles."""

from __future__ import annotations

from typing import Optional

from dealership_manager.domain.models import ShowroomItem, ShowroomStatus
from dealership_manager.repositories.base import SqliteRepository
from dealership_manager.repositories.mappers import (
    showroom_from_row,
    showroom_to_record,
)


class ShowroomRepo(SqliteRepository):
    """Data access for the showroom table."""

    table = "showroom"

    def list_all(self) -> list[ShowroomItem]:
        rows = self._fetch_all(
            "SELECT * FROM showroom ORDER BY entry_date DESC, id",
            context="list showroom items",
        )
        return [showroom_from_row(row) for row in rows]

    def get_by_id(self, item_id: str) -> Optional[ShowroomItem]:
        row = self._fetch_one(
            "SELECT * FROM showroom WHERE id = ?",
            (item_id,),
            context=f"get showroom item id={item_id}",
        )
        return showroom_from_row(row) if row else None

    def insert(self, item: ShowroomItem) -> ShowroomItem:
        self._insert_record(
            showroom_to_record(item),
            context=f"insert showroom item id={item.id}",
        )
        return item

    def update_status(self, item_id: str, status: ShowroomStatus) -> bool:
        cursor = self._execute(
            "UPDATE showroom SET status = ? WHERE id = ?",
            (ShowroomStatus(status).value, item_id),
            context=f"update showroom status id={item_id}",
        )
        return cursor.rowcount > 0

    def mark_sold_if_received(self, item_id: str) -> bool:
        cursor = self._execute(
            """
            UPDATE showroom
            SET status = ?
            WHERE id = ?
              AND status = ?
            """,
            (ShowroomStatus.SOLD.value, item_id, ShowroomStatus.RECEIVED.value),
            context=f"mark showroom item sold id={item_id}",
        )
        return cursor.rowcount > 0
