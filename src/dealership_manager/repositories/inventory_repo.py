"""Repository for owned inventory vehicles."""

from __future__ import annotations

from typing import Optional

from dealership_manager.domain.models import InventoryItem, InventoryStatus
from dealership_manager.repositories.base import SqliteRepository
from dealership_manager.repositories.mappers import (
    inventory_from_row,
    inventory_to_record,
)


class InventoryRepo(SqliteRepository):
    """Data access for the inventory table."""

    table = "inventory"

    def list_all(self) -> list[InventoryItem]:
        rows = self._fetch_all(
            "SELECT * FROM inventory ORDER BY id",
            context="list inventory",
        )
        return [inventory_from_row(row) for row in rows]

    def get_by_id(self, item_id: str) -> Optional[InventoryItem]:
        row = self._fetch_one(
            "SELECT * FROM inventory WHERE id = ?",
            (item_id,),
            context=f"get inventory item id={item_id}",
        )
        return inventory_from_row(row) if row else None

    def insert(self, item: InventoryItem) -> InventoryItem:
        self._insert_record(
            inventory_to_record(item),
            context=f"insert inventory item id={item.id}",
        )
        return item

    def update_status(self, item_id: str, status: InventoryStatus) -> bool:
        cursor = self._execute(
            "UPDATE inventory SET status = ? WHERE id = ?",
            (InventoryStatus(status).value, item_id),
            context=f"update inventory status id={item_id}",
        )
        return cursor.rowcount > 0

    def mark_sold_if_available(self, item_id: str) -> bool:
        cursor = self._execute(
            """
            UPDATE inventory
            SET status = ?
            WHERE id = ?
              AND status = ?
            """,
            (InventoryStatus.SOLD.value, item_id, InventoryStatus.AVAILABLE.value),
            context=f"mark inventory item sold id={item_id}",
        )
        return cursor.rowcount > 0
