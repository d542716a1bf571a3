"""Repository for the buyer directory."""

from __future__ import annotations

from typing import Optional

from dealership_manager.domain.models import Buyer
from dealership_manager.repositories.base import SqliteRepository
from dealership_manager.repositories.mappers import buyer_from_row, buyer_to_record


class BuyerRepo(SqliteRepository):
    """Insert-only data access for buyers."""

    table = "buyers"

    def list_all(self) -> list[Buyer]:
        rows = self._fetch_all(
            "SELECT * FROM buyers ORDER BY name",
            context="list buyers",
        )
        return [buyer_from_row(row) for row in rows]

    def get_by_id(self, buyer_id: str) -> Optional[Buyer]:
        row = self._fetch_one(
            "SELECT * FROM buyers WHERE id = ?",
            (buyer_id,),
            context=f"get buyer id={buyer_id}",
        )
        return buyer_from_row(row) if row else None

    def insert(self, buyer: Buyer) -> Buyer:
        self._insert_record(
            buyer_to_record(buyer),
            context=f"insert buyer id={buyer.id}",
        )
        return buyer
