"""Repository for investors and their capital balances."""

from __future__ import annotations

from typing import Optional

from dealership_manager.domain.models import Investor
from dealership_manager.repositories.base import SqliteRepository
from dealership_manager.repositories.mappers import (
    investor_from_row,
    investor_to_record,
)


class InvestorRepo(SqliteRepository):
    """Data access for the investors table."""

    table = "investors"

    def list_all(self) -> list[Investor]:
        rows = self._fetch_all(
            "SELECT * FROM investors ORDER BY name",
            context="list investors",
        )
        return [investor_from_row(row) for row in rows]

    def get_by_id(self, investor_id: str) -> Optional[Investor]:
        row = self._fetch_one(
            "SELECT * FROM investors WHERE id = ?",
            (investor_id,),
            context=f"get investor id={investor_id}",
        )
        return investor_from_row(row) if row else None

    def insert(self, investor: Investor) -> Investor:
        self._insert_record(
            investor_to_record(investor),
            context=f"insert investor id={investor.id}",
        )
        return investor

    def get_balance(self, investor_id: str) -> Optional[float]:
        row = self._fetch_one(
            "SELECT balance FROM investors WHERE id = ?",
            (investor_id,),
            context=f"get balance investor id={investor_id}",
        )
        return float(row["balance"]) if row else None

    def set_balance(self, investor_id: str, balance: float) -> bool:
        cursor = self._execute(
            "UPDATE investors SET balance = ? WHERE id = ?",
            (balance, investor_id),
            context=f"set balance investor id={investor_id}",
        )
        return cursor.rowcount > 0

    def decrement_balance(self, investor_id: str, delta: float) -> bool:
        cursor = self._execute(
            "UPDATE investors SET balance = balance - ? WHERE id = ?",
            (delta, investor_id),
            context=f"decrement balance investor id={investor_id}",
        )
        return cursor.rowcount > 0
