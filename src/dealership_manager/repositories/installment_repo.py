"""Repository for scheduled installments."""

from __future__ import annotations

from typing import Iterable, Optional

from dealership_manager.domain.models import Installment, InstallmentStatus
from dealership_manager.repositories.base import SqliteRepository
from dealership_manager.repositories.mappers import (
    installment_from_row,
    installment_to_record,
)


class InstallmentRepo(SqliteRepository):
    """Data access for the installments table."""

    table = "installments"

    def list_by_contract(self, contract_id: str) -> list[Installment]:
        rows = self._fetch_all(
            """
            SELECT *
            FROM installments
            WHERE contract_id = ?
            ORDER BY due_date, id
            """,
            (contract_id,),
            context=f"list installments contract_id={contract_id}",
        )
        return [installment_from_row(row) for row in rows]

    def list_all(self) -> list[Installment]:
        rows = self._fetch_all(
            "SELECT * FROM installments ORDER BY due_date, id",
            context="list installments",
        )
        return [installment_from_row(row) for row in rows]

    def get_by_id(self, installment_id: str) -> Optional[Installment]:
        row = self._fetch_one(
            "SELECT * FROM installments WHERE id = ?",
            (installment_id,),
            context=f"get installment id={installment_id}",
        )
        return installment_from_row(row) if row else None

    def insert_many(self, installments: Iterable[Installment]) -> int:
        count = 0
        for installment in installments:
            self._insert_record(
                installment_to_record(installment),
                context=f"insert installment id={installment.id}",
            )
            count += 1
        return count

    def mark_paid(self, installment_id: str, paid_date: str) -> bool:
        cursor = self._execute(
            """
            UPDATE installments
            SET status = ?,
                paid_date = ?
            WHERE id = ?
            """,
            (InstallmentStatus.PAID.value, paid_date, installment_id),
            context=f"mark installment paid id={installment_id}",
        )
        return cursor.rowcount > 0

    def mark_overdue_before(self, reference_date: str) -> int:
        cursor = self._execute(
            """
            UPDATE installments
            SET status = ?
            WHERE status = ?
              AND date(due_date) < date(?)
            """,
            (
                InstallmentStatus.OVERDUE.value,
                InstallmentStatus.PENDING.value,
                reference_date,
            ),
            context="mark overdue installments",
        )
        return cursor.rowcount
