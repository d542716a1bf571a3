"""Installment collection and overdue tracking."""

from __future__ import annotations

import sqlite3
from datetime import date, datetime
from typing import Optional

from dealership_manager.db.connection import transaction
from dealership_manager.domain.models import Installment
from dealership_manager.logging_config import get_logger
from dealership_manager.repositories import InstallmentRepo
from dealership_manager.services.errors import NotFoundError


def _now_iso() -> str:
    return datetime.now().isoformat(timespec="microseconds")


class InstallmentService:
    """Service for installment operations."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._connection.row_factory = sqlite3.Row
        self._repo = InstallmentRepo(connection)
        self._logger = get_logger(self.__class__.__name__)

    def list_by_contract(self, contract_id: str) -> list[Installment]:
        return self._repo.list_by_contract(contract_id)

    def list_all(self) -> list[Installment]:
        return self._repo.list_all()

    def pay_installment(
        self,
        installment_id: str,
        paid_at: Optional[str] = None,
    ) -> Installment:
        """Mark an installment as paid, overwriting any earlier payment date.

        Collected cash is not credited back to the funding investor.
        """
        paid_date = paid_at or _now_iso()
        with transaction(self._connection):
            updated = self._repo.mark_paid(installment_id, paid_date)
        if not updated:
            raise NotFoundError(f"Installment {installment_id} not found.")
        self._logger.info("Installment %s paid at %s", installment_id, paid_date)
        installment = self._repo.get_by_id(installment_id)
        if not installment:
            raise NotFoundError(f"Installment {installment_id} not found.")
        return installment

    def mark_overdue(self, reference_date: Optional[date] = None) -> int:
        reference = (reference_date or date.today()).isoformat()
        with transaction(self._connection):
            count = self._repo.mark_overdue_before(reference)
        if count:
            self._logger.info("%d installment(s) marked overdue before %s", count, reference)
        return count
