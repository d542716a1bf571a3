"""Repository for installment contracts."""

from __future__ import annotations

from typing import Optional

from dealership_manager.domain.models import InstallmentContract
from dealership_manager.repositories.base import SqliteRepository
from dealership_manager.repositories.mappers import (
    contract_from_row,
    contract_to_record,
)


class ContractRepo(SqliteRepository):
    """Data access for the contracts table."""

    table = "contracts"

    def list_all(self) -> list[InstallmentContract]:
        rows = self._fetch_all(
            "SELECT * FROM contracts ORDER BY created_at DESC, id DESC",
            context="list contracts",
        )
        return [contract_from_row(row) for row in rows]

    def get_by_id(self, contract_id: str) -> Optional[InstallmentContract]:
        row = self._fetch_one(
            "SELECT * FROM contracts WHERE id = ?",
            (contract_id,),
            context=f"get contract id={contract_id}",
        )
        return contract_from_row(row) if row else None

    def insert(self, contract: InstallmentContract) -> InstallmentContract:
        self._insert_record(
            contract_to_record(contract),
            context=f"insert contract id={contract.id}",
        )
        return contract
