"""Repository for title-transfer contracts."""

from __future__ import annotations

from dealership_manager.domain.models import TitleTransferContract
from dealership_manager.repositories.base import SqliteRepository
from dealership_manager.repositories.mappers import (
    title_transfer_from_row,
    title_transfer_to_record,
)


class TitleTransferRepo(SqliteRepository):
    """Data access for the title_transfers table."""

    table = "title_transfers"

    def list_all(self) -> list[TitleTransferContract]:
        rows = self._fetch_all(
            "SELECT * FROM title_transfers ORDER BY created_at DESC, id DESC",
            context="list title transfers",
        )
        return [title_transfer_from_row(row) for row in rows]

    def insert(self, contract: TitleTransferContract) -> TitleTransferContract:
        self._insert_record(
            title_transfer_to_record(contract),
            context=f"insert title transfer id={contract.id}",
        )
        return contract
