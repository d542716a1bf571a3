"""Title-transfer sale records."""

from __future__ import annotations

import sqlite3
from datetime import datetime
from typing import Optional

from dealership_manager.db.connection import transaction
from dealership_manager.domain.models import TitleTransferContract
from dealership_manager.logging_config import get_logger
from dealership_manager.repositories import TitleTransferRepo
from dealership_manager.services.validation import parse_amount, require_text
from dealership_manager.utils.ids import new_id


def _now_iso() -> str:
    return datetime.now().isoformat(timespec="seconds")


class TitleTransferService:
    """Records one-shot transfers; inventory and balances are untouched."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._connection.row_factory = sqlite3.Row
        self._repo = TitleTransferRepo(connection)
        self._logger = get_logger(self.__class__.__name__)

    def list_transfers(self) -> list[TitleTransferContract]:
        return self._repo.list_all()

    def create_transfer(
        self,
        *,
        seller_name: str,
        seller_id_number: str,
        buyer_name: str,
        buyer_id_number: str,
        vehicle_type: str,
        plate_number: str,
        price: float | str,
        service_fees: float | str = 0,
        vehicle_model: Optional[str] = None,
        vin: Optional[str] = None,
        manual_id: Optional[str] = None,
    ) -> TitleTransferContract:
        contract = TitleTransferContract(
            id=new_id(),
            manual_id=(manual_id or "").strip(),
            created_at=_now_iso(),
            seller_name=require_text(seller_name, "Seller name"),
            seller_id_number=require_text(seller_id_number, "Seller id number"),
            buyer_name=require_text(buyer_name, "Buyer name"),
            buyer_id_number=require_text(buyer_id_number, "Buyer id number"),
            vehicle_type=require_text(vehicle_type, "Vehicle type"),
            vehicle_model=(vehicle_model or "").strip(),
            plate_number=require_text(plate_number, "Plate number"),
            vin=(vin or "").strip(),
            price=parse_amount(price, "Price", minimum=0),
            service_fees=parse_amount(service_fees, "Service fees", minimum=0),
        )
        with transaction(self._connection):
            self._repo.insert(contract)
        self._logger.info("Title transfer %s recorded", contract.id)
        return contract
