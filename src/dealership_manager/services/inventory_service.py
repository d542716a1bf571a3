"""Vehicle intake for owned inventory and showroom consignments."""

from __future__ import annotations

import sqlite3
from datetime import datetime
from typing import Optional

from dealership_manager.db.connection import transaction
from dealership_manager.domain.models import (
    InventoryItem,
    InventoryStatus,
    ShowroomItem,
    ShowroomStatus,
)
from dealership_manager.logging_config import get_logger
from dealership_manager.repositories import InventoryRepo, ShowroomRepo
from dealership_manager.services.errors import NotFoundError, ValidationError
from dealership_manager.services.validation import (
    optional_text,
    parse_amount,
    require_text,
)
from dealership_manager.utils.ids import new_id

NEW_PLATE_LABEL = "new"


def _now_iso() -> str:
    return datetime.now().isoformat(timespec="seconds")


class InventoryService:
    """Service for inventory and showroom registration."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._connection.row_factory = sqlite3.Row
        self._inventory_repo = InventoryRepo(connection)
        self._showroom_repo = ShowroomRepo(connection)
        self._logger = get_logger(self.__class__.__name__)

    def list_inventory(self, *, only_available: bool = False) -> list[InventoryItem]:
        items = self._inventory_repo.list_all()
        if only_available:
            return [item for item in items if item.status == InventoryStatus.AVAILABLE]
        return items

    def list_showroom(self, *, only_received: bool = False) -> list[ShowroomItem]:
        items = self._showroom_repo.list_all()
        if only_received:
            return [item for item in items if item.status == ShowroomStatus.RECEIVED]
        return items

    def add_inventory_item(
        self,
        vehicle_type: str,
        price: float | str,
        model: Optional[str] = None,
        plate_number: Optional[str] = None,
        vin: Optional[str] = None,
    ) -> InventoryItem:
        item = InventoryItem(
            id=new_id(),
            type=require_text(vehicle_type, "Vehicle type"),
            model=optional_text(model),
            plate_number=optional_text(plate_number, NEW_PLATE_LABEL),
            vin=optional_text(vin),
            price=parse_amount(price, "Price", minimum=0),
            status=InventoryStatus.AVAILABLE,
        )
        with transaction(self._connection):
            self._inventory_repo.insert(item)
        self._logger.info("Inventory vehicle %s registered", item.id)
        return item

    def add_showroom_item(
        self,
        owner_name: str,
        vehicle_type: str,
        plate_number: str,
        selling_price: float | str,
        owner_phone: Optional[str] = None,
        previous_price: float | str | None = None,
        condition: Optional[str] = None,
    ) -> ShowroomItem:
        payout = 0.0
        if previous_price not in (None, ""):
            payout = parse_amount(previous_price, "Previous price", minimum=0)
        item = ShowroomItem(
            id=new_id(),
            owner_name=require_text(owner_name, "Owner name"),
            owner_phone=optional_text(owner_phone),
            type=require_text(vehicle_type, "Vehicle type"),
            plate_number=require_text(plate_number, "Plate number"),
            previous_price=payout,
            selling_price=parse_amount(selling_price, "Selling price", minimum=0),
            condition=optional_text(condition),
            entry_date=_now_iso(),
            status=ShowroomStatus.RECEIVED,
        )
        if item.selling_price <= 0:
            raise ValidationError("Selling price is required.")
        with transaction(self._connection):
            self._showroom_repo.insert(item)
        self._logger.info("Showroom vehicle %s received from %s", item.id, item.owner_name)
        return item

    def return_to_owner(self, item_id: str) -> ShowroomItem:
        item = self._showroom_repo.get_by_id(item_id)
        if not item:
            raise NotFoundError(f"Showroom vehicle {item_id} not found.")
        if item.status != ShowroomStatus.RECEIVED:
            raise ValidationError(
                f"Showroom vehicle {item_id} is {item.status.value} and cannot be returned."
            )
        with transaction(self._connection):
            self._showroom_repo.update_status(item_id, ShowroomStatus.RETURNED)
        item.status = ShowroomStatus.RETURNED
        self._logger.info("Showroom vehicle %s returned to owner", item_id)
        return item
