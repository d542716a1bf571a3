"""Lookup and status tracking for financed vehicles."""

from __future__ import annotations

import sqlite3
from typing import Iterable

from dealership_manager.db.connection import transaction
from dealership_manager.domain.models import (
    Asset,
    AssetStatus,
    ConsignedAsset,
    InventoryStatus,
    OwnedAsset,
    ShowroomStatus,
)
from dealership_manager.logging_config import get_logger
from dealership_manager.repositories import InventoryRepo, ShowroomRepo
from dealership_manager.services.errors import AssetNotFoundError, ValidationError

SHOWROOM_STATUS_MAP = {
    AssetStatus.AVAILABLE: ShowroomStatus.RECEIVED,
    AssetStatus.SOLD: ShowroomStatus.SOLD,
}


class AssetRegistry:
    """Single view over the inventory and showroom tables.

    Owned and consigned vehicles live in separate tables but are selected
    together when financing a contract. The registry resolves an id to
    exactly one of them and translates the shared available/sold vocabulary
    into the showroom's received/sold statuses.
    """

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._inventory_repo = InventoryRepo(connection)
        self._showroom_repo = ShowroomRepo(connection)
        self._logger = get_logger(self.__class__.__name__)

    def resolve(self, asset_id: str) -> Asset:
        owned = self._inventory_repo.get_by_id(asset_id)
        consigned = self._showroom_repo.get_by_id(asset_id)
        if owned and consigned:
            raise ValidationError(
                f"Vehicle id {asset_id} exists in both inventory and showroom."
            )
        if owned:
            return OwnedAsset(owned)
        if consigned:
            return ConsignedAsset(consigned)
        raise AssetNotFoundError(f"Vehicle {asset_id} not found.")

    def resolve_many(self, asset_ids: Iterable[str]) -> list[Asset]:
        return [self.resolve(asset_id) for asset_id in asset_ids]

    def list_available(self) -> list[Asset]:
        owned = [
            OwnedAsset(item)
            for item in self._inventory_repo.list_all()
            if item.status == InventoryStatus.AVAILABLE
        ]
        consigned = [
            ConsignedAsset(item)
            for item in self._showroom_repo.list_all()
            if item.status == ShowroomStatus.RECEIVED
        ]
        return [*owned, *consigned]

    def set_asset_status(self, asset_id: str, status: AssetStatus | str) -> Asset:
        """Write ``status`` to whichever table holds the vehicle."""
        try:
            target = AssetStatus(status)
        except ValueError as exc:
            raise ValidationError(f"Unknown vehicle status: {status!r}.") from exc
        asset = self.resolve(asset_id)
        with transaction(self._connection):
            if isinstance(asset, OwnedAsset):
                self._inventory_repo.update_status(
                    asset_id, InventoryStatus(target.value)
                )
            else:
                self._showroom_repo.update_status(
                    asset_id, SHOWROOM_STATUS_MAP[target]
                )
        self._logger.info("Vehicle %s set to %s", asset_id, target.value)
        return self.resolve(asset_id)

    def mark_sold(self, asset: Asset) -> None:
        """Flip an available vehicle to sold, failing if it was sold meanwhile."""
        if isinstance(asset, OwnedAsset):
            updated = self._inventory_repo.mark_sold_if_available(asset.asset_id)
        else:
            updated = self._showroom_repo.mark_sold_if_received(asset.asset_id)
        if not updated:
            raise ValidationError(f"Vehicle {asset.asset_id} is no longer available.")
        self._logger.info("Vehicle %s marked as sold", asset.asset_id)
