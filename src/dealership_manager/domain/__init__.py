"""Domain models for DealershipManager."""

from dealership_manager.domain.models import (
    Asset,
    AssetStatus,
    Buyer,
    ConsignedAsset,
    ContractStatus,
    ContractType,
    ContractWithDetails,
    Installment,
    InstallmentContract,
    InstallmentStatus,
    InventoryItem,
    InventoryStatus,
    Investor,
    OwnedAsset,
    SaleMode,
    ShowroomItem,
    ShowroomStatus,
    TitleTransferContract,
)

__all__ = [
    "Asset",
    "AssetStatus",
    "Buyer",
    "ConsignedAsset",
    "ContractStatus",
    "ContractType",
    "ContractWithDetails",
    "Installment",
    "InstallmentContract",
    "InstallmentStatus",
    "InventoryItem",
    "InventoryStatus",
    "Investor",
    "OwnedAsset",
    "SaleMode",
    "ShowroomItem",
    "ShowroomStatus",
    "TitleTransferContract",
]
