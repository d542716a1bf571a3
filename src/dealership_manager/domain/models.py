"""Domain dataclasses and enums."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class InventoryStatus(str, Enum):
    AVAILABLE = "available"
    SOLD = "sold"


class ShowroomStatus(str, Enum):
    RECEIVED = "received"
    SOLD = "sold"
    RETURNED = "returned"


class AssetStatus(str, Enum):
    """Status vocabulary shared by both asset tables."""

    AVAILABLE = "available"
    SOLD = "sold"


class ContractType(str, Enum):
    PROMISSORY_NOTE = "promissory_note"
    DIRECT_INSTALLMENT = "direct_installment"
    BANK_CHECKS = "bank_checks"


class SaleMode(str, Enum):
    INSTALLMENT = "installment"
    CREDIT = "credit"


class ContractStatus(str, Enum):
    ACTIVE = "active"
    CLOSED = "closed"


class InstallmentStatus(str, Enum):
    PENDING = "Pending"
    PAID = "Paid"
    OVERDUE = "Overdue"


OUTSTANDING_STATUSES = (InstallmentStatus.PENDING, InstallmentStatus.OVERDUE)


@dataclass(slots=True)
class InventoryItem:
    id: str
    type: str
    model: str
    plate_number: str
    vin: str
    price: float
    status: InventoryStatus = InventoryStatus.AVAILABLE


@dataclass(slots=True)
class ShowroomItem:
    id: str
    owner_name: str
    owner_phone: str
    type: str
    plate_number: str
    previous_price: float
    selling_price: float
    condition: str
    entry_date: str
    status: ShowroomStatus = ShowroomStatus.RECEIVED


@dataclass(slots=True)
class Investor:
    id: str
    name: str
    id_number: str
    phone: str
    balance: float
    id_expiry: Optional[str] = None
    email: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Buyer:
    id: str
    name: str
    id_number: str
    phone: str
    id_expiry: Optional[str] = None
    job: Optional[str] = None
    address: Optional[str] = None
    email: Optional[str] = None


@dataclass(slots=True)
class InstallmentContract:
    id: str
    manual_id: str
    type: ContractType
    created_at: str
    buyer_id: str
    investor_id: str
    asset_ids: list[str]
    total_item_value: float
    service_fee: float
    total_amount: float
    sale_mode: SaleMode = SaleMode.INSTALLMENT
    status: ContractStatus = ContractStatus.ACTIVE
    guarantor_id: Optional[str] = None
    notes: Optional[str] = None


@dataclass(slots=True)
class Installment:
    id: str
    contract_id: str
    due_date: str
    amount: float
    status: InstallmentStatus = InstallmentStatus.PENDING
    paid_date: Optional[str] = None


@dataclass(slots=True)
class TitleTransferContract:
    id: str
    manual_id: str
    created_at: str
    seller_name: str
    seller_id_number: str
    buyer_name: str
    buyer_id_number: str
    vehicle_type: str
    vehicle_model: str
    plate_number: str
    vin: str
    price: float
    service_fees: float


@dataclass(frozen=True, slots=True)
class OwnedAsset:
    """Dealership-owned vehicle from the inventory table."""

    item: InventoryItem

    @property
    def asset_id(self) -> str:
        return self.item.id

    @property
    def price(self) -> float:
        return float(self.item.price)

    @property
    def is_available(self) -> bool:
        return self.item.status == InventoryStatus.AVAILABLE

    @property
    def label(self) -> str:
        return f"{self.item.type} {self.item.model}".strip()


@dataclass(frozen=True, slots=True)
class ConsignedAsset:
    """Vehicle held in the showroom on behalf of its owner."""

    item: ShowroomItem

    @property
    def asset_id(self) -> str:
        return self.item.id

    @property
    def price(self) -> float:
        return float(self.item.selling_price)

    @property
    def is_available(self) -> bool:
        return self.item.status == ShowroomStatus.RECEIVED

    @property
    def label(self) -> str:
        return f"{self.item.type} (consignment)"


Asset = Union[OwnedAsset, ConsignedAsset]


@dataclass(slots=True)
class ContractWithDetails:
    """Contract joined with its parties and schedule, used for printing."""

    contract: InstallmentContract
    buyer: Optional[Buyer]
    investor: Optional[Investor]
    guarantor: Optional[Buyer] = None
    installments: list[Installment] = field(default_factory=list)
    assets: list[Asset] = field(default_factory=list)
