"""Repositories for data access."""

from dealership_manager.repositories.buyer_repo import BuyerRepo
from dealership_manager.repositories.contract_repo import ContractRepo
from dealership_manager.repositories.installment_repo import InstallmentRepo
from dealership_manager.repositories.inventory_repo import InventoryRepo
from dealership_manager.repositories.investor_repo import InvestorRepo
from dealership_manager.repositories.showroom_repo import ShowroomRepo
from dealership_manager.repositories.title_transfer_repo import TitleTransferRepo

__all__ = [
    "BuyerRepo",
    "ContractRepo",
    "InstallmentRepo",
    "InventoryRepo",
    "InvestorRepo",
    "ShowroomRepo",
    "TitleTransferRepo",
]
