"""Service container for the command-line layer."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

from dealership_manager.services.asset_registry import AssetRegistry
from dealership_manager.services.balance_ledger import BalanceLedger
from dealership_manager.services.contract_service import ContractService
from dealership_manager.services.directory_service import DirectoryService
from dealership_manager.services.installment_service import InstallmentService
from dealership_manager.services.inventory_service import InventoryService
from dealership_manager.services.report_service import ReportService
from dealership_manager.services.title_transfer_service import TitleTransferService


@dataclass(frozen=True)
class AppServices:
    """Shared services for dependency injection."""

    connection: sqlite3.Connection
    asset_registry: AssetRegistry
    balance_ledger: BalanceLedger
    contract_service: ContractService
    directory_service: DirectoryService
    installment_service: InstallmentService
    inventory_service: InventoryService
    report_service: ReportService
    title_transfer_service: TitleTransferService

    @classmethod
    def from_connection(cls, connection: sqlite3.Connection) -> "AppServices":
        return cls(
            connection=connection,
            asset_registry=AssetRegistry(connection),
            balance_ledger=BalanceLedger(connection),
            contract_service=ContractService(connection),
            directory_service=DirectoryService(connection),
            installment_service=InstallmentService(connection),
            inventory_service=InventoryService(connection),
            report_service=ReportService(connection),
            title_transfer_service=TitleTransferService(connection),
        )
