"""Dashboard aggregation."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

from dealership_manager.db.schema import missing_tables
from dealership_manager.domain.models import (
    OUTSTANDING_STATUSES,
    ContractStatus,
    InstallmentStatus,
)
from dealership_manager.logging_config import get_logger
from dealership_manager.repositories import (
    ContractRepo,
    InstallmentRepo,
    InvestorRepo,
    ShowroomRepo,
)


@dataclass(frozen=True)
class DashboardStats:
    active_contracts: int
    total_outstanding: float
    total_collected: float
    showroom_count: int
    total_investors_balance: float
    missing_tables: tuple[str, ...] = ()

    @property
    def schema_ready(self) -> bool:
        return not self.missing_tables


class ReportService:
    """Read-only summaries over contracts, installments and balances."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._connection.row_factory = sqlite3.Row
        self._contract_repo = ContractRepo(connection)
        self._installment_repo = InstallmentRepo(connection)
        self._showroom_repo = ShowroomRepo(connection)
        self._investor_repo = InvestorRepo(connection)
        self._logger = get_logger(self.__class__.__name__)

    def dashboard(self) -> DashboardStats:
        missing = tuple(missing_tables(self._connection))
        if missing:
            self._logger.warning("Database not provisioned, missing: %s", ", ".join(missing))
        contracts = self._contract_repo.list_all()
        installments = self._installment_repo.list_all()
        outstanding = sum(
            item.amount for item in installments if item.status in OUTSTANDING_STATUSES
        )
        collected = sum(
            item.amount for item in installments if item.status == InstallmentStatus.PAID
        )
        return DashboardStats(
            active_contracts=sum(
                1 for contract in contracts if contract.status == ContractStatus.ACTIVE
            ),
            total_outstanding=outstanding,
            total_collected=collected,
            showroom_count=len(self._showroom_repo.list_all()),
            total_investors_balance=sum(
                investor.balance for investor in self._investor_repo.list_all()
            ),
            missing_tables=missing,
        )
