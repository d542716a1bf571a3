"""Installment contract issuance."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from dealership_manager.config import DEFAULT_SCHEDULE_MONTHS
from dealership_manager.db.connection import transaction
from dealership_manager.domain.models import (
    Asset,
    ContractStatus,
    ContractType,
    ContractWithDetails,
    InstallmentContract,
    SaleMode,
)
from dealership_manager.logging_config import get_logger
from dealership_manager.repositories import (
    BuyerRepo,
    ContractRepo,
    InstallmentRepo,
    InvestorRepo,
)
from dealership_manager.services.asset_registry import AssetRegistry
from dealership_manager.services.balance_ledger import BalanceLedger
from dealership_manager.services.errors import (
    AssetNotFoundError,
    NotFoundError,
    ServiceError,
    ValidationError,
)
from dealership_manager.services.schedule import generate_schedule, parse_due_date
from dealership_manager.services.validation import (
    parse_amount,
    parse_whole_number,
)
from dealership_manager.utils.ids import new_id


def _now_iso() -> str:
    return datetime.now().isoformat(timespec="seconds")


@dataclass
class ContractDraft:
    """Unvalidated contract input as collected from the operator."""

    buyer_id: str
    investor_id: str
    asset_ids: list[str]
    service_fee: float | str = 0
    manual_id: str = ""
    contract_type: ContractType | str = ContractType.DIRECT_INSTALLMENT
    sale_mode: SaleMode | str = SaleMode.INSTALLMENT
    months: int | str | None = DEFAULT_SCHEDULE_MONTHS
    credit_due_date: str | date | None = None
    guarantor_id: Optional[str] = None
    notes: Optional[str] = None


class ContractService:
    """Validates, prices and persists installment contracts.

    Creation writes the contract, its schedule, the sold flags of the
    financed vehicles and the investor debit in one transaction: either all
    of them land or none do.
    """

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._connection.row_factory = sqlite3.Row
        self._contract_repo = ContractRepo(connection)
        self._installment_repo = InstallmentRepo(connection)
        self._buyer_repo = BuyerRepo(connection)
        self._investor_repo = InvestorRepo(connection)
        self._registry = AssetRegistry(connection)
        self._ledger = BalanceLedger(connection)
        self._logger = get_logger(self.__class__.__name__)

    def list_contracts(self) -> list[InstallmentContract]:
        return self._contract_repo.list_all()

    def create_contract(
        self,
        draft: ContractDraft,
        *,
        today: Optional[date] = None,
    ) -> InstallmentContract:
        if not (draft.buyer_id or "").strip():
            raise ValidationError("Select a buyer.")
        if not (draft.investor_id or "").strip():
            raise ValidationError("Select an investor.")
        asset_ids = list(dict.fromkeys(a for a in draft.asset_ids or () if a))
        if not asset_ids:
            raise ValidationError("Select at least one vehicle.")

        try:
            contract_type = ContractType(draft.contract_type)
            sale_mode = SaleMode(draft.sale_mode)
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc
        service_fee = parse_amount(draft.service_fee, "Service fee", minimum=0)
        months: Optional[int] = None
        if sale_mode == SaleMode.CREDIT:
            parse_due_date(draft.credit_due_date)
        else:
            months = parse_whole_number(draft.months, "Months")

        self._require_parties(draft)
        assets = self._resolve_available(asset_ids)

        total_item_value = sum(asset.price for asset in assets)
        total_amount = total_item_value + service_fee
        contract_id = new_id()
        installments = generate_schedule(
            contract_id,
            total_item_value,
            service_fee,
            sale_mode,
            months=months,
            credit_due_date=draft.credit_due_date,
            today=today,
        )
        contract = InstallmentContract(
            id=contract_id,
            manual_id=(draft.manual_id or "").strip(),
            type=contract_type,
            sale_mode=sale_mode,
            created_at=_now_iso(),
            buyer_id=draft.buyer_id,
            guarantor_id=draft.guarantor_id or None,
            investor_id=draft.investor_id,
            asset_ids=asset_ids,
            total_item_value=total_item_value,
            service_fee=service_fee,
            total_amount=total_amount,
            status=ContractStatus.ACTIVE,
            notes=draft.notes,
        )

        try:
            with transaction(self._connection):
                self._contract_repo.insert(contract)
                self._installment_repo.insert_many(installments)
                for asset in assets:
                    self._registry.mark_sold(asset)
                self._ledger.adjust_investor_balance(
                    contract.investor_id, total_item_value, commit=False
                )
        except ServiceError as exc:
            self._logger.warning("Contract %s rolled back: %s", contract_id, exc)
            raise

        self._logger.info(
            "Contract %s created: %d vehicle(s), total %.2f in %d installment(s)",
            contract_id,
            len(assets),
            total_amount,
            len(installments),
        )
        return contract

    def get_contract_details(self, contract_id: str) -> ContractWithDetails:
        contract = self._contract_repo.get_by_id(contract_id)
        if not contract:
            raise NotFoundError(f"Contract {contract_id} not found.")
        assets: list[Asset] = []
        for asset_id in contract.asset_ids:
            try:
                assets.append(self._registry.resolve(asset_id))
            except AssetNotFoundError:
                self._logger.warning(
                    "Contract %s references missing vehicle %s", contract_id, asset_id
                )
        return ContractWithDetails(
            contract=contract,
            buyer=self._buyer_repo.get_by_id(contract.buyer_id),
            investor=self._investor_repo.get_by_id(contract.investor_id),
            guarantor=(
                self._buyer_repo.get_by_id(contract.guarantor_id)
                if contract.guarantor_id
                else None
            ),
            installments=self._installment_repo.list_by_contract(contract_id),
            assets=assets,
        )

    def _require_parties(self, draft: ContractDraft) -> None:
        if not self._buyer_repo.get_by_id(draft.buyer_id):
            raise NotFoundError(f"Buyer {draft.buyer_id} not found.")
        if draft.guarantor_id and not self._buyer_repo.get_by_id(draft.guarantor_id):
            raise NotFoundError(f"Guarantor {draft.guarantor_id} not found.")
        if not self._investor_repo.get_by_id(draft.investor_id):
            raise NotFoundError(f"Investor {draft.investor_id} not found.")

    def _resolve_available(self, asset_ids: list[str]) -> list[Asset]:
        assets = self._registry.resolve_many(asset_ids)
        for asset in assets:
            if not asset.is_available:
                raise ValidationError(f"Vehicle {asset.asset_id} is not available.")
        return assets
