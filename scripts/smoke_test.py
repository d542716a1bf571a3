"""Smoke test for core business flows."""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path
import sys

ROOT_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT_DIR / "src"))

from dealership_manager.db.connection import get_connection  # noqa: E402
from dealership_manager.db.migrations import apply_migrations  # noqa: E402
from dealership_manager.domain.models import SaleMode  # noqa: E402
from dealership_manager.services.app_services import AppServices  # noqa: E402
from dealership_manager.services.contract_service import ContractDraft  # noqa: E402
from dealership_manager.utils.company_settings import CompanySettings  # noqa: E402
from dealership_manager.utils.exports import export_buyers_csv  # noqa: E402
from dealership_manager.utils.pdf_generator import (  # noqa: E402
    generate_contract_pdf,
    generate_title_transfer_pdf,
)


def main() -> None:
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        db_path = temp_path / "smoke_test.db"
        connection = get_connection(db_path)
        try:
            apply_migrations(connection)
            services = AppServices.from_connection(connection)

            buyer = services.directory_service.add_buyer(
                name="Smoke Buyer",
                phone="01000000000",
                id_number="29001010000000",
            )
            investor = services.directory_service.add_investor(
                name="Smoke Capital",
                balance=500000,
            )
            owned = services.inventory_service.add_inventory_item(
                vehicle_type="Toyota",
                model="Corolla",
                price=200000,
            )
            consigned = services.inventory_service.add_showroom_item(
                owner_name="Smoke Owner",
                vehicle_type="Kia Cerato",
                plate_number="SMK 1",
                selling_price=150000,
            )
            credit_car = services.inventory_service.add_inventory_item(
                vehicle_type="Nissan",
                price=90000,
            )

            contract = services.contract_service.create_contract(
                ContractDraft(
                    buyer_id=buyer.id,
                    investor_id=investor.id,
                    asset_ids=[owned.id, consigned.id],
                    service_fee=20000,
                    months=12,
                )
            )
            services.contract_service.create_contract(
                ContractDraft(
                    buyer_id=buyer.id,
                    investor_id=investor.id,
                    asset_ids=[credit_car.id],
                    sale_mode=SaleMode.CREDIT,
                    credit_due_date=date.today().replace(day=1).isoformat(),
                )
            )

            first = services.installment_service.list_by_contract(contract.id)[0]
            services.installment_service.pay_installment(first.id)
            services.installment_service.mark_overdue()

            transfer = services.title_transfer_service.create_transfer(
                seller_name="Smoke Seller",
                seller_id_number="1",
                buyer_name=buyer.name,
                buyer_id_number=buyer.id_number,
                vehicle_type="Hyundai",
                plate_number="SMK 2",
                price=120000,
            )

            company = CompanySettings(company_name="Smoke Motors")
            details = services.contract_service.get_contract_details(contract.id)
            generate_contract_pdf(details, temp_path / "contract.pdf", company=company)
            generate_title_transfer_pdf(
                transfer, temp_path / "transfer.pdf", company=company
            )
            export_buyers_csv(
                services.directory_service.list_buyers(), temp_path / "buyers.csv"
            )

            stats = services.report_service.dashboard()
            if stats.active_contracts != 2:
                raise RuntimeError("Expected two active contracts.")
            if services.balance_ledger.get_balance(investor.id) != 60000:
                raise RuntimeError("Investor balance was not debited.")
        finally:
            connection.close()

    print("OK")


if __name__ == "__main__":
    main()
