"""Application entry point."""

from __future__ import annotations

import argparse
import sqlite3
from pathlib import Path
from typing import Optional, Sequence

from dealership_manager.config import DEFAULT_SCHEDULE_MONTHS, AppConfig
from dealership_manager.db.connection import get_connection
from dealership_manager.db.migrations import apply_migrations
from dealership_manager.domain.models import ContractType, SaleMode
from dealership_manager.logging_config import configure_logging, get_logger
from dealership_manager.paths import (
    get_config_path,
    get_db_path,
    get_exports_dir,
    get_pdfs_dir,
)
from dealership_manager.services.app_services import AppServices
from dealership_manager.services.contract_service import ContractDraft
from dealership_manager.services.errors import PersistenceError, ServiceError
from dealership_manager.utils.company_settings import load_company_settings
from dealership_manager.utils.exports import buyers_export_filename, export_buyers_csv
from dealership_manager.utils.pdf_generator import (
    contract_pdf_filename,
    generate_contract_pdf,
)
from dealership_manager.version import __version__

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    config = AppConfig()
    parser = argparse.ArgumentParser(
        prog="dealership-manager",
        description=f"{config.app_name} back-office tools",
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="SQLite database file (defaults to the user data directory)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init", help="create or migrate the database")
    subparsers.add_parser("dashboard", help="print the dashboard summary")

    pay = subparsers.add_parser("pay", help="mark an installment as paid")
    pay.add_argument("installment_id")

    subparsers.add_parser("mark-overdue", help="flag pending installments past due")

    add_buyer = subparsers.add_parser("add-buyer", help="register a buyer or guarantor")
    add_buyer.add_argument("name")
    add_buyer.add_argument("phone")
    add_buyer.add_argument("--id-number", default=None)
    add_buyer.add_argument("--job", default=None)
    add_buyer.add_argument("--address", default=None)
    add_buyer.add_argument("--email", default=None)

    add_investor = subparsers.add_parser("add-investor", help="register an investor")
    add_investor.add_argument("name")
    add_investor.add_argument("balance")
    add_investor.add_argument("--phone", default=None)
    add_investor.add_argument("--id-number", default=None)

    add_vehicle = subparsers.add_parser("add-vehicle", help="add an owned vehicle to inventory")
    add_vehicle.add_argument("vehicle_type")
    add_vehicle.add_argument("price")
    add_vehicle.add_argument("--model", default=None)
    add_vehicle.add_argument("--plate", default=None)
    add_vehicle.add_argument("--vin", default=None)

    add_consignment = subparsers.add_parser(
        "add-consignment", help="receive a vehicle into the showroom"
    )
    add_consignment.add_argument("owner_name")
    add_consignment.add_argument("vehicle_type")
    add_consignment.add_argument("plate")
    add_consignment.add_argument("selling_price")
    add_consignment.add_argument("--owner-phone", default=None)
    add_consignment.add_argument("--previous-price", default=None)
    add_consignment.add_argument("--condition", default=None)

    create = subparsers.add_parser(
        "create-contract", help="finance vehicles on an installment contract"
    )
    create.add_argument("buyer_id")
    create.add_argument("investor_id")
    create.add_argument("asset_ids", nargs="+")
    create.add_argument("--fee", default="0")
    create.add_argument("--months", default=str(DEFAULT_SCHEDULE_MONTHS))
    create.add_argument(
        "--type",
        dest="contract_type",
        choices=[item.value for item in ContractType],
        default=ContractType.DIRECT_INSTALLMENT.value,
    )
    create.add_argument("--credit-due", default=None, help="single due date for a credit sale")
    create.add_argument("--guarantor", default=None)
    create.add_argument("--manual-id", default="")
    create.add_argument("--notes", default=None)

    export = subparsers.add_parser("export-buyers", help="export buyers to CSV")
    export.add_argument("--output", type=Path, default=None)

    print_contract = subparsers.add_parser(
        "print-contract", help="render an installment contract to PDF"
    )
    print_contract.add_argument("contract_id")
    print_contract.add_argument("--output", type=Path, default=None)
    return parser


def _print_dashboard(services: AppServices) -> None:
    stats = services.report_service.dashboard()
    if not stats.schema_ready:
        print(f"Database not provisioned; missing tables: {', '.join(stats.missing_tables)}")
        print("Run `dealership-manager init` first.")
        return
    print(f"Active contracts:      {stats.active_contracts}")
    print(f"Outstanding amount:    {stats.total_outstanding:,.2f}")
    print(f"Collected amount:      {stats.total_collected:,.2f}")
    print(f"Showroom vehicles:     {stats.showroom_count}")
    print(f"Investors balance:     {stats.total_investors_balance:,.2f}")


def _draft_from_args(args: argparse.Namespace) -> ContractDraft:
    credit = args.credit_due is not None
    return ContractDraft(
        buyer_id=args.buyer_id,
        investor_id=args.investor_id,
        asset_ids=args.asset_ids,
        service_fee=args.fee,
        manual_id=args.manual_id,
        contract_type=args.contract_type,
        sale_mode=SaleMode.CREDIT if credit else SaleMode.INSTALLMENT,
        months=None if credit else args.months,
        credit_due_date=args.credit_due,
        guarantor_id=args.guarantor,
        notes=args.notes,
    )


def run_command(args: argparse.Namespace, connection: sqlite3.Connection) -> int:
    services = AppServices.from_connection(connection)
    if args.command == "init":
        apply_migrations(connection)
        print("Database ready.")
    elif args.command == "dashboard":
        _print_dashboard(services)
    elif args.command == "pay":
        installment = services.installment_service.pay_installment(args.installment_id)
        print(f"Installment {installment.id} paid on {installment.paid_date}.")
    elif args.command == "mark-overdue":
        count = services.installment_service.mark_overdue()
        print(f"{count} installment(s) marked overdue.")
    elif args.command == "add-buyer":
        buyer = services.directory_service.add_buyer(
            args.name,
            args.phone,
            id_number=args.id_number,
            job=args.job,
            address=args.address,
            email=args.email,
        )
        print(f"Buyer {buyer.id} registered.")
    elif args.command == "add-investor":
        investor = services.directory_service.add_investor(
            args.name, args.balance, phone=args.phone, id_number=args.id_number
        )
        print(f"Investor {investor.id} registered.")
    elif args.command == "add-vehicle":
        item = services.inventory_service.add_inventory_item(
            args.vehicle_type,
            args.price,
            model=args.model,
            plate_number=args.plate,
            vin=args.vin,
        )
        print(f"Vehicle {item.id} added to inventory.")
    elif args.command == "add-consignment":
        consigned = services.inventory_service.add_showroom_item(
            owner_name=args.owner_name,
            vehicle_type=args.vehicle_type,
            plate_number=args.plate,
            selling_price=args.selling_price,
            owner_phone=args.owner_phone,
            previous_price=args.previous_price,
            condition=args.condition,
        )
        print(f"Vehicle {consigned.id} received into the showroom.")
    elif args.command == "create-contract":
        contract = services.contract_service.create_contract(_draft_from_args(args))
        print(
            f"Contract {contract.id} created: total {contract.total_amount:,.2f} "
            f"for {len(contract.asset_ids)} vehicle(s)."
        )
    elif args.command == "export-buyers":
        output = args.output or get_exports_dir() / buyers_export_filename()
        export_buyers_csv(services.directory_service.list_buyers(), output)
        print(f"Buyers exported to {output}.")
    elif args.command == "print-contract":
        details = services.contract_service.get_contract_details(args.contract_id)
        output = args.output or get_pdfs_dir() / contract_pdf_filename(details)
        generate_contract_pdf(
            details, output, company=load_company_settings(get_config_path())
        )
        print(f"Contract printed to {output}.")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the DealershipManager command line."""
    args = build_parser().parse_args(argv)
    configure_logging()
    connection = get_connection(args.db or get_db_path())
    try:
        return run_command(args, connection)
    except PersistenceError as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}\n{exc.hint}")
        return 1
    except ServiceError as exc:
        print(f"Error: {exc}")
        return 1
    finally:
        connection.close()


if __name__ == "__main__":
    raise SystemExit(main())
