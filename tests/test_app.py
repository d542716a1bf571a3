"""Tests for the command line entry point."""

import logging
import sys
from collections.abc import Iterator
from datetime import date
from pathlib import Path

import pytest

from dealership_manager.app import main
from dealership_manager.db.connection import get_connection
from dealership_manager.services.app_services import AppServices
from dealership_manager.services.contract_service import ContractDraft


@pytest.fixture(autouse=True)
def app_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Keep logs, PDFs and exports inside the temp dir."""
    home = tmp_path / "home"
    monkeypatch.setenv("DEALERSHIP_HOME", str(home))
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield home
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture
def cli_db(tmp_path: Path) -> Path:
    path = tmp_path / "cli.db"
    assert main(["--db", str(path), "init"]) == 0
    return path


def _seed_contract(db_path: Path) -> str:
    conn = get_connection(db_path)
    try:
        services = AppServices.from_connection(conn)
        buyer = services.directory_service.add_buyer(name="Omar Hassan", phone="010")
        investor = services.directory_service.add_investor(name="Fund", balance=50000)
        car = services.inventory_service.add_inventory_item("Toyota", 6000)
        contract = services.contract_service.create_contract(
            ContractDraft(
                buyer_id=buyer.id,
                investor_id=investor.id,
                asset_ids=[car.id],
                months=2,
            ),
            today=date(2025, 1, 15),
        )
        return contract.id
    finally:
        conn.close()


def test_init_and_dashboard(cli_db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    capsys.readouterr()

    assert main(["--db", str(cli_db), "dashboard"]) == 0

    out = capsys.readouterr().out
    assert "Active contracts:" in out


def test_dashboard_before_init(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--db", str(tmp_path / "fresh.db"), "dashboard"]) == 0

    assert "dealership-manager init" in capsys.readouterr().out


def test_pay_before_init_prints_hint(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main(["--db", str(tmp_path / "fresh.db"), "pay", "x_1"]) == 1

    assert "init" in capsys.readouterr().out


def test_pay_unknown_installment(cli_db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--db", str(cli_db), "pay", "missing_1"]) == 1
    assert "not found" in capsys.readouterr().out


def test_pay_and_print(cli_db: Path, tmp_path: Path) -> None:
    contract_id = _seed_contract(cli_db)
    output = tmp_path / "contract.pdf"

    assert main(["--db", str(cli_db), "pay", f"{contract_id}_1"]) == 0
    assert main(
        ["--db", str(cli_db), "print-contract", contract_id, "--output", str(output)]
    ) == 0
    assert output.read_bytes().startswith(b"%PDF")


def test_export_buyers(cli_db: Path, tmp_path: Path) -> None:
    _seed_contract(cli_db)
    output = tmp_path / "buyers.csv"

    assert main(["--db", str(cli_db), "export-buyers", "--output", str(output)]) == 0
    assert "Omar Hassan" in output.read_text(encoding="utf-8-sig")


def test_export_without_buyers(cli_db: Path, tmp_path: Path) -> None:
    assert main(
        ["--db", str(cli_db), "export-buyers", "--output", str(tmp_path / "b.csv")]
    ) == 1


def test_mark_overdue(cli_db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _seed_contract(cli_db)
    capsys.readouterr()

    assert main(["--db", str(cli_db), "mark-overdue"]) == 0
    assert "2 installment(s) marked overdue." in capsys.readouterr().out


def _created_id(capsys: pytest.CaptureFixture[str]) -> str:
    return capsys.readouterr().out.split()[1]


def test_contract_workflow_from_cli(
    cli_db: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    db = ["--db", str(cli_db)]
    capsys.readouterr()
    assert main([*db, "add-buyer", "Omar Hassan", "010", "--job", "Engineer"]) == 0
    buyer_id = _created_id(capsys)
    assert main([*db, "add-investor", "Fund", "50,000"]) == 0
    investor_id = _created_id(capsys)
    assert main([*db, "add-vehicle", "Toyota", "6000", "--model", "Corolla"]) == 0
    car_id = _created_id(capsys)
    assert main([*db, "add-consignment", "Mona Adel", "Kia", "XYZ 1", "3000"]) == 0
    consigned_id = _created_id(capsys)

    assert main(
        [
            *db,
            "create-contract",
            buyer_id,
            investor_id,
            car_id,
            consigned_id,
            "--fee",
            "1000",
            "--months",
            "5",
        ]
    ) == 0
    assert "total 10,000.00 for 2 vehicle(s)" in capsys.readouterr().out

    conn = get_connection(cli_db)
    try:
        services = AppServices.from_connection(conn)
        contract = services.contract_service.list_contracts()[0]
        installments = services.installment_service.list_by_contract(contract.id)
        assert [item.amount for item in installments] == [2000] * 5
        assert services.balance_ledger.get_balance(investor_id) == 41000
        assert services.asset_registry.list_available() == []
    finally:
        conn.close()


def test_credit_contract_from_cli(cli_db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    db = ["--db", str(cli_db)]
    capsys.readouterr()
    main([*db, "add-buyer", "Omar Hassan", "010"])
    buyer_id = _created_id(capsys)
    main([*db, "add-investor", "Fund", "50000"])
    investor_id = _created_id(capsys)
    main([*db, "add-vehicle", "Nissan", "9000"])
    car_id = _created_id(capsys)

    assert main(
        [*db, "create-contract", buyer_id, investor_id, car_id, "--credit-due", "2025-06-30"]
    ) == 0
    capsys.readouterr()

    conn = get_connection(cli_db)
    try:
        services = AppServices.from_connection(conn)
        contract = services.contract_service.list_contracts()[0]
        (single,) = services.installment_service.list_by_contract(contract.id)
        assert single.due_date == "2025-06-30"
        assert single.amount == 9000
    finally:
        conn.close()


def test_create_contract_rejects_long_schedule(
    cli_db: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    db = ["--db", str(cli_db)]
    capsys.readouterr()
    main([*db, "add-buyer", "Omar Hassan", "010"])
    buyer_id = _created_id(capsys)
    main([*db, "add-investor", "Fund", "50000"])
    investor_id = _created_id(capsys)
    main([*db, "add-vehicle", "Nissan", "9000"])
    car_id = _created_id(capsys)

    assert main(
        [*db, "create-contract", buyer_id, investor_id, car_id, "--months", "100000"]
    ) == 1
    assert "cannot exceed" in capsys.readouterr().out
