"""SQLite row mappers for domain models."""

from __future__ import annotations

import json
import sqlite3
from typing import Any, Dict

from dealership_manager.domain.models import (
    Buyer,
    ContractStatus,
    ContractType,
    Installment,
    InstallmentContract,
    InstallmentStatus,
    InventoryItem,
    InventoryStatus,
    Investor,
    SaleMode,
    ShowroomItem,
    ShowroomStatus,
    TitleTransferContract,
)


def _row_value(row: sqlite3.Row, key: str) -> Any:
    return row[key] if key in row.keys() else None


def _enum_value(value: Any) -> Any:
    return value.value if hasattr(value, "value") else value


def _float(value: Any) -> float:
    return float(value) if value is not None else 0.0


def inventory_from_row(row: sqlite3.Row) -> InventoryItem:
    return InventoryItem(
        id=row["id"],
        type=row["type"],
        model=_row_value(row, "model") or "",
        plate_number=_row_value(row, "plate_number") or "",
        vin=_row_value(row, "vin") or "",
        price=_float(row["price"]),
        status=InventoryStatus(row["status"]),
    )


def inventory_to_record(item: InventoryItem) -> Dict[str, Any]:
    return {
        "id": item.id,
        "type": item.type,
        "model": item.model,
        "plate_number": item.plate_number,
        "vin": item.vin,
        "price": item.price,
        "status": _enum_value(item.status),
    }


def showroom_from_row(row: sqlite3.Row) -> ShowroomItem:
    return ShowroomItem(
        id=row["id"],
        owner_name=row["owner_name"],
        owner_phone=_row_value(row, "owner_phone") or "",
        type=row["type"],
        plate_number=row["plate_number"],
        previous_price=_float(_row_value(row, "previous_price")),
        selling_price=_float(row["selling_price"]),
        condition=_row_value(row, "condition") or "",
        entry_date=row["entry_date"],
        status=ShowroomStatus(row["status"]),
    )


def showroom_to_record(item: ShowroomItem) -> Dict[str, Any]:
    return {
        "id": item.id,
        "owner_name": item.owner_name,
        "owner_phone": item.owner_phone,
        "type": item.type,
        "plate_number": item.plate_number,
        "previous_price": item.previous_price,
        "selling_price": item.selling_price,
        "condition": item.condition,
        "status": _enum_value(item.status),
        "entry_date": item.entry_date,
    }


def investor_from_row(row: sqlite3.Row) -> Investor:
    return Investor(
        id=row["id"],
        name=row["name"],
        id_number=_row_value(row, "id_number") or "",
        id_expiry=_row_value(row, "id_expiry"),
        phone=_row_value(row, "phone") or "",
        email=_row_value(row, "email"),
        balance=_float(row["balance"]),
    )


def investor_to_record(investor: Investor) -> Dict[str, Any]:
    return {
        "id": investor.id,
        "name": investor.name,
        "id_number": investor.id_number,
        "id_expiry": investor.id_expiry,
        "phone": investor.phone,
        "email": investor.email,
        "balance": investor.balance,
    }


def buyer_from_row(row: sqlite3.Row) -> Buyer:
    return Buyer(
        id=row["id"],
        name=row["name"],
        id_number=_row_value(row, "id_number") or "",
        id_expiry=_row_value(row, "id_expiry"),
        phone=_row_value(row, "phone") or "",
        job=_row_value(row, "job"),
        address=_row_value(row, "address"),
        email=_row_value(row, "email"),
    )


def buyer_to_record(buyer: Buyer) -> Dict[str, Any]:
    return {
        "id": buyer.id,
        "name": buyer.name,
        "id_number": buyer.id_number,
        "id_expiry": buyer.id_expiry,
        "phone": buyer.phone,
        "job": buyer.job,
        "address": buyer.address,
        "email": buyer.email,
    }


def contract_from_row(row: sqlite3.Row) -> InstallmentContract:
    raw_ids = _row_value(row, "asset_ids") or "[]"
    try:
        asset_ids = [str(value) for value in json.loads(raw_ids)]
    except (TypeError, ValueError):
        asset_ids = []
    raw_mode = _row_value(row, "sale_mode") or SaleMode.INSTALLMENT.value
    return InstallmentContract(
        id=row["id"],
        manual_id=_row_value(row, "manual_id") or "",
        type=ContractType(row["type"]),
        sale_mode=SaleMode(raw_mode),
        created_at=row["created_at"],
        buyer_id=row["buyer_id"],
        guarantor_id=_row_value(row, "guarantor_id"),
        investor_id=row["investor_id"],
        asset_ids=asset_ids,
        total_item_value=_float(row["total_item_value"]),
        service_fee=_float(row["service_fee"]),
        total_amount=_float(row["total_amount"]),
        status=ContractStatus(row["status"]),
        notes=_row_value(row, "notes"),
    )


def contract_to_record(contract: InstallmentContract) -> Dict[str, Any]:
    return {
        "id": contract.id,
        "manual_id": contract.manual_id,
        "type": _enum_value(contract.type),
        "sale_mode": _enum_value(contract.sale_mode),
        "created_at": contract.created_at,
        "buyer_id": contract.buyer_id,
        "guarantor_id": contract.guarantor_id,
        "investor_id": contract.investor_id,
        "asset_ids": json.dumps(list(contract.asset_ids)),
        "total_item_value": contract.total_item_value,
        "service_fee": contract.service_fee,
        "total_amount": contract.total_amount,
        "status": _enum_value(contract.status),
        "notes": contract.notes,
    }


def installment_from_row(row: sqlite3.Row) -> Installment:
    return Installment(
        id=row["id"],
        contract_id=row["contract_id"],
        due_date=row["due_date"],
        amount=_float(row["amount"]),
        status=InstallmentStatus(row["status"]),
        paid_date=_row_value(row, "paid_date"),
    )


def installment_to_record(installment: Installment) -> Dict[str, Any]:
    return {
        "id": installment.id,
        "contract_id": installment.contract_id,
        "due_date": installment.due_date,
        "amount": installment.amount,
        "status": _enum_value(installment.status),
        "paid_date": installment.paid_date,
    }


def title_transfer_from_row(row: sqlite3.Row) -> TitleTransferContract:
    return TitleTransferContract(
        id=row["id"],
        manual_id=_row_value(row, "manual_id") or "",
        created_at=row["created_at"],
        seller_name=row["seller_name"],
        seller_id_number=row["seller_id_number"],
        buyer_name=row["buyer_name"],
        buyer_id_number=row["buyer_id_number"],
        vehicle_type=row["vehicle_type"],
        vehicle_model=_row_value(row, "vehicle_model") or "",
        plate_number=row["plate_number"],
        vin=_row_value(row, "vin") or "",
        price=_float(row["price"]),
        service_fees=_float(row["service_fees"]),
    )


def title_transfer_to_record(contract: TitleTransferContract) -> Dict[str, Any]:
    return {
        "id": contract.id,
        "manual_id": contract.manual_id,
        "created_at": contract.created_at,
        "seller_name": contract.seller_name,
        "seller_id_number": contract.seller_id_number,
        "buyer_name": contract.buyer_name,
        "buyer_id_number": contract.buyer_id_number,
        "vehicle_type": contract.vehicle_type,
        "vehicle_model": contract.vehicle_model,
        "plate_number": contract.plate_number,
        "vin": contract.vin,
        "price": contract.price,
        "service_fees": contract.service_fees,
    }
