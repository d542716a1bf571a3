"""Pytest configuration and fixtures."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from datetime import date
from pathlib import Path

import pytest

from dealership_manager.db.connection import get_connection
from dealership_manager.db.migrations import apply_migrations
from dealership_manager.domain.models import Buyer, InventoryItem, Investor, ShowroomItem
from dealership_manager.services.app_services import AppServices


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Database file inside the per-test temp dir."""
    return tmp_path / "dealership_test.db"


@pytest.fixture
def connection(db_path: Path) -> Iterator[sqlite3.Connection]:
    """Migrated connection, closed after the test."""
    conn = get_connection(db_path)
    apply_migrations(conn)
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture
def services(connection: sqlite3.Connection) -> AppServices:
    return AppServices.from_connection(connection)


@pytest.fixture
def today() -> date:
    """Fixed schedule base date."""
    return date(2025, 1, 15)


@pytest.fixture
def buyer(services: AppServices) -> Buyer:
    return services.directory_service.add_buyer(
        name="Omar Hassan",
        phone="01000000001",
        id_number="29001011234567",
        job="Engineer",
        address="12 Nile St, Cairo",
        email="omar@example.com",
    )


@pytest.fixture
def guarantor(services: AppServices) -> Buyer:
    return services.directory_service.add_buyer(
        name="Khaled Said",
        phone="01000000002",
        id_number="28505051234567",
    )


@pytest.fixture
def investor(services: AppServices) -> Investor:
    return services.directory_service.add_investor(
        name="Capital Partners",
        balance=100000,
        phone="01000000003",
    )


@pytest.fixture
def car(services: AppServices) -> InventoryItem:
    return services.inventory_service.add_inventory_item(
        vehicle_type="Toyota",
        model="Corolla 2020",
        plate_number="ABC 123",
        vin="JT2BF22K1Y0000001",
        price=8000,
    )


@pytest.fixture
def consigned_car(services: AppServices) -> ShowroomItem:
    return services.inventory_service.add_showroom_item(
        owner_name="Mona Adel",
        owner_phone="01000000004",
        vehicle_type="Hyundai Elantra",
        plate_number="XYZ 987",
        previous_price=3500,
        selling_price=4000,
        condition="Good",
    )
