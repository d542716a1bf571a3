"""Database migrations for SQLite schema versioning."""

from __future__ import annotations

from dataclasses import dataclass
import sqlite3

from dealership_manager.db.connection import transaction


@dataclass(frozen=True)
class Migration:
    version: int
    script: str


MIGRATIONS: list[Migration] = [
    Migration(
        version=1,
        script="""
        CREATE TABLE IF NOT EXISTS inventory (
            id TEXT PRIMARY KEY,
            type TEXT NOT NULL,
            model TEXT,
            plate_number TEXT,
            vin TEXT,
            price REAL NOT NULL DEFAULT 0 CHECK (price >= 0),
            status TEXT NOT NULL CHECK (status IN ('available', 'sold'))
        );

        CREATE TABLE IF NOT EXISTS showroom (
            id TEXT PRIMARY KEY,
            owner_name TEXT NOT NULL,
            owner_phone TEXT,
            type TEXT NOT NULL,
            plate_number TEXT NOT NULL,
            previous_price REAL NOT NULL DEFAULT 0,
            selling_price REAL NOT NULL DEFAULT 0 CHECK (selling_price >= 0),
            condition TEXT,
            status TEXT NOT NULL CHECK (status IN ('received', 'sold', 'returned')),
            entry_date TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS investors (
            id TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            id_number TEXT,
            id_expiry TEXT,
            phone TEXT,
            email TEXT,
            balance REAL NOT NULL DEFAULT 0
        );

        CREATE TABLE IF NOT EXISTS buyers (
            id TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            id_number TEXT,
            id_expiry TEXT,
            phone TEXT,
            job TEXT,
            address TEXT,
            email TEXT
        );

        CREATE TABLE IF NOT EXISTS contracts (
            id TEXT PRIMARY KEY,
            manual_id TEXT,
            type TEXT NOT NULL,
            sale_mode TEXT NOT NULL DEFAULT 'installment'
                CHECK (sale_mode IN ('installment', 'credit')),
            created_at TEXT NOT NULL,
            buyer_id TEXT NOT NULL,
            guarantor_id TEXT,
            investor_id TEXT NOT NULL,
            asset_ids TEXT NOT NULL DEFAULT '[]',
            total_item_value REAL NOT NULL DEFAULT 0,
            service_fee REAL NOT NULL DEFAULT 0,
            total_amount REAL NOT NULL DEFAULT 0,
            status TEXT NOT NULL CHECK (status IN ('active', 'closed')),
            notes TEXT,
            FOREIGN KEY (buyer_id) REFERENCES buyers(id),
            FOREIGN KEY (guarantor_id) REFERENCES buyers(id),
            FOREIGN KEY (investor_id) REFERENCES investors(id)
        );

        CREATE TABLE IF NOT EXISTS installments (
            id TEXT PRIMARY KEY,
            contract_id TEXT NOT NULL,
            due_date TEXT NOT NULL,
            amount REAL NOT NULL DEFAULT 0,
            status TEXT NOT NULL CHECK (status IN ('Pending', 'Paid', 'Overdue')),
            paid_date TEXT,
            FOREIGN KEY (contract_id) REFERENCES contracts(id),
            CHECK ((status = 'Paid') = (paid_date IS NOT NULL))
        );

        CREATE TABLE IF NOT EXISTS title_transfers (
            id TEXT PRIMARY KEY,
            manual_id TEXT,
            created_at TEXT NOT NULL,
            seller_name TEXT NOT NULL,
            seller_id_number TEXT NOT NULL,
            buyer_name TEXT NOT NULL,
            buyer_id_number TEXT NOT NULL,
            vehicle_type TEXT NOT NULL,
            vehicle_model TEXT,
            plate_number TEXT NOT NULL,
            vin TEXT,
            price REAL NOT NULL DEFAULT 0,
            service_fees REAL NOT NULL DEFAULT 0
        );

        CREATE INDEX IF NOT EXISTS idx_installments_contract_id
            ON installments(contract_id);
        CREATE INDEX IF NOT EXISTS idx_installments_due_date
            ON installments(due_date);
        CREATE INDEX IF NOT EXISTS idx_contracts_investor_id
            ON contracts(investor_id);
        """,
    ),
]


def _fetch_schema_version(connection: sqlite3.Connection) -> int:
    connection.execute(
        """
        CREATE TABLE IF NOT EXISTS app_meta (
            schema_version INTEGER NOT NULL
        );
        """
    )
    row = connection.execute(
        "SELECT schema_version FROM app_meta LIMIT 1"
    ).fetchone()
    if row is None:
        connection.execute("INSERT INTO app_meta (schema_version) VALUES (0)")
        return 0
    return int(row[0])


def apply_migrations(connection: sqlite3.Connection) -> None:
    """Apply pending database migrations."""
    with transaction(connection):
        current_version = _fetch_schema_version(connection)

    for migration in MIGRATIONS:
        if migration.version <= current_version:
            continue

        with transaction(connection):
            connection.executescript(migration.script)
            connection.execute(
                "UPDATE app_meta SET schema_version = ?",
                (migration.version,),
            )

        current_version = migration.version


def current_schema_version(connection: sqlite3.Connection) -> int:
    """Return the applied schema version, 0 for an unprovisioned database."""
    row = connection.execute(
        "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = 'app_meta'"
    ).fetchone()
    if row is None:
        return 0
    version_row = connection.execute(
        "SELECT schema_version FROM app_meta LIMIT 1"
    ).fetchone()
    return int(version_row[0]) if version_row else 0
