"""Database schema management."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from dealership_manager.db.connection import get_connection
from dealership_manager.db.migrations import apply_migrations

EXPECTED_TABLES = (
    "inventory",
    "showroom",
    "investors",
    "buyers",
    "contracts",
    "installments",
    "title_transfers",
)


def init_db(database_path: Path) -> None:
    """Initialize database tables and indexes if they do not exist."""
    connection = get_connection(database_path)
    try:
        apply_migrations(connection)
    finally:
        connection.close()


def table_exists(connection: sqlite3.Connection, table: str) -> bool:
    row = connection.execute(
        """
        SELECT 1
        FROM sqlite_master
        WHERE type = 'table'
          AND name = ?
        """,
        (table,),
    ).fetchone()
    return row is not None


def missing_tables(connection: sqlite3.Connection) -> list[str]:
    """Return the expected tables absent from the database."""
    return [table for table in EXPECTED_TABLES if not table_exists(connection, table)]
