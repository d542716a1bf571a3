"""Shared SQLite plumbing for the repositories."""

from __future__ import annotations

import sqlite3
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from dealership_manager.db.schema import table_exists
from dealership_manager.logging_config import get_logger
from dealership_manager.services.errors import PersistenceError


class SqliteRepository:
    """Base class: one table, no commits, sqlite errors become PersistenceError."""

    table: str = ""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._connection.row_factory = sqlite3.Row
        self._logger = get_logger(self.__class__.__name__)

    def _execute(
        self,
        sql: str,
        params: Sequence[Any] | Mapping[str, Any] = (),
        *,
        context: str,
    ) -> sqlite3.Cursor:
        try:
            return self._connection.execute(sql, params)
        except sqlite3.Error as exc:
            self._logger.exception("Failed to %s", context)
            raise PersistenceError.from_sqlite(exc, context) from exc

    def _insert_record(self, record: Mapping[str, Any], *, context: str) -> None:
        columns = ", ".join(record.keys())
        placeholders = ", ".join(f":{key}" for key in record.keys())
        self._execute(
            f"INSERT INTO {self.table} ({columns}) VALUES ({placeholders})",
            dict(record),
            context=context,
        )

    def _fetch_all(
        self,
        sql: str,
        params: Sequence[Any] = (),
        *,
        context: str,
    ) -> list[sqlite3.Row]:
        if not table_exists(self._connection, self.table):
            self._logger.warning("Table %s is missing; returning no rows", self.table)
            return []
        return self._execute(sql, params, context=context).fetchall()

    def _fetch_one(
        self,
        sql: str,
        params: Sequence[Any] = (),
        *,
        context: str,
    ) -> Optional[sqlite3.Row]:
        return self._execute(sql, params, context=context).fetchone()
