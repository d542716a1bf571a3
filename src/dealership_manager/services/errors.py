"""Custom service layer errors."""

from __future__ import annotations

import sqlite3
from enum import Enum
from typing import Optional


class ServiceError(Exception):
    """Base error for service-layer failures."""


class ValidationError(ServiceError):
    """Raised when a business rule validation fails."""


class NotFoundError(ServiceError):
    """Raised when an entity is not found."""


class AssetNotFoundError(NotFoundError):
    """Raised when a vehicle id matches neither inventory nor showroom."""


class PersistenceCategory(str, Enum):
    MISSING_TABLE = "missing_table"
    PERMISSION = "permission"
    DUPLICATE = "duplicate"
    MISSING_REFERENCE = "missing_reference"
    UNKNOWN = "unknown"


_HINTS = {
    PersistenceCategory.MISSING_TABLE: (
        "The database is not provisioned. Run `dealership-manager init` to "
        "create the tables."
    ),
    PersistenceCategory.PERMISSION: (
        "The database refused the write. Check that the database file is "
        "writable by the current user."
    ),
    PersistenceCategory.DUPLICATE: (
        "A record with the same identifier is already registered."
    ),
    PersistenceCategory.MISSING_REFERENCE: (
        "The record depends on another record that does not exist. Register "
        "the buyer or investor first."
    ),
    PersistenceCategory.UNKNOWN: "Unexpected database error.",
}


class PersistenceError(ServiceError):
    """Raised when the backing store rejects an operation."""

    def __init__(
        self,
        message: str,
        category: PersistenceCategory = PersistenceCategory.UNKNOWN,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.category = category
        self.hint = hint or _HINTS[category]

    @classmethod
    def from_sqlite(cls, exc: sqlite3.Error, context: str) -> "PersistenceError":
        category = classify_sqlite_error(exc)
        return cls(f"{context}: {exc}", category)


def classify_sqlite_error(exc: sqlite3.Error) -> PersistenceCategory:
    """Map a sqlite3 error to a remediation category."""
    message = str(exc).lower()
    if "no such table" in message:
        return PersistenceCategory.MISSING_TABLE
    if "readonly" in message or "read-only" in message or "not authorized" in message:
        return PersistenceCategory.PERMISSION
    if isinstance(exc, sqlite3.IntegrityError):
        if "unique" in message or "primary key" in message:
            return PersistenceCategory.DUPLICATE
        if "foreign key" in message:
            return PersistenceCategory.MISSING_REFERENCE
    return PersistenceCategory.UNKNOWN
