"""Tests for the error hierarchy and sqlite error classification."""

import sqlite3

import pytest

from dealership_manager.services.errors import (
    AssetNotFoundError,
    NotFoundError,
    PersistenceCategory,
    PersistenceError,
    ServiceError,
    ValidationError,
    classify_sqlite_error,
)


def test_hierarchy() -> None:
    assert issubclass(AssetNotFoundError, NotFoundError)
    for error in (ValidationError, NotFoundError, PersistenceError):
        assert issubclass(error, ServiceError)


@pytest.mark.parametrize(
    ("exc", "category"),
    [
        (sqlite3.OperationalError("no such table: buyers"), PersistenceCategory.MISSING_TABLE),
        (
            sqlite3.OperationalError("attempt to write a readonly database"),
            PersistenceCategory.PERMISSION,
        ),
        (
            sqlite3.IntegrityError("UNIQUE constraint failed: buyers.id"),
            PersistenceCategory.DUPLICATE,
        ),
        (
            sqlite3.IntegrityError("FOREIGN KEY constraint failed"),
            PersistenceCategory.MISSING_REFERENCE,
        ),
        (sqlite3.DatabaseError("disk I/O error"), PersistenceCategory.UNKNOWN),
    ],
)
def test_classification(exc: sqlite3.Error, category: PersistenceCategory) -> None:
    assert classify_sqlite_error(exc) == category


def test_from_sqlite_carries_hint() -> None:
    error = PersistenceError.from_sqlite(
        sqlite3.OperationalError("no such table: contracts"), "insert contract"
    )

    assert error.category == PersistenceCategory.MISSING_TABLE
    assert str(error).startswith("insert contract")
    assert error.hint


def test_explicit_hint_wins() -> None:
    assert PersistenceError("x", hint="custom").hint == "custom"
