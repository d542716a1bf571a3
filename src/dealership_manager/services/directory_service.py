"""Buyer and investor registration."""

from __future__ import annotations

import sqlite3
from typing import Optional

from dealership_manager.db.connection import transaction
from dealership_manager.domain.models import Buyer, Investor
from dealership_manager.logging_config import get_logger
from dealership_manager.repositories import BuyerRepo, InvestorRepo
from dealership_manager.services.validation import (
    optional_text,
    parse_amount,
    require_text,
)
from dealership_manager.utils.ids import new_id


class DirectoryService:
    """Service for the buyer directory and investor accounts."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._connection.row_factory = sqlite3.Row
        self._buyer_repo = BuyerRepo(connection)
        self._investor_repo = InvestorRepo(connection)
        self._logger = get_logger(self.__class__.__name__)

    def list_buyers(self) -> list[Buyer]:
        return self._buyer_repo.list_all()

    def list_investors(self) -> list[Investor]:
        return self._investor_repo.list_all()

    def add_buyer(
        self,
        name: str,
        phone: str,
        id_number: Optional[str] = None,
        id_expiry: Optional[str] = None,
        job: Optional[str] = None,
        address: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Buyer:
        buyer = Buyer(
            id=new_id(),
            name=require_text(name, "Buyer name"),
            phone=require_text(phone, "Buyer phone"),
            id_number=optional_text(id_number),
            id_expiry=optional_text(id_expiry, None),
            job=optional_text(job, ""),
            address=optional_text(address, ""),
            email=optional_text(email, None),
        )
        with transaction(self._connection):
            self._buyer_repo.insert(buyer)
        self._logger.info("Buyer %s registered", buyer.id)
        return buyer

    def add_investor(
        self,
        name: str,
        balance: float | str,
        phone: Optional[str] = None,
        id_number: Optional[str] = None,
        id_expiry: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Investor:
        investor = Investor(
            id=new_id(),
            name=require_text(name, "Investor name"),
            balance=parse_amount(balance, "Opening balance"),
            phone=optional_text(phone),
            id_number=optional_text(id_number),
            id_expiry=optional_text(id_expiry, None),
            email=optional_text(email, None),
        )
        with transaction(self._connection):
            self._investor_repo.insert(investor)
        self._logger.info("Investor %s registered", investor.id)
        return investor
