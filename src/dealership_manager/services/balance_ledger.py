"""Investor capital balance adjustments."""

from __future__ import annotations

import sqlite3

from dealership_manager.db.connection import transaction
from dealership_manager.logging_config import get_logger
from dealership_manager.repositories import InvestorRepo
from dealership_manager.services.errors import NotFoundError


class BalanceLedger:
    """Debits investor balances with a single atomic update."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._repo = InvestorRepo(connection)
        self._logger = get_logger(self.__class__.__name__)

    def get_balance(self, investor_id: str) -> float:
        balance = self._repo.get_balance(investor_id)
        if balance is None:
            raise NotFoundError(f"Investor {investor_id} not found.")
        return balance

    def adjust_investor_balance(
        self,
        investor_id: str,
        delta: float,
        *,
        commit: bool = True,
    ) -> float:
        """Subtract ``delta`` from the balance and return the new balance.

        With ``commit=False`` the update joins the caller's transaction.
        """
        if commit:
            with transaction(self._connection):
                return self._debit(investor_id, delta)
        return self._debit(investor_id, delta)

    def _debit(self, investor_id: str, delta: float) -> float:
        if not self._repo.decrement_balance(investor_id, float(delta)):
            raise NotFoundError(f"Investor {investor_id} not found.")
        new_balance = self.get_balance(investor_id)
        self._logger.info(
            "Investor %s debited %.2f, balance now %.2f",
            investor_id,
            delta,
            new_balance,
        )
        return new_balance
