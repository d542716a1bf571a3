"""Tests for investor balance debits."""

import threading
from pathlib import Path

import pytest

from dealership_manager.db.connection import get_connection
from dealership_manager.domain.models import Investor
from dealership_manager.services.app_services import AppServices
from dealership_manager.services.balance_ledger import BalanceLedger
from dealership_manager.services.errors import NotFoundError


class TestAdjustInvestorBalance:
    def test_debit(self, services: AppServices, investor: Investor) -> None:
        new_balance = services.balance_ledger.adjust_investor_balance(investor.id, 2500)

        assert new_balance == 97500
        assert services.balance_ledger.get_balance(investor.id) == 97500

    def test_negative_delta_credits(self, services: AppServices, investor: Investor) -> None:
        assert services.balance_ledger.adjust_investor_balance(investor.id, -500) == 100500

    def test_balance_may_go_negative(self, services: AppServices, investor: Investor) -> None:
        assert services.balance_ledger.adjust_investor_balance(investor.id, 150000) == -50000

    def test_unknown_investor(self, services: AppServices) -> None:
        with pytest.raises(NotFoundError):
            services.balance_ledger.adjust_investor_balance("missing", 10)

    def test_get_balance_unknown(self, services: AppServices) -> None:
        with pytest.raises(NotFoundError):
            services.balance_ledger.get_balance("missing")


class TestConcurrentDebits:
    """Two sessions debiting the same investor must both land."""

    def test_combined_delta(self, db_path: Path, investor: Investor) -> None:
        deltas = [1200.0, 3400.0]
        barrier = threading.Barrier(len(deltas))
        errors: list[BaseException] = []

        def debit(delta: float) -> None:
            conn = get_connection(db_path)
            try:
                ledger = BalanceLedger(conn)
                barrier.wait()
                ledger.adjust_investor_balance(investor.id, delta)
            except BaseException as exc:
                errors.append(exc)
            finally:
                conn.close()

        threads = [threading.Thread(target=debit, args=(delta,)) for delta in deltas]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        check = get_connection(db_path)
        try:
            assert BalanceLedger(check).get_balance(investor.id) == 100000 - sum(deltas)
        finally:
            check.close()
