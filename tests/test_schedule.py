"""Tests for installment schedule generation."""

from datetime import date

import pytest
from dateutil.relativedelta import relativedelta

from dealership_manager.config import MAX_SCHEDULE_MONTHS
from dealership_manager.domain.models import InstallmentStatus, SaleMode
from dealership_manager.services.errors import ValidationError
from dealership_manager.services.schedule import (
    generate_schedule,
    monthly_amount,
    parse_due_date,
)


class TestInstallmentMode:
    """Monthly schedules."""

    def test_even_split(self, today: date) -> None:
        schedule = generate_schedule(
            "c1", 12000, 0, SaleMode.INSTALLMENT, months=12, today=today
        )

        assert len(schedule) == 12
        assert all(item.amount == 1000 for item in schedule)
        assert sum(item.amount for item in schedule) == 12000

    def test_fee_is_included_without_remainder(self, today: date) -> None:
        schedule = generate_schedule(
            "c1", 10000, 500, SaleMode.INSTALLMENT, months=3, today=today
        )

        assert [item.amount for item in schedule] == [3500, 3500, 3500]
        assert sum(item.amount for item in schedule) == 10500

    def test_rounding_surplus_is_kept(self, today: date) -> None:
        schedule = generate_schedule(
            "c1", 10000, 1, SaleMode.INSTALLMENT, months=3, today=today
        )

        assert [item.amount for item in schedule] == [3334, 3334, 3334]
        assert sum(item.amount for item in schedule) == 10002

    def test_due_dates_step_one_calendar_month(self, today: date) -> None:
        schedule = generate_schedule(
            "c1", 6000, 0, SaleMode.INSTALLMENT, months=6, today=today
        )

        expected = [(today + relativedelta(months=n)).isoformat() for n in range(1, 7)]
        assert [item.due_date for item in schedule] == expected
        assert expected == sorted(set(expected))

    def test_short_months_clamp_day(self) -> None:
        schedule = generate_schedule(
            "c1", 3000, 0, SaleMode.INSTALLMENT, months=3, today=date(2025, 1, 31)
        )

        assert [item.due_date for item in schedule] == [
            "2025-02-28",
            "2025-03-31",
            "2025-04-30",
        ]

    def test_ids_status_and_paid_date(self, today: date) -> None:
        schedule = generate_schedule(
            "1700000000000", 900, 0, SaleMode.INSTALLMENT, months=3, today=today
        )

        assert [item.id for item in schedule] == [
            "1700000000000_1",
            "1700000000000_2",
            "1700000000000_3",
        ]
        assert all(item.contract_id == "1700000000000" for item in schedule)
        assert all(item.status == InstallmentStatus.PENDING for item in schedule)
        assert all(item.paid_date is None for item in schedule)

    @pytest.mark.parametrize("months", [0, -1, None, 2.5, 100000, float("inf")])
    def test_rejects_invalid_months(self, months, today: date) -> None:
        with pytest.raises(ValidationError):
            generate_schedule(
                "c1", 1000, 0, SaleMode.INSTALLMENT, months=months, today=today
            )

    def test_longest_allowed_schedule(self, today: date) -> None:
        schedule = generate_schedule(
            "c1", 6000, 0, SaleMode.INSTALLMENT, months=MAX_SCHEDULE_MONTHS, today=today
        )

        assert len(schedule) == MAX_SCHEDULE_MONTHS
        assert schedule[-1].due_date == "2075-01-15"

    def test_due_date_past_calendar_range(self) -> None:
        with pytest.raises(ValidationError):
            generate_schedule(
                "c1", 1000, 0, SaleMode.INSTALLMENT, months=2, today=date(9999, 12, 1)
            )

    def test_mode_accepts_string(self, today: date) -> None:
        schedule = generate_schedule("c1", 100, 0, "installment", months=1, today=today)

        assert len(schedule) == 1


class TestCreditMode:
    """Single lump-sum schedules."""

    def test_single_installment_on_due_date(self) -> None:
        schedule = generate_schedule(
            "c2", 5000, 200, SaleMode.CREDIT, credit_due_date="2025-03-01"
        )

        assert len(schedule) == 1
        assert schedule[0].amount == 5200
        assert schedule[0].due_date == "2025-03-01"
        assert schedule[0].id == "c2_1"
        assert schedule[0].status == InstallmentStatus.PENDING

    def test_accepts_date_object(self) -> None:
        schedule = generate_schedule(
            "c2", 100, 0, SaleMode.CREDIT, credit_due_date=date(2026, 6, 30)
        )

        assert schedule[0].due_date == "2026-06-30"

    def test_months_are_ignored(self) -> None:
        schedule = generate_schedule(
            "c2", 100, 0, SaleMode.CREDIT, months=12, credit_due_date="2025-03-01"
        )

        assert len(schedule) == 1

    @pytest.mark.parametrize(
        "due", [None, "", "   ", "not-a-date", "2025-13-40", 20250301, 2025.3]
    )
    def test_rejects_missing_or_bad_due_date(self, due) -> None:
        with pytest.raises(ValidationError):
            generate_schedule("c2", 100, 0, SaleMode.CREDIT, credit_due_date=due)


class TestHelpers:
    def test_monthly_amount_rounds_up(self) -> None:
        assert monthly_amount(10001, 3) == 3334
        assert monthly_amount(12000, 12) == 1000

    def test_parse_due_date_with_timestamp(self) -> None:
        assert parse_due_date("2025-03-01T10:30:00") == date(2025, 3, 1)

    def test_unknown_mode(self) -> None:
        with pytest.raises(ValidationError):
            generate_schedule("c3", 100, 0, "lease", months=1)
