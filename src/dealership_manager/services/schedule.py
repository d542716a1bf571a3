"""Installment schedule generation."""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Optional

from dateutil import parser
from dateutil.relativedelta import relativedelta

from dealership_manager.config import MAX_SCHEDULE_MONTHS
from dealership_manager.domain.models import Installment, InstallmentStatus, SaleMode
from dealership_manager.services.errors import ValidationError


def installment_id(contract_id: str, sequence: int) -> str:
    return f"{contract_id}_{sequence}"


def parse_due_date(value: str | date | None) -> date:
    """Parse a credit due date, rejecting blank or malformed input."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError("A due date is required for credit contracts.")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"Invalid due date: {value!r}.")
    try:
        return parser.isoparse(value.strip()).date()
    except (ValueError, OverflowError) as exc:
        raise ValidationError(f"Invalid due date: {value!r}.") from exc


def monthly_amount(total: float, months: int) -> float:
    """Per-installment amount, rounded up to the next whole currency unit."""
    return float(math.ceil(total / months))


def _validate_months(months: Optional[int]) -> int:
    if months is None or isinstance(months, bool):
        raise ValidationError("The number of months is required.")
    try:
        value = int(months)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ValidationError(f"Invalid number of months: {months!r}.") from exc
    if value != months or value < 1:
        raise ValidationError("The number of months must be a whole number of at least 1.")
    if value > MAX_SCHEDULE_MONTHS:
        raise ValidationError(f"The number of months cannot exceed {MAX_SCHEDULE_MONTHS}.")
    return value


def generate_schedule(
    contract_id: str,
    principal: float,
    fee: float,
    mode: SaleMode | str,
    *,
    months: Optional[int] = None,
    credit_due_date: str | date | None = None,
    today: Optional[date] = None,
) -> list[Installment]:
    """Build the ordered installments for a contract.

    Credit sales produce a single installment for ``principal + fee`` on
    ``credit_due_date``. Installment sales split the total into ``months``
    equal payments rounded up, due one calendar month apart starting a month
    after ``today``. Nothing is persisted.
    """
    try:
        sale_mode = SaleMode(mode)
    except ValueError as exc:
        raise ValidationError(f"Unknown sale mode: {mode!r}.") from exc
    total = float(principal) + float(fee)

    if sale_mode == SaleMode.CREDIT:
        due = parse_due_date(credit_due_date)
        return [
            Installment(
                id=installment_id(contract_id, 1),
                contract_id=contract_id,
                due_date=due.isoformat(),
                amount=total,
                status=InstallmentStatus.PENDING,
            )
        ]

    count = _validate_months(months)
    base = today or date.today()
    amount = monthly_amount(total, count)
    try:
        return [
            Installment(
                id=installment_id(contract_id, sequence),
                contract_id=contract_id,
                due_date=(base + relativedelta(months=sequence)).isoformat(),
                amount=amount,
                status=InstallmentStatus.PENDING,
            )
            for sequence in range(1, count + 1)
        ]
    except (ValueError, OverflowError) as exc:
        raise ValidationError(f"Schedule runs past the supported date range: {exc}.") from exc
