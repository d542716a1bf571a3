"""Input parsing helpers shared by the services."""

from __future__ import annotations

import math
from typing import Any, Optional

from dealership_manager.config import PLACEHOLDER
from dealership_manager.services.errors import ValidationError


def parse_amount(value: Any, field: str, *, minimum: Optional[float] = None) -> float:
    """Parse a currency amount, rejecting blanks, NaN and infinities."""
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field} is required.")
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            raise ValidationError(f"{field} is required.")
    try:
        amount = float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field} must be a number.") from exc
    if not math.isfinite(amount):
        raise ValidationError(f"{field} must be a number.")
    if minimum is not None and amount < minimum:
        raise ValidationError(f"{field} must be at least {minimum:g}.")
    return amount


def parse_whole_number(value: Any, field: str) -> int:
    amount = parse_amount(value, field)
    if not amount.is_integer():
        raise ValidationError(f"{field} must be a whole number.")
    return int(amount)


def require_text(value: Optional[str], field: str) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"{field} is required.")
    return cleaned


def optional_text(value: Optional[str], default: Optional[str] = PLACEHOLDER) -> Optional[str]:
    cleaned = (value or "").strip()
    return cleaned or default
