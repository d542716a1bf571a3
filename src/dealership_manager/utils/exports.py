"""CSV exports of directory data."""

from __future__ import annotations

import csv
import re
from datetime import date
from pathlib import Path
from typing import Iterable, Optional

from dealership_manager.domain.models import Buyer
from dealership_manager.services.errors import ValidationError

BUYER_EXPORT_HEADERS = ("Name", "Phone", "ID number", "Job", "Address")


def sanitize_filename(value: str) -> str:
    """Normalize text to be safe for filenames."""
    cleaned = "_".join(value.strip().split())
    cleaned = re.sub(r"[^A-Za-z0-9_-]", "", cleaned)
    return cleaned or "export"


def buyers_export_filename(reference: Optional[date] = None) -> str:
    return f"buyers_list_{(reference or date.today()).isoformat()}.csv"


def export_buyers_csv(buyers: Iterable[Buyer], output_path: Path) -> Path:
    """Write the buyer directory as UTF-8 CSV with a BOM for spreadsheet apps."""
    rows = [
        (buyer.name, buyer.phone, buyer.id_number, buyer.job or "", buyer.address or "")
        for buyer in buyers
    ]
    if not rows:
        raise ValidationError("There are no buyers to export.")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8-sig", newline="") as handle:
        writer = csv.writer(handle, quoting=csv.QUOTE_ALL)
        writer.writerow(BUYER_EXPORT_HEADERS)
        writer.writerows(rows)
    return output_path
