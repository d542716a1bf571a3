"""Company letterhead settings used when printing contracts."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any

from dealership_manager.utils.config_store import load_config_data, save_config_data

SETTINGS_KEY = "company"


@dataclass(frozen=True)
class CompanySettings:
    """Letterhead values with a visibility flag per printed field."""

    company_name: str = ""
    logo_path: str = ""
    tax_number: str = ""
    phone: str = ""
    email: str = ""
    show_name: bool = True
    show_logo: bool = True
    show_tax_number: bool = True
    show_phone: bool = True
    show_email: bool = True

    def header_lines(self) -> list[str]:
        """Text lines to print under the logo, honoring the visibility flags."""
        lines: list[str] = []
        if self.show_name and self.company_name:
            lines.append(self.company_name)
        if self.show_tax_number and self.tax_number:
            lines.append(f"Tax no.: {self.tax_number}")
        if self.show_phone and self.phone:
            lines.append(f"Phone: {self.phone}")
        if self.show_email and self.email:
            lines.append(f"Email: {self.email}")
        return lines

    @property
    def printable_logo(self) -> Path | None:
        if not self.show_logo or not self.logo_path:
            return None
        path = Path(self.logo_path)
        return path if path.is_file() else None


def _coerce(raw: dict[str, Any]) -> CompanySettings:
    defaults = CompanySettings()
    values: dict[str, Any] = {}
    for setting in fields(CompanySettings):
        value = raw.get(setting.name, getattr(defaults, setting.name))
        if isinstance(getattr(defaults, setting.name), bool):
            values[setting.name] = bool(value)
        else:
            values[setting.name] = "" if value is None else str(value)
    return replace(defaults, **values)


def load_company_settings(config_path: Path) -> CompanySettings:
    """Load letterhead settings from config JSON."""
    data = load_config_data(config_path).get(SETTINGS_KEY)
    if not isinstance(data, dict):
        return CompanySettings()
    return _coerce(data)


def save_company_settings(config_path: Path, settings: CompanySettings) -> None:
    """Persist letterhead settings to config JSON."""
    payload = load_config_data(config_path)
    payload[SETTINGS_KEY] = asdict(settings)
    save_config_data(config_path, payload)
