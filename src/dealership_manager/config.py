"""Application configuration."""

from __future__ import annotations

from dataclasses import dataclass

from dealership_manager.version import __app_name__, __company__

APP_NAME = __app_name__
APP_DATA_DIRNAME = "DealershipManager"
HOME_ENV_VAR = "DEALERSHIP_HOME"
DB_FILENAME = "dealership_manager.db"
LOGS_DIRNAME = "logs"
LOG_FILENAME = "app.log"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUP_COUNT = 3
PDF_DIRNAME = "pdfs"
EXPORTS_DIRNAME = "exports"
CONFIG_FILENAME = "config.json"
DEFAULT_SCHEDULE_MONTHS = 12
MAX_SCHEDULE_MONTHS = 600
PLACEHOLDER = "-"
CURRENCY_LABEL = "EGP"


@dataclass(frozen=True)
class AppConfig:
    """Static configuration values for DealershipManager."""

    app_name: str = APP_NAME
    organization_name: str = __company__
    default_schedule_months: int = DEFAULT_SCHEDULE_MONTHS
