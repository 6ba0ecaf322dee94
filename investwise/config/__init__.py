"""Configuration package."""

from investwise.config.log_setup import configure_logging
from investwise.config.settings import (
    AccountSettings,
    AppSettings,
    PortfolioSettings,
    Settings,
    StorageSettings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AccountSettings",
    "AppSettings",
    "PortfolioSettings",
    "Settings",
    "StorageSettings",
    "configure_logging",
    "get_settings",
    "validate_all_settings",
]
