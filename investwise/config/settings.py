"""
Configuration Management for InvestWise

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The console application itself takes no flags; every knob
(where files live, whether sign-up seeds demo assets, the zakat
rate) is an environment variable or a `.env` entry.
"""

from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Flat-file storage configuration."""

    model_config = SettingsConfigDict(
        env_prefix="INVESTWISE_STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    data_dir: Path = Field(
        default=Path("."),
        description="Directory holding the users and assets containers"
    )
    users_file: str = Field(
        default="users.json",
        description="File name of the users container"
    )
    assets_file: str = Field(
        default="assets.json",
        description="File name of the assets container"
    )
    reports_dir: Path = Field(
        default=Path("."),
        description="Directory where exported reports are written"
    )

    # Audit trail
    persist_audit: bool = Field(
        default=False,
        description="Append audit events to the audit file"
    )
    audit_file: str = Field(
        default="audit.jsonl",
        description="File name of the append-only audit trail"
    )

    @property
    def users_path(self) -> Path:
        return self.data_dir / self.users_file

    @property
    def assets_path(self) -> Path:
        return self.data_dir / self.assets_file

    @property
    def audit_path(self) -> Path:
        return self.data_dir / self.audit_file


class AccountSettings(BaseSettings):
    """Account creation behaviour."""

    model_config = SettingsConfigDict(
        env_prefix="INVESTWISE_ACCOUNT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    seed_demo_assets: bool = Field(
        default=False,
        description="Give every new account the five demo assets"
    )
    id_min: int = Field(
        default=1000,
        ge=1000,
        le=9999,
        description="Smallest account id that may be assigned"
    )
    id_max: int = Field(
        default=9999,
        ge=1000,
        le=9999,
        description="Largest account id that may be assigned"
    )
    id_max_attempts: int = Field(
        default=50,
        ge=1,
        le=10000,
        description="How many random ids to try before giving up"
    )

    @model_validator(mode='after')
    def validate_id_range(self) -> 'AccountSettings':
        """The id range must not be empty."""
        if self.id_max < self.id_min:
            raise ValueError("id_max cannot be smaller than id_min")
        return self


class PortfolioSettings(BaseSettings):
    """Portfolio calculations."""

    model_config = SettingsConfigDict(
        env_prefix="INVESTWISE_PORTFOLIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    zakat_rate: Decimal = Field(
        default=Decimal("0.025"),
        ge=0,
        le=1,
        description="Levy applied to each asset value (0.025 = 2.5%)"
    )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode (forces DEBUG logging)"
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Minimum level for the local structured log"
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Write the structured log here instead of stderr"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept standard logging level names."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {allowed}")
        return v.upper()

    @property
    def effective_log_level(self) -> str:
        """Log level to configure at startup."""
        return "DEBUG" if self.debug_mode else self.log_level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def storage(self) -> StorageSettings:
        return StorageSettings()

    @property
    def account(self) -> AccountSettings:
        return AccountSettings()

    @property
    def portfolio(self) -> PortfolioSettings:
        return PortfolioSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus
    `<name>_error` entries for the ones that failed.
    """
    results = {}

    settings = get_settings()

    for name in ("storage", "account", "portfolio", "app"):
        try:
            _ = getattr(settings, name)
            results[name] = True
        except Exception as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
