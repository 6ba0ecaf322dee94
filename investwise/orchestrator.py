"""
Main Orchestrator for InvestWise

This module ties together all the components. It replaces
process-wide singletons: storage, account manager, portfolio service
and report exporter are built once here and handed to whoever needs
them (the console loop, a test).
"""

from dataclasses import dataclass
from typing import Optional

from investwise.accounts import AccountManager
from investwise.audit import AuditLogger
from investwise.config import Settings, get_settings
from investwise.portfolio import PortfolioService, ReportExporter
from investwise.services.storage import (
    JsonFileStorage,
    JsonLinesAuditStorage,
    PortfolioStorageInterface,
)


@dataclass
class AppComponents:
    """Everything a session needs, already wired together."""

    storage: PortfolioStorageInterface
    accounts: AccountManager
    portfolio: PortfolioService
    reports: ReportExporter
    audit_logger: AuditLogger

    def clear_all_data(self) -> None:
        """Delete every stored user and asset."""
        self.storage.clear_all()
        self.audit_logger.log_data_cleared()


def create_app_components(
    settings: Optional[Settings] = None,
    storage: Optional[PortfolioStorageInterface] = None,
    audit_logger: Optional[AuditLogger] = None,
) -> AppComponents:
    """
    Factory function to create all application components.

    Args:
        settings: Settings to build from; loaded from the environment if None
        storage: Use this store instead of the JSON files
                (e.g. InMemoryStorage in tests)
        audit_logger: Use this audit logger instead of building one

    Returns:
        The wired components
    """
    settings = settings or get_settings()
    storage_settings = settings.storage

    if audit_logger is None:
        audit_storage = None
        if storage_settings.persist_audit:
            audit_storage = JsonLinesAuditStorage(storage_settings.audit_path)
        audit_logger = AuditLogger(audit_storage)

    if storage is None:
        storage = JsonFileStorage.from_settings(storage_settings)

    accounts = AccountManager(
        storage,
        settings=settings.account,
        audit_logger=audit_logger,
    )
    portfolio = PortfolioService(
        storage,
        settings=settings.portfolio,
        audit_logger=audit_logger,
    )
    reports = ReportExporter(
        portfolio,
        reports_dir=storage_settings.reports_dir,
        audit_logger=audit_logger,
    )

    return AppComponents(
        storage=storage,
        accounts=accounts,
        portfolio=portfolio,
        reports=reports,
        audit_logger=audit_logger,
    )
