"""
Data Models Package

This package contains all Pydantic models used in InvestWise.
All stored and reported data must conform to these schemas.
"""

from investwise.models.records import (
    DEMO_STARTER_ASSETS,
    PREDEFINED_ASSET_CATALOG,
    Asset,
    AssetTemplate,
    ReportResult,
    User,
    ZakatLine,
    ZakatSummary,
    to_cents,
)
from investwise.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Records
    "Asset",
    "AssetTemplate",
    "DEMO_STARTER_ASSETS",
    "PREDEFINED_ASSET_CATALOG",
    "ReportResult",
    "User",
    "ZakatLine",
    "ZakatSummary",
    "to_cents",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
