"""
Audit Models for InvestWise

Every account and portfolio action is recorded as an audit event.
This provides:
1. Traceability of who changed what in the portfolio
2. Debugging information when things go wrong
3. A way to reconstruct history after a bad overwrite

DESIGN DECISION: Audit logs are append-only. We never delete or modify them.
"""

import json
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Accounts
    ACCOUNT_CREATED = "account_created"
    SIGNUP_REJECTED = "signup_rejected"
    LOGIN_SUCCEEDED = "login_succeeded"
    LOGIN_FAILED = "login_failed"
    LOGOUT = "logout"

    # Portfolio
    ASSET_ADDED = "asset_added"
    ASSET_REMOVED = "asset_removed"
    ASSET_EDITED = "asset_edited"
    ZAKAT_CALCULATED = "zakat_calculated"
    REPORT_EXPORTED = "report_exported"

    # Maintenance
    DATA_CLEARED = "data_cleared"

    # System events
    STORAGE_ERROR = "storage_error"
    SYSTEM_ERROR = "system_error"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AuditEvent(BaseModel):
    """
    A single audit event.

    Every significant action creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Who acted
    user_id: Optional[int] = Field(
        default=None,
        description="Id of the acting user, if known"
    )

    # Event details
    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (if applicable)
    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "user_id": self.user_id,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }

    def to_json_line(self) -> str:
        """Serialize as one line of the append-only audit file."""
        return json.dumps(self.to_log_dict(), default=str)


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.account_created(user_id, email)
        event = AuditEventBuilder.asset_removed(user_id, "Nvidia", "17000")
    """

    @staticmethod
    def account_created(user_id: int, email: str, seeded_assets: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ACCOUNT_CREATED,
            user_id=user_id,
            description=f"Account created for {email}",
            details={
                "email": email,
                "seeded_assets": seeded_assets,
            },
            is_user_action=True,
        )

    @staticmethod
    def signup_rejected(email: str, reason: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SIGNUP_REJECTED,
            severity=AuditSeverity.WARNING,
            description=f"Sign-up rejected: {reason}",
            details={"email": email},
            is_user_action=True,
        )

    @staticmethod
    def login_succeeded(user_id: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOGIN_SUCCEEDED,
            user_id=user_id,
            description="User logged in",
            is_user_action=True,
        )

    @staticmethod
    def login_failed(email: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOGIN_FAILED,
            severity=AuditSeverity.WARNING,
            description="Login failed: invalid email or password",
            details={"email": email},
            is_user_action=True,
        )

    @staticmethod
    def logout(user_id: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOGOUT,
            user_id=user_id,
            description="User logged out",
            is_user_action=True,
        )

    @staticmethod
    def asset_added(user_id: int, asset_name: str, value: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ASSET_ADDED,
            user_id=user_id,
            description=f"Asset added: {asset_name}",
            details={"asset": asset_name, "value": value},
            is_user_action=True,
        )

    @staticmethod
    def asset_removed(user_id: int, asset_name: str, value: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ASSET_REMOVED,
            user_id=user_id,
            description=f"Asset removed: {asset_name}",
            details={"asset": asset_name, "value": value},
            is_user_action=True,
        )

    @staticmethod
    def asset_edited(
        user_id: int,
        asset_name: str,
        old_value: str,
        new_value: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ASSET_EDITED,
            user_id=user_id,
            description=f"Asset value changed: {asset_name}",
            details={
                "asset": asset_name,
                "old_value": old_value,
                "new_value": new_value,
            },
            is_user_action=True,
        )

    @staticmethod
    def zakat_calculated(user_id: int, asset_count: int, total: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ZAKAT_CALCULATED,
            user_id=user_id,
            description=f"Zakat calculated over {asset_count} assets",
            details={"asset_count": asset_count, "total_zakat": total},
            is_user_action=True,
        )

    @staticmethod
    def report_exported(user_id: int, path: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.REPORT_EXPORTED,
            user_id=user_id,
            description="Portfolio report exported",
            details={"path": path},
            is_user_action=True,
        )

    @staticmethod
    def data_cleared() -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DATA_CLEARED,
            severity=AuditSeverity.WARNING,
            description="All user and asset data cleared",
        )

    @staticmethod
    def storage_error(error_message: str, operation: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORAGE_ERROR,
            severity=AuditSeverity.CRITICAL,
            description=f"Storage failure during {operation}",
            error_message=error_message,
            details={"operation": operation},
        )

    @staticmethod
    def system_error(
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SYSTEM_ERROR,
            severity=AuditSeverity.ERROR,
            description=f"System error: {error_type}",
            error_message=error_message,
            details=details or {},
        )
