"""
Audit Logger

DESIGN DECISION: Every account and portfolio action is logged.
This provides:
1. Traceability of portfolio changes
2. Debugging capability
3. A record to reconstruct state after a bad overwrite

The audit logger:
- Always writes to the local structured log
- Gracefully handles failures (doesn't crash the app if the audit store fails)
- Is synchronous, like the rest of the console application
"""

from typing import Optional

import structlog

from investwise.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity
from investwise.services.storage import AuditStorageInterface


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. The audit store, when one is configured
    """

    def __init__(
        self,
        storage: Optional[AuditStorageInterface] = None,
    ):
        """
        Initialize audit logger.

        Args:
            storage: Storage backend for persistence.
                    If None, only logs locally.
        """
        self._storage = storage
        self._logger = structlog.get_logger("investwise.audit")

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Persists to storage if available.

        Returns True if storage write succeeded (or no storage configured).
        """
        log_dict = event.to_log_dict()

        if event.severity in (AuditSeverity.ERROR, AuditSeverity.CRITICAL):
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._storage:
            try:
                return self._storage.append_event(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "audit_storage_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    def log_account_created(self, user_id: int, email: str, seeded_assets: int = 0) -> None:
        self.log(AuditEventBuilder.account_created(user_id, email, seeded_assets))

    def log_signup_rejected(self, email: str, reason: str) -> None:
        self.log(AuditEventBuilder.signup_rejected(email, reason))

    def log_login_succeeded(self, user_id: int) -> None:
        self.log(AuditEventBuilder.login_succeeded(user_id))

    def log_login_failed(self, email: str) -> None:
        self.log(AuditEventBuilder.login_failed(email))

    def log_logout(self, user_id: int) -> None:
        self.log(AuditEventBuilder.logout(user_id))

    def log_asset_added(self, user_id: int, asset_name: str, value: str) -> None:
        self.log(AuditEventBuilder.asset_added(user_id, asset_name, value))

    def log_asset_removed(self, user_id: int, asset_name: str, value: str) -> None:
        self.log(AuditEventBuilder.asset_removed(user_id, asset_name, value))

    def log_asset_edited(
        self,
        user_id: int,
        asset_name: str,
        old_value: str,
        new_value: str,
    ) -> None:
        self.log(AuditEventBuilder.asset_edited(user_id, asset_name, old_value, new_value))

    def log_zakat_calculated(self, user_id: int, asset_count: int, total: str) -> None:
        self.log(AuditEventBuilder.zakat_calculated(user_id, asset_count, total))

    def log_report_exported(self, user_id: int, path: str) -> None:
        self.log(AuditEventBuilder.report_exported(user_id, path))

    def log_data_cleared(self) -> None:
        self.log(AuditEventBuilder.data_cleared())

    def log_storage_error(self, error_message: str, operation: str) -> None:
        self.log(AuditEventBuilder.storage_error(error_message, operation))

    def log_error(
        self,
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
    ) -> None:
        """Log an unexpected error."""
        self.log(AuditEventBuilder.system_error(error_type, error_message, details))
