"""Audit logging package."""

from investwise.audit.logger import AuditLogger
from investwise.config import configure_logging

__all__ = ["AuditLogger", "configure_logging"]
