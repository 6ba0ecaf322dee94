"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Keep the flat-file backend for real use
2. Use in-memory storage for testing
3. Keep account and portfolio logic decoupled from the file format

The contract is whole-collection: every load returns the complete
stored collection, and every save rewrites it. There are no
per-record reads or updates.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from investwise.errors import CorruptDataError, StorageError
from investwise.models.audit import AuditEvent
from investwise.models.records import Asset, User


class PortfolioStorageInterface(ABC):
    """
    Abstract interface for user and asset storage.

    Any storage implementation (JSON files, memory, ...)
    must implement these methods.
    """

    @abstractmethod
    def load_all_users(self) -> list[User]:
        """
        Load every stored user.

        Returns:
            All users in stored order; empty if nothing was stored yet

        Raises:
            StorageError: If the stored data is corrupt or unreadable
        """
        pass

    @abstractmethod
    def load_all_assets(self) -> list[Asset]:
        """
        Load every stored asset, for all owners.

        Returns:
            All assets in stored order; empty if nothing was stored yet

        Raises:
            StorageError: If the stored data is corrupt or unreadable
        """
        pass

    @abstractmethod
    def save_user(self, user: User) -> None:
        """
        Append a user and rewrite the user collection.

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    def save_assets(self, new_assets: Sequence[Asset]) -> None:
        """
        Append assets and rewrite the asset collection.

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    def overwrite_assets(self, all_assets: Sequence[Asset]) -> None:
        """
        Replace the stored asset collection with exactly `all_assets`.

        The caller must pass the complete desired end state,
        including other users' assets.

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    def clear_all(self) -> None:
        """Remove every stored user and asset."""
        pass

    def validate_email_unique(self, email: str) -> bool:
        """
        Check that no stored user has this email.

        Comparison is case-insensitive.

        Returns:
            False if any existing user's email matches, True otherwise
        """
        for user in self.load_all_users():
            if user.email_matches(email):
                return False
        return True


class AuditStorageInterface(ABC):
    """
    Abstract interface for audit log storage.

    Audit logs are append-only - we never delete or modify them.
    """

    @abstractmethod
    def append_event(self, event: AuditEvent) -> bool:
        """
        Append an audit event to the log.

        Returns:
            True if logged successfully
        """
        pass

    @abstractmethod
    def get_recent_events(self, limit: int = 100) -> list[dict]:
        """
        Get the most recent audit events.

        Args:
            limit: Maximum number of events to return

        Returns:
            List of recent events as dicts (newest first)
        """
        pass


__all__ = [
    "AuditStorageInterface",
    "CorruptDataError",
    "PortfolioStorageInterface",
    "StorageError",
]
