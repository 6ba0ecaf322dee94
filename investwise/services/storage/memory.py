"""
In-Memory Storage Implementation

Same whole-collection contract as the file backend, over two lists.
Used by tests and by anyone who wants a throwaway session.
"""

from typing import Optional, Sequence

from investwise.models.audit import AuditEvent
from investwise.models.records import Asset, User
from investwise.services.storage.interface import (
    AuditStorageInterface,
    PortfolioStorageInterface,
)


class InMemoryStorage(PortfolioStorageInterface):
    """
    Keeps users and assets in process memory.

    Loads return fresh lists, so a caller mutating a loaded
    collection changes nothing until it saves.
    """

    def __init__(
        self,
        users: Optional[Sequence[User]] = None,
        assets: Optional[Sequence[Asset]] = None,
    ):
        self._users: list[User] = list(users or [])
        self._assets: list[Asset] = list(assets or [])

    def load_all_users(self) -> list[User]:
        return list(self._users)

    def load_all_assets(self) -> list[Asset]:
        return list(self._assets)

    def save_user(self, user: User) -> None:
        users = self.load_all_users()
        users.append(user)
        self._users = users

    def save_assets(self, new_assets: Sequence[Asset]) -> None:
        assets = self.load_all_assets()
        assets.extend(new_assets)
        self._assets = assets

    def overwrite_assets(self, all_assets: Sequence[Asset]) -> None:
        self._assets = list(all_assets)

    def clear_all(self) -> None:
        self._users = []
        self._assets = []


class InMemoryAuditStorage(AuditStorageInterface):
    """Audit events kept in a list, oldest first."""

    def __init__(self):
        self.events: list[AuditEvent] = []

    def append_event(self, event: AuditEvent) -> bool:
        self.events.append(event)
        return True

    def get_recent_events(self, limit: int = 100) -> list[dict]:
        return [event.to_log_dict() for event in reversed(self.events)][:limit]
