"""
JSON File Storage Implementation

DESIGN DECISION: Users and assets live in two JSON documents, each a
plain array of records. JSON is used because:
1. The files are self-describing and readable in any editor
2. No database setup required
3. Pydantic serializes and validates the records for us

TRADEOFFS:
- Every write rewrites the whole file (fine for one person's portfolio)
- Writes are not atomic: a crash while writing can leave a truncated
  file, which the next load reports as corrupt. There is no backup.
- Two processes sharing a data directory overwrite each other
  (last write wins)
"""

import json
from pathlib import Path
from typing import Optional, Sequence

import structlog
from pydantic import TypeAdapter, ValidationError

from investwise.config import StorageSettings, get_settings
from investwise.models.audit import AuditEvent
from investwise.models.records import Asset, User
from investwise.services.storage.interface import (
    AuditStorageInterface,
    CorruptDataError,
    PortfolioStorageInterface,
    StorageError,
)


USERS_ADAPTER = TypeAdapter(list[User])
ASSETS_ADAPTER = TypeAdapter(list[Asset])

logger = structlog.get_logger(__name__)


class JsonFileStorage(PortfolioStorageInterface):
    """
    Flat-file implementation of user and asset storage.

    Both containers are read completely on every load and written
    completely on every save.
    """

    def __init__(
        self,
        users_path: Optional[Path] = None,
        assets_path: Optional[Path] = None,
    ):
        if users_path is None or assets_path is None:
            settings: StorageSettings = get_settings().storage
            users_path = users_path or settings.users_path
            assets_path = assets_path or settings.assets_path

        self.users_path = Path(users_path)
        self.assets_path = Path(assets_path)

    @classmethod
    def from_settings(cls, settings: StorageSettings) -> "JsonFileStorage":
        return cls(users_path=settings.users_path, assets_path=settings.assets_path)

    def _read(self, path: Path, adapter: TypeAdapter) -> list:
        """Read and validate one whole container."""
        if not path.exists():
            return []

        try:
            raw = path.read_bytes()
        except OSError as e:
            raise StorageError(f"Failed to read {path}: {e}")

        if not raw.strip():
            raise CorruptDataError(f"{path} is empty")

        try:
            return adapter.validate_json(raw)
        except ValidationError as e:
            raise CorruptDataError(f"{path} does not hold valid records: {e}")

    def _write(self, path: Path, adapter: TypeAdapter, records: Sequence) -> None:
        """Truncate and rewrite one whole container."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(adapter.dump_json(list(records), indent=2))
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}")

    def load_all_users(self) -> list[User]:
        """Load all users from the users file."""
        return self._read(self.users_path, USERS_ADAPTER)

    def load_all_assets(self) -> list[Asset]:
        """Load all assets from the assets file."""
        return self._read(self.assets_path, ASSETS_ADAPTER)

    def save_user(self, user: User) -> None:
        """Append a user and rewrite the users file."""
        users = self.load_all_users()
        users.append(user)
        self._write(self.users_path, USERS_ADAPTER, users)
        logger.info("storage_user_saved", user_id=user.id, total_users=len(users))

    def save_assets(self, new_assets: Sequence[Asset]) -> None:
        """Append assets and rewrite the assets file."""
        assets = self.load_all_assets()
        assets.extend(new_assets)
        self._write(self.assets_path, ASSETS_ADAPTER, assets)
        logger.info(
            "storage_assets_saved",
            added=len(new_assets),
            total_assets=len(assets),
        )

    def overwrite_assets(self, all_assets: Sequence[Asset]) -> None:
        """Replace the assets file content with exactly `all_assets`."""
        self._write(self.assets_path, ASSETS_ADAPTER, all_assets)
        logger.info("storage_assets_overwritten", total_assets=len(all_assets))

    def clear_all(self) -> None:
        """Delete both container files."""
        for path in (self.users_path, self.assets_path):
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                raise StorageError(f"Failed to delete {path}: {e}")
        logger.warning("storage_cleared")


class JsonLinesAuditStorage(AuditStorageInterface):
    """
    Append-only audit trail, one JSON object per line.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else get_settings().storage.audit_path

    def append_event(self, event: AuditEvent) -> bool:
        """Append an audit event."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(event.to_json_line() + "\n")
            return True
        except OSError as e:
            # Don't raise - audit logging should not break the main flow
            logger.error("audit_append_failed", error=str(e), path=str(self.path))
            return False

    def get_recent_events(self, limit: int = 100) -> list[dict]:
        """Get recent events, newest first. Malformed lines are skipped."""
        if not self.path.exists():
            return []

        try:
            lines = self.path.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            raise StorageError(f"Failed to read audit log: {e}")

        events = []
        for line in reversed(lines):
            if not line.strip():
                continue
            try:
                events.append(json.loads(line))
            except json.JSONDecodeError:
                continue
            if len(events) >= limit:
                break

        return events
