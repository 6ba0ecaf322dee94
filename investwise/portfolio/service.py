"""
Portfolio Operations

Add, remove and edit assets, and compute zakat, on top of the
whole-collection store.

DESIGN DECISION: Every operation reloads the full asset pool, works on
it in memory and writes the full pool back. Users only see their own
assets, numbered from 1 in stored order; those numbers map back to
positions in the full pool, so removing or editing one of two
identical assets touches exactly the one that was picked.
"""

from decimal import Decimal
from typing import Optional, Sequence

from investwise.audit import AuditLogger
from investwise.config import PortfolioSettings, get_settings
from investwise.errors import InvalidSelectionError
from investwise.models.records import (
    PREDEFINED_ASSET_CATALOG,
    Asset,
    AssetTemplate,
    User,
    ZakatSummary,
)
from investwise.portfolio.zakat import calculate_zakat
from investwise.services.storage import PortfolioStorageInterface


class PortfolioService:
    """
    Asset operations for a logged-in user.

    The storage and audit logger are passed in; the service keeps
    no state between calls.
    """

    def __init__(
        self,
        storage: PortfolioStorageInterface,
        settings: Optional[PortfolioSettings] = None,
        audit_logger: Optional[AuditLogger] = None,
        catalog: Sequence[AssetTemplate] = PREDEFINED_ASSET_CATALOG,
    ):
        self._storage = storage
        self._settings = settings or get_settings().portfolio
        self._audit_logger = audit_logger or AuditLogger()
        self._catalog = tuple(catalog)

    @property
    def zakat_rate(self) -> Decimal:
        return self._settings.zakat_rate

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def catalog(self, user: User) -> list[Asset]:
        """The predefined assets, bound to this user's id."""
        return [template.for_user(user.id) for template in self._catalog]

    def list_assets(self, user: User) -> list[Asset]:
        """The user's assets, in stored order."""
        return [asset for asset in self._storage.load_all_assets() if asset.owner_id == user.id]

    def _locate(self, user: User, choice: int) -> tuple[list[Asset], int]:
        """
        Load the pool and map a 1-based choice among the user's
        assets to a position in the full pool.
        """
        all_assets = self._storage.load_all_assets()
        positions = [i for i, asset in enumerate(all_assets) if asset.owner_id == user.id]

        if not positions:
            raise InvalidSelectionError("No assets found.")
        if not 1 <= choice <= len(positions):
            raise InvalidSelectionError(
                f"Invalid choice {choice}: pick a number from 1 to {len(positions)}."
            )
        return all_assets, positions[choice - 1]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_assets(self, assets: Sequence[Asset]) -> None:
        """Append assets to the pool as given."""
        self._storage.save_assets(assets)
        for asset in assets:
            self._audit_logger.log_asset_added(asset.owner_id, asset.name, str(asset.value))

    def add_from_catalog(self, user: User, choice: int) -> Asset:
        """
        Add the catalog entry numbered `choice` (1-based) to the user's portfolio.

        Raises:
            InvalidSelectionError: If `choice` is not a catalog number
        """
        offered = self.catalog(user)
        if not 1 <= choice <= len(offered):
            raise InvalidSelectionError("Invalid selection.")

        asset = offered[choice - 1]
        self.add_assets([asset])
        return asset

    def remove_asset(self, user: User, choice: int) -> Asset:
        """
        Remove the user's asset numbered `choice` (1-based).

        Returns:
            The removed asset

        Raises:
            InvalidSelectionError: If the user has no such asset
        """
        all_assets, position = self._locate(user, choice)
        removed = all_assets.pop(position)
        self._storage.overwrite_assets(all_assets)

        self._audit_logger.log_asset_removed(user.id, removed.name, str(removed.value))
        return removed

    def edit_asset_value(self, user: User, choice: int, new_value: Decimal) -> Asset:
        """
        Set a new value on the user's asset numbered `choice` (1-based).

        The record is replaced at the same position, so the asset keeps
        its place in the portfolio listing.

        Returns:
            The updated asset

        Raises:
            InvalidSelectionError: If the user has no such asset
            pydantic.ValidationError: If `new_value` is negative
        """
        all_assets, position = self._locate(user, choice)
        old = all_assets[position]
        updated = old.with_value(new_value)
        all_assets[position] = updated
        self._storage.overwrite_assets(all_assets)

        self._audit_logger.log_asset_edited(user.id, old.name, str(old.value), str(updated.value))
        return updated

    # ------------------------------------------------------------------
    # Calculations
    # ------------------------------------------------------------------

    def calculate_zakat(self, user: User) -> ZakatSummary:
        """Zakat due on the user's assets. Read-only."""
        summary = calculate_zakat(user.id, self._storage.load_all_assets(), self.zakat_rate)
        self._audit_logger.log_zakat_calculated(
            user.id, summary.asset_count, str(summary.total_levy)
        )
        return summary
