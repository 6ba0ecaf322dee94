"""Zakat calculation over a list of assets."""

from decimal import Decimal
from typing import Iterable

from investwise.models.records import Asset, ZakatLine, ZakatSummary, to_cents


DEFAULT_ZAKAT_RATE = Decimal("0.025")


def levy_for(value: Decimal, rate: Decimal = DEFAULT_ZAKAT_RATE) -> Decimal:
    """Levy due on one value, rounded half-up to cents."""
    return to_cents(value * rate)


def calculate_zakat(
    user_id: int,
    assets: Iterable[Asset],
    rate: Decimal = DEFAULT_ZAKAT_RATE,
) -> ZakatSummary:
    """
    Build the zakat summary for one user.

    Assets owned by anyone else are ignored, so the caller may pass
    the whole pool.
    """
    lines = [
        ZakatLine(asset=asset, levy=levy_for(asset.value, rate))
        for asset in assets
        if asset.owner_id == user_id
    ]
    return ZakatSummary(user_id=user_id, rate=rate, lines=lines)
