"""
Core Data Models for InvestWise

These models define the schemas for everything that is stored
or reported. They are designed to:
1. Enforce type safety at runtime
2. Provide clear validation error messages
3. Be serializable for flat-file storage and logging

DESIGN DECISION: Records are frozen. Editing an asset's value means
building a new Asset and putting it where the old one was, so a
record that was handed out can never change behind the caller's back.
"""

from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


CENTS = Decimal("0.01")


def to_cents(amount: Decimal) -> Decimal:
    """Round a monetary amount half-up to two decimal places."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


# =============================================================================
# STORED RECORDS
# =============================================================================

class User(BaseModel):
    """
    A registered account.

    CRITICAL: The password is stored and compared in clear form.
    This application does not harden authentication.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(
        ...,
        ge=1000,
        le=9999,
        description="Account id, assigned at sign-up"
    )
    name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Display name"
    )
    email: str = Field(
        ...,
        min_length=1,
        max_length=320,
        description="Login email (unique, case-insensitive)"
    )
    password: str = Field(
        ...,
        min_length=1,
        description="Plaintext password, kept exactly as entered"
    )

    @field_validator('name', 'email', mode='before')
    @classmethod
    def strip_text(cls, v):
        """Trim surrounding whitespace from name and email."""
        return v.strip() if isinstance(v, str) else v

    @field_validator('password')
    @classmethod
    def password_not_blank(cls, v: str) -> str:
        """Reject whitespace-only passwords without altering the value."""
        if not v.strip():
            raise ValueError("Password cannot be blank")
        return v

    def email_matches(self, email: str) -> bool:
        """Case-insensitive email comparison."""
        return self.email.casefold() == email.strip().casefold()

    def __str__(self) -> str:
        return f"User{{ID={self.id}, name={self.name}, email={self.email}}}"


class Asset(BaseModel):
    """
    One holding in the global asset pool.

    DESIGN DECISION: Assets carry their owner's id but nothing checks
    that the owner exists. Per-user views filter the whole pool.
    """
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    owner_id: int = Field(
        ...,
        description="Id of the owning user"
    )
    category: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Free-form label, e.g. 'Stock' or 'Gold'"
    )
    name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Asset name"
    )
    value: Decimal = Field(
        ...,
        ge=0,
        description="Current monetary value"
    )

    def with_value(self, value: Decimal) -> "Asset":
        """Return a validated copy of this asset holding a new value."""
        return Asset(
            owner_id=self.owner_id,
            category=self.category,
            name=self.name,
            value=value,
        )

    def __str__(self) -> str:
        return f"[{self.category}] {self.name}: ${self.value:,.2f}"


# =============================================================================
# CATALOG
# =============================================================================

class AssetTemplate(BaseModel):
    """An entry of a hard-coded asset list, not yet bound to a user."""
    model_config = ConfigDict(frozen=True)

    category: str
    name: str
    value: Decimal = Field(ge=0)

    def for_user(self, user_id: int) -> Asset:
        return Asset(
            owner_id=user_id,
            category=self.category,
            name=self.name,
            value=self.value,
        )


PREDEFINED_ASSET_CATALOG: tuple[AssetTemplate, ...] = (
    AssetTemplate(category="Stock", name="Nvidia", value=Decimal("17000")),
    AssetTemplate(category="Real Estate", name="Vacation Home", value=Decimal("400000")),
    AssetTemplate(category="Gold", name="Gold Necklace", value=Decimal("7000")),
    AssetTemplate(category="Crypto", name="Ethereum", value=Decimal("3000")),
)

DEMO_STARTER_ASSETS: tuple[AssetTemplate, ...] = (
    AssetTemplate(category="Stock", name="Apple Inc", value=Decimal("15000")),
    AssetTemplate(category="Stock", name="Tesla", value=Decimal("10000")),
    AssetTemplate(category="Real Estate", name="Rental Apartment", value=Decimal("250000")),
    AssetTemplate(category="Gold", name="Gold Bar", value=Decimal("18000")),
    AssetTemplate(category="Crypto", name="Bitcoin", value=Decimal("12000")),
)


# =============================================================================
# ZAKAT / REPORT MODELS
# =============================================================================

class ZakatLine(BaseModel):
    """Levy due on a single asset."""

    asset: Asset
    levy: Decimal = Field(
        ...,
        ge=0,
        description="value x rate, rounded to cents"
    )


class ZakatSummary(BaseModel):
    """
    Zakat due on one user's portfolio.

    The total is the sum of the already-rounded per-asset levies,
    so the report lines always add up to the printed total.
    """

    user_id: int
    rate: Decimal
    lines: list[ZakatLine] = Field(default_factory=list)

    @property
    def total_value(self) -> Decimal:
        return sum((line.asset.value for line in self.lines), Decimal("0"))

    @property
    def total_levy(self) -> Decimal:
        return sum((line.levy for line in self.lines), Decimal("0"))

    @property
    def asset_count(self) -> int:
        return len(self.lines)


class ReportResult(BaseModel):
    """What an export produced: the file, the figures and the rendered text."""

    path: Path
    summary: ZakatSummary
    lines: list[str] = Field(default_factory=list)

    @field_validator('lines')
    @classmethod
    def require_lines(cls, v: list[str]) -> list[str]:
        """A report always has at least a header."""
        if not v:
            raise ValueError("Report must contain at least one line")
        return v
