"""
Tests for InvestWise models

Test strategy:
1. Unit tests for individual components (models, storage, managers)
2. Flow tests over in-memory and file storage
3. No real user input in tests (scripted streams)
"""

import pytest
from decimal import Decimal
from pathlib import Path

from pydantic import ValidationError

from investwise.config import (
    AccountSettings,
    AppSettings,
    PortfolioSettings,
    validate_all_settings,
)
from investwise.models.records import (
    DEMO_STARTER_ASSETS,
    PREDEFINED_ASSET_CATALOG,
    Asset,
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


class TestRecordModels:
    """Tests for the stored record models."""

    def test_user_creation(self):
        """Test User model creation."""
        user = User(id=1234, name="Ann", email="ann@x.com", password="pw1")
        assert user.id == 1234
        assert user.email == "ann@x.com"

    def test_user_strips_whitespace(self):
        """Test that whitespace is stripped from name and email."""
        user = User(id=1234, name="  Ann  ", email=" ann@x.com ", password="pw1")
        assert user.name == "Ann"
        assert user.email == "ann@x.com"

    def test_user_keeps_password_verbatim(self):
        """Test that surrounding whitespace in a password is kept."""
        user = User(id=1234, name="Ann", email="ann@x.com", password="  pw1  ")
        assert user.password == "  pw1  "

    def test_user_id_range(self):
        """Test that ids outside 1000-9999 are rejected."""
        with pytest.raises(ValidationError):
            User(id=999, name="Ann", email="ann@x.com", password="pw1")
        with pytest.raises(ValidationError):
            User(id=10000, name="Ann", email="ann@x.com", password="pw1")

    def test_user_rejects_blank_fields(self):
        """Test that blank name/email/password are rejected."""
        with pytest.raises(ValidationError):
            User(id=1234, name="   ", email="ann@x.com", password="pw1")
        with pytest.raises(ValidationError):
            User(id=1234, name="Ann", email="ann@x.com", password="")
        with pytest.raises(ValidationError):
            User(id=1234, name="Ann", email="ann@x.com", password="   ")

    def test_user_email_matches_ignores_case(self):
        """Test that email comparison ignores letter case."""
        user = User(id=1234, name="Ann", email="Ann@X.com", password="pw1")
        assert user.email_matches("ANN@x.COM")
        assert not user.email_matches("ann@y.com")

    def test_user_is_immutable(self):
        """Test that a User cannot be changed after creation."""
        user = User(id=1234, name="Ann", email="ann@x.com", password="pw1")
        with pytest.raises(ValidationError):
            user.name = "Bob"

    def test_asset_rejects_negative_value(self):
        """Test that negative values are rejected."""
        with pytest.raises(ValidationError):
            Asset(owner_id=1000, category="Stock", name="Nvidia", value=Decimal("-1"))

    def test_asset_with_value_returns_new_record(self):
        """Test that with_value leaves the original asset untouched."""
        asset = Asset(owner_id=1000, category="Stock", name="Nvidia", value=Decimal("15000"))
        updated = asset.with_value(Decimal("20000"))
        assert updated.value == Decimal("20000")
        assert asset.value == Decimal("15000")
        assert (updated.owner_id, updated.category, updated.name) == (1000, "Stock", "Nvidia")

    def test_asset_display(self):
        """Test the one-line asset rendering."""
        asset = Asset(owner_id=1000, category="Gold", name="Gold Bar", value=Decimal("18000"))
        assert str(asset) == "[Gold] Gold Bar: $18,000.00"

    def test_asset_owner_not_validated(self):
        """Assets can reference users that do not exist."""
        asset = Asset(owner_id=424242, category="Stock", name="Orphan", value=Decimal("1"))
        assert asset.owner_id == 424242


class TestCatalogs:
    """Tests for the hard-coded asset lists."""

    def test_predefined_catalog(self):
        """Test the catalog offered by Add Asset."""
        names = [template.name for template in PREDEFINED_ASSET_CATALOG]
        assert names == ["Nvidia", "Vacation Home", "Gold Necklace", "Ethereum"]

    def test_demo_starter_assets(self):
        """Test the demo assets seeded at sign-up."""
        assert len(DEMO_STARTER_ASSETS) == 5
        total = sum(template.value for template in DEMO_STARTER_ASSETS)
        assert total == Decimal("305000")

    def test_template_for_user(self):
        """Test binding a template to an owner."""
        asset = PREDEFINED_ASSET_CATALOG[0].for_user(4321)
        assert asset.owner_id == 4321
        assert asset.category == "Stock"
        assert asset.value == Decimal("17000")


class TestZakatModels:
    """Tests for the zakat summary model."""

    def test_to_cents_rounds_half_up(self):
        """Test half-up rounding to cents."""
        assert to_cents(Decimal("0.125")) == Decimal("0.13")
        assert to_cents(Decimal("0.124")) == Decimal("0.12")

    def test_summary_totals(self):
        """Test ZakatSummary totals."""
        a = Asset(owner_id=1000, category="Stock", name="A", value=Decimal("100"))
        b = Asset(owner_id=1000, category="Gold", name="B", value=Decimal("300"))
        summary = ZakatSummary(
            user_id=1000,
            rate=Decimal("0.025"),
            lines=[
                ZakatLine(asset=a, levy=Decimal("2.50")),
                ZakatLine(asset=b, levy=Decimal("7.50")),
            ],
        )
        assert summary.total_value == Decimal("400")
        assert summary.total_levy == Decimal("10.00")
        assert summary.asset_count == 2

    def test_empty_summary(self):
        """Test that an empty summary totals to zero."""
        summary = ZakatSummary(user_id=1000, rate=Decimal("0.025"))
        assert summary.total_levy == Decimal("0")
        assert summary.asset_count == 0

    def test_report_result_requires_lines(self):
        """Test that a report must have content."""
        with pytest.raises(ValidationError):
            ReportResult(
                path=Path("report.txt"),
                summary=ZakatSummary(user_id=1000, rate=Decimal("0.025")),
                lines=[],
            )


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        """Test AuditEvent model creation."""
        event = AuditEvent(
            event_type=AuditEventType.ASSET_ADDED,
            description="Asset added",
        )
        assert event.event_type == AuditEventType.ASSET_ADDED
        assert event.severity == AuditSeverity.INFO

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        event = AuditEvent(
            event_type=AuditEventType.ASSET_REMOVED,
            user_id=1000,
            description="Asset removed",
            details={"asset": "Nvidia", "value": "17000"},
        )
        log_dict = event.to_log_dict()
        assert "event_id" in log_dict
        assert log_dict["event_type"] == "asset_removed"
        assert log_dict["user_id"] == 1000
        assert log_dict["details"]["asset"] == "Nvidia"

    def test_audit_event_to_json_line(self):
        """Test that an event serializes to a single JSON line."""
        event = AuditEventBuilder.login_succeeded(1000)
        line = event.to_json_line()
        assert "\n" not in line
        assert '"event_type": "login_succeeded"' in line

    def test_audit_event_builder_account_created(self):
        """Test AuditEventBuilder.account_created."""
        event = AuditEventBuilder.account_created(1000, "ann@x.com", seeded_assets=5)
        assert event.event_type == AuditEventType.ACCOUNT_CREATED
        assert event.user_id == 1000
        assert event.details["seeded_assets"] == 5
        assert event.is_user_action is True

    def test_audit_event_builder_login_failed_is_warning(self):
        """Test that failed logins are warnings without a user id."""
        event = AuditEventBuilder.login_failed("ann@x.com")
        assert event.severity == AuditSeverity.WARNING
        assert event.user_id is None

    def test_audit_event_builder_storage_error(self):
        """Test AuditEventBuilder.storage_error."""
        event = AuditEventBuilder.storage_error("disk full", "save_user")
        assert event.severity == AuditSeverity.CRITICAL
        assert event.error_message == "disk full"
        assert event.is_user_action is False

    def test_audit_event_builder_system_error(self):
        """Test AuditEventBuilder.system_error."""
        event = AuditEventBuilder.system_error("RuntimeError", "boom")
        assert event.event_type == AuditEventType.SYSTEM_ERROR
        assert event.severity == AuditSeverity.ERROR
        assert event.error_message == "boom"
        assert event.details == {}


class TestSettings:
    """Tests for settings validation."""

    def test_account_defaults(self):
        """Test the default account id range."""
        settings = AccountSettings()
        assert settings.id_min == 1000
        assert settings.id_max == 9999

    def test_account_rejects_empty_id_range(self):
        """Test that id_max below id_min is rejected."""
        with pytest.raises(ValidationError):
            AccountSettings(id_min=5000, id_max=4000)

    def test_zakat_rate_bounds(self):
        """Test the default zakat rate and its upper bound."""
        assert PortfolioSettings().zakat_rate == Decimal("0.025")
        with pytest.raises(ValidationError):
            PortfolioSettings(zakat_rate=Decimal("1.5"))

    def test_log_level_normalized(self):
        """Test that log levels are upper-cased and checked."""
        assert AppSettings(log_level="info").log_level == "INFO"
        with pytest.raises(ValidationError):
            AppSettings(log_level="LOUD")

    def test_debug_mode_forces_debug_logging(self):
        """Test that debug_mode overrides the configured log level."""
        assert AppSettings(log_level="ERROR").effective_log_level == "ERROR"
        assert AppSettings(log_level="ERROR", debug_mode=True).effective_log_level == "DEBUG"

    def test_env_override(self, monkeypatch):
        """Test that environment variables override defaults."""
        monkeypatch.setenv("INVESTWISE_ACCOUNT_SEED_DEMO_ASSETS", "true")
        assert AccountSettings().seed_demo_assets is True

    def test_validate_all_settings_ok(self):
        """Test that default settings all validate."""
        status = validate_all_settings()
        assert status == {"storage": True, "account": True, "portfolio": True, "app": True}

    def test_validate_all_settings_reports_failure(self, monkeypatch):
        """Test that a bad environment value is reported per group."""
        monkeypatch.setenv("INVESTWISE_ACCOUNT_ID_MIN", "5")
        status = validate_all_settings()
        assert status["account"] is False
        assert "account_error" in status
        assert status["portfolio"] is True


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
