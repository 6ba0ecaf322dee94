"""Tests for report export."""

from decimal import Decimal

import pytest

from investwise.errors import StorageError
from investwise.models.audit import AuditEventType
from investwise.portfolio import ReportExporter
from investwise.portfolio.report import report_filename


class TestReportExporter:
    """Tests for ReportExporter."""

    def test_export_writes_user_file(self, reports, portfolio, ann, nvidia, tmp_path):
        """Test that export writes the per-user report file."""
        portfolio.add_assets([nvidia])

        result = reports.export(ann)

        assert result.path == tmp_path / "reports" / report_filename(ann)
        content = result.path.read_text(encoding="utf-8")
        assert "[Stock] Nvidia: $17,000.00 | Zakat: $425.00" in content
        assert "Total zakat: $425.00" in content

    def test_file_matches_returned_lines(self, reports, portfolio, ann, nvidia):
        """Test that the file holds exactly the returned lines."""
        portfolio.add_assets([nvidia])
        result = reports.export(ann)
        assert result.path.read_text(encoding="utf-8").splitlines() == result.lines

    def test_totals_not_accumulated_twice(self, reports, portfolio, ann, nvidia):
        """Test that export reports the same total as calculate_zakat."""
        portfolio.add_assets([nvidia, nvidia.with_value(Decimal("3000"))])

        result = reports.export(ann)

        assert result.summary.total_levy == portfolio.calculate_zakat(ann).total_levy
        assert result.summary.total_levy == Decimal("500.00")
        total_lines = [line for line in result.lines if line.startswith("Total zakat")]
        assert total_lines == ["Total zakat: $500.00"]

    def test_only_own_assets_reported(self, reports, portfolio, ann, bob, nvidia):
        """Test that reports only list the user's assets."""
        portfolio.add_assets([nvidia])
        portfolio.add_from_catalog(bob, 4)

        result = reports.export(bob)

        assert result.summary.asset_count == 1
        assert not any("Nvidia" in line for line in result.lines)

    def test_empty_portfolio(self, reports, ann):
        """Test the report for a user with no assets."""
        result = reports.export(ann)
        assert "No assets found." in result.lines
        assert result.lines[-1] == "Total zakat: $0.00"

    def test_export_overwrites_previous(self, reports, portfolio, ann, nvidia):
        """Test that a new export replaces the old file."""
        reports.export(ann)
        portfolio.add_assets([nvidia])
        result = reports.export(ann)
        assert "Nvidia" in result.path.read_text(encoding="utf-8")

    def test_export_is_audited(self, reports, ann, audit_storage):
        """Test that export is audited after the calculation."""
        reports.export(ann)
        types = [event.event_type for event in audit_storage.events]
        assert types[-2:] == [AuditEventType.ZAKAT_CALCULATED, AuditEventType.REPORT_EXPORTED]

    def test_unwritable_reports_dir(self, portfolio, ann, tmp_path):
        """Test that write failures raise StorageError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        exporter = ReportExporter(portfolio, reports_dir=blocker)

        with pytest.raises(StorageError):
            exporter.export(ann)
