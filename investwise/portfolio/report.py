"""
Report Export

Writes a user's portfolio and zakat figures to a plain-text file.

DESIGN DECISION: The figures are computed once per export. The same
rendered lines go to the file and back to the caller for display, so
the console and the file can never disagree.
"""

from pathlib import Path
from typing import Optional

import structlog

from investwise.audit import AuditLogger
from investwise.errors import StorageError
from investwise.models.records import ReportResult, User, ZakatSummary
from investwise.portfolio.service import PortfolioService


logger = structlog.get_logger(__name__)

RULE = "-" * 48


def report_filename(user: User) -> str:
    return f"investwise_report_{user.id}.txt"


def money(amount) -> str:
    return f"${amount:,.2f}"


class ReportExporter:
    """Renders and writes portfolio reports."""

    def __init__(
        self,
        portfolio: PortfolioService,
        reports_dir: Path = Path("."),
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._portfolio = portfolio
        self._reports_dir = Path(reports_dir)
        self._audit_logger = audit_logger or AuditLogger()

    def render(self, user: User, summary: ZakatSummary) -> list[str]:
        """Report text, one list item per line."""
        lines = [
            "InvestWise Portfolio Report",
            f"User: {user.name} (ID {user.id})",
            f"Zakat rate: {summary.rate * 100:.2f}%",
            RULE,
        ]

        if not summary.lines:
            lines.append("No assets found.")
        for line in summary.lines:
            lines.append(f"{line.asset} | Zakat: {money(line.levy)}")

        lines.extend([
            RULE,
            f"Total value: {money(summary.total_value)}",
            f"Total zakat: {money(summary.total_levy)}",
        ])
        return lines

    def export(self, user: User) -> ReportResult:
        """
        Compute the user's zakat summary and write the report file.

        The file is overwritten on every export.

        Raises:
            StorageError: If the report file cannot be written
        """
        summary = self._portfolio.calculate_zakat(user)
        lines = self.render(user, summary)
        path = self._reports_dir / report_filename(user)

        try:
            self._reports_dir.mkdir(parents=True, exist_ok=True)
            path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to write report {path}: {e}")

        logger.info("report_written", user_id=user.id, path=str(path), assets=summary.asset_count)
        self._audit_logger.log_report_exported(user.id, str(path))
        return ReportResult(path=path, summary=summary, lines=lines)
