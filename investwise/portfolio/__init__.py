"""Portfolio operations package."""

from investwise.portfolio.report import ReportExporter
from investwise.portfolio.service import PortfolioService
from investwise.portfolio.zakat import DEFAULT_ZAKAT_RATE, calculate_zakat, levy_for

__all__ = [
    "DEFAULT_ZAKAT_RATE",
    "PortfolioService",
    "ReportExporter",
    "calculate_zakat",
    "levy_for",
]
