"""Generate Range Report Use Case: report over a date range."""

from datetime import date

from bodega.config import get_logger
from bodega.core.entities.report import Report
from bodega.core.interfaces.report_repository import IReportRepository

logger = get_logger(__name__)


class GenerateRangeReportUseCase:
    """Generate a report covering a validated date range."""

    def __init__(self, report_repository: IReportRepository):
        self._reports = report_repository

    def execute(self, report_id: int, start_date: date, end_date: date) -> Report:
        """Execute generate range report use case."""
        logger.info(
            "generate_range_report_started",
            report_id=report_id,
            start_date=start_date.isoformat(),
            end_date=end_date.isoformat(),
        )

        report = Report(id=report_id, start_date=start_date, end_date=end_date)
        self._reports.generate_for_range(report)

        logger.info("generate_range_report_complete", report_id=report.id, days=report.days)
        return report
