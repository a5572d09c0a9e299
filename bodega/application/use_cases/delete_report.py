"""Delete Report Use Case."""

from bodega.config import get_logger
from bodega.core.exceptions import ReportNotFoundError
from bodega.core.interfaces.report_repository import IReportRepository

logger = get_logger(__name__)


class DeleteReportUseCase:
    def __init__(self, report_repository: IReportRepository):
        self._reports = report_repository

    def execute(self, report_id: int) -> None:
        """Execute delete report use case."""
        logger.info("delete_report_started", report_id=report_id)

        if self._reports.find_by_id(report_id) is None:
            raise ReportNotFoundError(report_id)
        self._reports.delete(report_id)

        logger.info("delete_report_complete", report_id=report_id)
