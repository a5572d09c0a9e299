"""Read-only report use cases."""

from datetime import date

from bodega.core.entities.report import Report
from bodega.core.exceptions import ReportNotFoundError
from bodega.core.interfaces.report_repository import IReportRepository


class ListReportsUseCase:
    def __init__(self, report_repository: IReportRepository):
        self._reports = report_repository

    def execute(self) -> list[Report]:
        return self._reports.list_all() or []


class GetReportUseCase:
    """Return a report by ID."""

    def __init__(self, report_repository: IReportRepository):
        self._reports = report_repository

    def execute(self, report_id: int) -> Report:
        report = self._reports.find_by_id(report_id)
        if report is None:
            raise ReportNotFoundError(report_id)
        return report


class FindReportsByDateUseCase:
    """Reports whose range covers a given day."""

    def __init__(self, report_repository: IReportRepository):
        self._reports = report_repository

    def execute(self, day: date) -> list[Report]:
        return self._reports.find_by_date(day) or []
