"""Abstract interface for report storage and generation."""

from abc import ABC, abstractmethod
from datetime import date

from bodega.core.entities.report import Report


class IReportRepository(ABC):
    """Interface for report persistence. Rendering is up to the implementation."""

    @abstractmethod
    def generate_for_register(self, register_id: int) -> None:
        """Generate and store the report of one cash register session."""
        pass

    @abstractmethod
    def generate_for_range(self, report: Report) -> None:
        """Generate and store the report for a date range."""
        pass

    @abstractmethod
    def delete(self, report_id: int) -> None:
        pass

    @abstractmethod
    def list_all(self) -> list[Report]:
        pass

    @abstractmethod
    def find_by_id(self, report_id: int) -> Report | None:
        pass

    @abstractmethod
    def find_by_date(self, day: date) -> list[Report]:
        """List reports whose range covers the given day."""
        pass
