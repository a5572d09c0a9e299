"""Report descriptor: a validated, immutable date range."""

from datetime import date

from pydantic import ConfigDict, model_validator

from bodega.core.entities.base import DomainModel


class Report(DomainModel):
    """Date range a sales report covers. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    id: int
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def check_range(self) -> "Report":
        if self.end_date < self.start_date:
            raise ValueError("The end date cannot be earlier than the start date")
        return self

    @property
    def days(self) -> int:
        """Number of days covered, both ends included."""
        return (self.end_date - self.start_date).days + 1

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date
