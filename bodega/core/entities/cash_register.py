"""Cash register ("caja") session entity."""

from datetime import datetime

from pydantic import Field, model_validator

from bodega.core.entities.base import DomainModel
from bodega.core.entities.sale import Sale
from bodega.core.exceptions import CashRegisterClosedError


class CashRegister(DomainModel):
    """
    One open/closed period of the till and the sales recorded in it.

    Sales can only be appended while the register is open. Closing is one-way.
    Aggregates are summed on demand from the sales' integer amounts.
    """

    id: int | None = None
    opened_at: datetime = Field(default_factory=datetime.now)
    closed_at: datetime | None = None
    closed: bool = False
    sales: list[Sale] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_closing_time(self) -> "CashRegister":
        if self.closed and self.closed_at is None:
            raise ValueError("A closed register must record its closing time")
        return self

    @property
    def is_active(self) -> bool:
        return not self.closed

    @property
    def sale_count(self) -> int:
        return len(self.sales)

    @property
    def subtotal(self) -> int:
        return sum(sale.subtotal for sale in self.sales)

    @property
    def tax(self) -> int:
        return sum(sale.tax for sale in self.sales)

    @property
    def total(self) -> int:
        return sum(sale.total for sale in self.sales)

    def register_sale(self, sale: Sale) -> None:
        if self.closed:
            raise CashRegisterClosedError()
        # append() on the list bypasses assignment validation
        self.sales.append(sale)

    def close(self) -> None:
        if self.closed:
            raise CashRegisterClosedError()
        # closed requires closed_at, so set the time first
        self.closed_at = datetime.now()
        self.closed = True
