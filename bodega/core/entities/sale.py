"""Sale entity with integer (centavo) arithmetic."""

from datetime import datetime
from decimal import Decimal

from pydantic import ConfigDict, Field, field_validator

from bodega.core.entities.base import DomainModel
from bodega.core.money import tax_for, to_major


class SaleItem(DomainModel):
    """A single line of a sale."""

    model_config = ConfigDict(frozen=True)

    quantity: int
    unit_price: int  # centavos
    product_id: int | None = None

    @field_validator("quantity")
    @classmethod
    def check_quantity(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("The quantity must be greater than 0")
        return v

    @field_validator("unit_price")
    @classmethod
    def check_unit_price(cls, v: int) -> int:
        if v < 0:
            raise ValueError("The unit price cannot be negative")
        return v

    @property
    def line_total(self) -> int:
        return self.quantity * self.unit_price


class Sale(DomainModel):
    """
    A sale made of line items.

    Subtotal, tax and total are derived on every read from the items and
    the discount, so they can never drift from their inputs:

        subtotal = sum(quantity * unit_price)
        tax      = IGV on the subtotal, rounded half up
        total    = subtotal + tax - discount

    Only the discount can change after the sale is built.
    """

    id: int = Field(frozen=True)
    date: datetime = Field(default_factory=datetime.now, frozen=True)
    customer_id: int | None = Field(default=None, frozen=True)
    items: tuple[SaleItem, ...] = Field(default_factory=tuple, frozen=True)
    discount: int = 0

    @field_validator("discount")
    @classmethod
    def check_discount(cls, v: int) -> int:
        if v < 0:
            raise ValueError("The discount cannot be negative")
        return v

    @property
    def subtotal(self) -> int:
        return sum(item.line_total for item in self.items)

    @property
    def tax(self) -> int:
        return tax_for(self.subtotal)

    @property
    def total(self) -> int:
        return self.subtotal + self.tax - self.discount

    @property
    def subtotal_major(self) -> Decimal:
        return to_major(self.subtotal)

    @property
    def tax_major(self) -> Decimal:
        return to_major(self.tax)

    @property
    def total_major(self) -> Decimal:
        return to_major(self.total)

    def apply_discount(self, amount: int) -> None:
        """Set the discount in centavos; totals follow automatically."""
        self.discount = amount

    def references_product(self, product_id: int) -> bool:
        return any(item.product_id == product_id for item in self.items)
