"""Product catalog entity."""

from decimal import Decimal
from enum import Enum

from pydantic import ValidationInfo, field_validator

from bodega.core.entities.base import DomainModel, validate_name
from bodega.core.exceptions import ProductDeletedError, ProductNotDeletedError
from bodega.core.money import MAX_PRICE, to_major

MAX_NAME_LENGTH = 50

_PRICE_LABELS = {
    "purchase_price": "purchase price",
    "sale_price": "sale price",
    "tax": "IGV",
}


class ProductStatus(str, Enum):
    """Soft-delete lifecycle of a product."""

    ACTIVE = "active"
    DELETED = "deleted"


class Product(DomainModel):
    """
    A product in the catalog.

    Prices are integers in centavos. The purchase price never exceeds the
    sale price. Products are never physically removed: deleting one only
    flips its status to DELETED, and it can be restored later.
    """

    id: int
    name: str
    purchase_price: int
    sale_price: int
    tax: int  # per-unit IGV amount
    stock: int = 0
    supplier_id: int | None = None
    status: ProductStatus = ProductStatus.ACTIVE

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        return validate_name(v, MAX_NAME_LENGTH, "Product name")

    @field_validator("purchase_price", "sale_price", "tax")
    @classmethod
    def check_price(cls, v: int, info: ValidationInfo) -> int:
        """Enforce range limits and purchase <= sale."""
        label = _PRICE_LABELS[info.field_name]
        if v <= 0:
            raise ValueError(f"The {label} must be greater than 0")
        if v > MAX_PRICE:
            raise ValueError(f"The {label} cannot exceed 99999.99")

        # Fields validate in declaration order, so on construction only the
        # sale price sees its counterpart. On assignment both are present.
        if info.field_name == "purchase_price":
            sale_price = info.data.get("sale_price")
            if sale_price is not None and v > sale_price:
                raise ValueError("The purchase price cannot exceed the sale price")
        elif info.field_name == "sale_price":
            purchase_price = info.data.get("purchase_price")
            if purchase_price is not None and v < purchase_price:
                raise ValueError("The sale price cannot be lower than the purchase price")
        return v

    @field_validator("stock")
    @classmethod
    def check_stock(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Stock cannot be negative")
        return v

    @property
    def is_deleted(self) -> bool:
        return self.status is ProductStatus.DELETED

    @property
    def purchase_price_major(self) -> Decimal:
        return to_major(self.purchase_price)

    @property
    def sale_price_major(self) -> Decimal:
        return to_major(self.sale_price)

    @property
    def tax_major(self) -> Decimal:
        return to_major(self.tax)

    @property
    def margin(self) -> int:
        """Gross margin per unit in centavos."""
        return self.sale_price - self.purchase_price

    def update_details(
        self,
        name: str,
        purchase_price: int,
        sale_price: int,
        tax: int,
        stock: int,
    ) -> None:
        """
        Replace the editable fields as a single change.

        The whole candidate is validated first, so a rejected update leaves
        the product untouched. Prices are then assigned in the order that
        keeps purchase <= sale true after each step.
        """
        Product(
            id=self.id,
            name=name,
            purchase_price=purchase_price,
            sale_price=sale_price,
            tax=tax,
            stock=stock,
        )

        self.name = name
        if purchase_price <= self.sale_price:
            self.purchase_price = purchase_price
            self.sale_price = sale_price
        else:
            self.sale_price = sale_price
            self.purchase_price = purchase_price
        self.tax = tax
        self.stock = stock

    def mark_deleted(self) -> None:
        """Soft-delete the product."""
        if self.is_deleted:
            raise ProductDeletedError(self.id)
        self.status = ProductStatus.DELETED

    def restore(self) -> None:
        """Bring a soft-deleted product back."""
        if not self.is_deleted:
            raise ProductNotDeletedError(self.id)
        self.status = ProductStatus.ACTIVE
