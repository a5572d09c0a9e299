"""Core domain entities."""

from bodega.core.entities.base import DomainModel
from bodega.core.entities.cash_register import CashRegister
from bodega.core.entities.product import Product, ProductStatus
from bodega.core.entities.report import Report
from bodega.core.entities.sale import Sale, SaleItem
from bodega.core.entities.supplier import Supplier
from bodega.core.entities.user import User

__all__ = [
    "DomainModel",
    # Catalog entities
    "Product",
    "ProductStatus",
    "Supplier",
    # Sales entities
    "Sale",
    "SaleItem",
    "CashRegister",
    # Reporting entities
    "Report",
    # Account entities
    "User",
]
