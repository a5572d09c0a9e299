"""Core interfaces (ports) for dependency injection."""

from bodega.core.interfaces.cash_register_repository import ICashRegisterRepository
from bodega.core.interfaces.product_repository import IProductRepository
from bodega.core.interfaces.report_repository import IReportRepository
from bodega.core.interfaces.sale_repository import ISaleRepository
from bodega.core.interfaces.supplier_repository import ISupplierRepository
from bodega.core.interfaces.user_repository import IUserRepository

__all__ = [
    "ICashRegisterRepository",
    "IProductRepository",
    "ISupplierRepository",
    "IUserRepository",
    "ISaleRepository",
    "IReportRepository",
]
