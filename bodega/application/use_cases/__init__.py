"""Application use cases."""

from bodega.application.use_cases.cash_register_queries import (
    FindCashRegisterByDateUseCase,
    GetCashRegisterUseCase,
    ListClosedCashRegistersUseCase,
    ShowActiveCashRegisterUseCase,
)
from bodega.application.use_cases.close_cash_register import CloseCashRegisterUseCase
from bodega.application.use_cases.create_user import CreateUserUseCase
from bodega.application.use_cases.delete_product import DeleteProductUseCase
from bodega.application.use_cases.delete_report import DeleteReportUseCase
from bodega.application.use_cases.delete_sale import DeleteSaleUseCase
from bodega.application.use_cases.delete_supplier import DeleteSupplierUseCase
from bodega.application.use_cases.generate_range_report import GenerateRangeReportUseCase
from bodega.application.use_cases.generate_register_report import (
    GenerateRegisterReportUseCase,
)
from bodega.application.use_cases.login import LoginUseCase
from bodega.application.use_cases.open_cash_register import OpenCashRegisterUseCase
from bodega.application.use_cases.product_queries import (
    GetProductUseCase,
    ListProductsUseCase,
)
from bodega.application.use_cases.register_product import RegisterProductUseCase
from bodega.application.use_cases.register_sale import RegisterSaleUseCase
from bodega.application.use_cases.register_supplier import RegisterSupplierUseCase
from bodega.application.use_cases.report_queries import (
    FindReportsByDateUseCase,
    GetReportUseCase,
    ListReportsUseCase,
)
from bodega.application.use_cases.restore_product import RestoreProductUseCase
from bodega.application.use_cases.sale_queries import (
    FindSalesByDateUseCase,
    GetSaleUseCase,
    ListSalesUseCase,
)
from bodega.application.use_cases.supplier_queries import (
    GetSupplierUseCase,
    ListSuppliersUseCase,
)
from bodega.application.use_cases.update_product import UpdateProductUseCase
from bodega.application.use_cases.update_supplier import UpdateSupplierUseCase
from bodega.application.use_cases.update_user import UpdateUserUseCase
from bodega.application.use_cases.user_queries import (
    CheckUserExistsUseCase,
    ShowUserUseCase,
)

__all__ = [
    # Cash register
    "OpenCashRegisterUseCase",
    "RegisterSaleUseCase",
    "CloseCashRegisterUseCase",
    "ShowActiveCashRegisterUseCase",
    "ListClosedCashRegistersUseCase",
    "FindCashRegisterByDateUseCase",
    "GetCashRegisterUseCase",
    # Products
    "RegisterProductUseCase",
    "UpdateProductUseCase",
    "DeleteProductUseCase",
    "RestoreProductUseCase",
    "ListProductsUseCase",
    "GetProductUseCase",
    # Suppliers
    "RegisterSupplierUseCase",
    "UpdateSupplierUseCase",
    "DeleteSupplierUseCase",
    "ListSuppliersUseCase",
    "GetSupplierUseCase",
    # User
    "CreateUserUseCase",
    "UpdateUserUseCase",
    "LoginUseCase",
    "CheckUserExistsUseCase",
    "ShowUserUseCase",
    # Sales
    "ListSalesUseCase",
    "FindSalesByDateUseCase",
    "GetSaleUseCase",
    "DeleteSaleUseCase",
    # Reports
    "GenerateRegisterReportUseCase",
    "GenerateRangeReportUseCase",
    "ListReportsUseCase",
    "GetReportUseCase",
    "FindReportsByDateUseCase",
    "DeleteReportUseCase",
]
