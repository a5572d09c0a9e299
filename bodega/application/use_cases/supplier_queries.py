"""Read-only supplier use cases."""

from bodega.core.entities.supplier import Supplier
from bodega.core.exceptions import SupplierNotFoundError
from bodega.core.interfaces.supplier_repository import ISupplierRepository


class ListSuppliersUseCase:
    def __init__(self, supplier_repository: ISupplierRepository):
        self._suppliers = supplier_repository

    def execute(self) -> list[Supplier]:
        return self._suppliers.list_all() or []


class GetSupplierUseCase:
    """Return a supplier by ID."""

    def __init__(self, supplier_repository: ISupplierRepository):
        self._suppliers = supplier_repository

    def execute(self, supplier_id: int) -> Supplier:
        supplier = self._suppliers.find_by_id(supplier_id)
        if supplier is None:
            raise SupplierNotFoundError(supplier_id)
        return supplier
