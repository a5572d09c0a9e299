"""Register Supplier Use Case: adds a supplier with unique name and RUC."""

from bodega.config import get_logger
from bodega.core.entities.supplier import Supplier
from bodega.core.exceptions import DuplicateSupplierNameError, DuplicateSupplierRucError
from bodega.core.interfaces.supplier_repository import ISupplierRepository

logger = get_logger(__name__)


class RegisterSupplierUseCase:
    """Register a new supplier."""

    def __init__(self, supplier_repository: ISupplierRepository):
        self._suppliers = supplier_repository

    def execute(self, supplier_id: int, name: str, ruc: int) -> Supplier:
        """Execute register supplier use case."""
        logger.info("register_supplier_started", supplier_id=supplier_id, ruc=ruc)

        if self._suppliers.find_by_name(name.strip()) is not None:
            raise DuplicateSupplierNameError(name.strip())
        if self._suppliers.find_by_ruc(ruc) is not None:
            raise DuplicateSupplierRucError(ruc)

        supplier = Supplier(id=supplier_id, name=name, ruc=ruc)
        self._suppliers.save(supplier)

        logger.info("register_supplier_complete", supplier_id=supplier.id)
        return supplier
