"""Update Supplier Use Case."""

from bodega.config import get_logger
from bodega.core.entities.supplier import Supplier
from bodega.core.exceptions import (
    DuplicateSupplierNameError,
    DuplicateSupplierRucError,
    SupplierNotFoundError,
)
from bodega.core.interfaces.supplier_repository import ISupplierRepository

logger = get_logger(__name__)


class UpdateSupplierUseCase:
    """Rename a supplier and/or change its RUC."""

    def __init__(self, supplier_repository: ISupplierRepository):
        self._suppliers = supplier_repository

    def execute(self, supplier_id: int, name: str, ruc: int) -> Supplier:
        """Execute update supplier use case."""
        logger.info("update_supplier_started", supplier_id=supplier_id)

        supplier = self._suppliers.find_by_id(supplier_id)
        if supplier is None:
            raise SupplierNotFoundError(supplier_id)

        # Uniqueness, ignoring the supplier being edited
        clash = self._suppliers.find_by_name(name.strip())
        if clash is not None and clash.id != supplier_id:
            raise DuplicateSupplierNameError(name.strip())
        clash = self._suppliers.find_by_ruc(ruc)
        if clash is not None and clash.id != supplier_id:
            raise DuplicateSupplierRucError(ruc)

        # Validate both values before touching the entity
        Supplier(id=supplier_id, name=name, ruc=ruc)
        supplier.rename(name)
        supplier.change_ruc(ruc)
        self._suppliers.update(supplier)

        logger.info("update_supplier_complete", supplier_id=supplier_id)
        return supplier
