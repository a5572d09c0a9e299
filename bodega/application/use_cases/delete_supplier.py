"""Delete Supplier Use Case: only for suppliers without products."""

from bodega.config import get_logger
from bodega.core.exceptions import SupplierHasProductsError, SupplierNotFoundError
from bodega.core.interfaces.supplier_repository import ISupplierRepository

logger = get_logger(__name__)


class DeleteSupplierUseCase:
    """Delete a supplier that has no products."""

    def __init__(self, supplier_repository: ISupplierRepository):
        self._suppliers = supplier_repository

    def execute(self, supplier_id: int) -> None:
        """Execute delete supplier use case."""
        logger.info("delete_supplier_started", supplier_id=supplier_id)

        if self._suppliers.find_by_id(supplier_id) is None:
            raise SupplierNotFoundError(supplier_id)
        if self._suppliers.has_products(supplier_id):
            raise SupplierHasProductsError(supplier_id)

        self._suppliers.delete(supplier_id)

        logger.info("delete_supplier_complete", supplier_id=supplier_id)
