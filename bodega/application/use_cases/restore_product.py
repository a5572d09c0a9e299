"""Restore Product Use Case: undoes a soft delete."""

from bodega.config import get_logger
from bodega.core.entities.product import Product
from bodega.core.exceptions import ProductNotDeletedError, ProductNotFoundError
from bodega.core.interfaces.product_repository import IProductRepository

logger = get_logger(__name__)


class RestoreProductUseCase:
    """Restore a soft-deleted product."""

    def __init__(self, product_repository: IProductRepository):
        self._products = product_repository

    def execute(self, product_id: int) -> Product:
        """Execute restore product use case."""
        logger.info("restore_product_started", product_id=product_id)

        product = self._products.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        if not product.is_deleted:
            raise ProductNotDeletedError(product_id)

        product.restore()
        self._products.restore(product)

        logger.info("restore_product_complete", product_id=product_id)
        return product
