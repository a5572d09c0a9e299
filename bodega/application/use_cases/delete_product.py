"""Delete Product Use Case: soft delete, guarded by sale references."""

from bodega.config import get_logger
from bodega.core.entities.product import Product
from bodega.core.exceptions import ProductInSalesError, ProductNotFoundError
from bodega.core.interfaces.product_repository import IProductRepository
from bodega.core.interfaces.sale_repository import ISaleRepository

logger = get_logger(__name__)


class DeleteProductUseCase:
    """Soft-delete a product that no sale refers to."""

    def __init__(
        self,
        product_repository: IProductRepository,
        sale_repository: ISaleRepository,
    ):
        self._products = product_repository
        self._sales = sale_repository

    def execute(self, product_id: int) -> Product:
        """Execute delete product use case."""
        logger.info("delete_product_started", product_id=product_id)

        product = self._products.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        if self._sales.is_product_referenced(product_id):
            raise ProductInSalesError(product_id)

        product.mark_deleted()
        self._products.soft_delete(product)

        logger.info("delete_product_complete", product_id=product_id)
        return product
