"""Update Product Use Case: edits an active product."""

from bodega.config import get_logger
from bodega.core.entities.product import Product
from bodega.core.exceptions import (
    DuplicateProductError,
    ProductDeletedError,
    ProductNotFoundError,
)
from bodega.core.interfaces.product_repository import IProductRepository

logger = get_logger(__name__)


class UpdateProductUseCase:
    """Update the details of a product that has not been deleted."""

    def __init__(self, product_repository: IProductRepository):
        self._products = product_repository

    def execute(
        self,
        product_id: int,
        name: str,
        purchase_price: int,
        sale_price: int,
        tax: int,
        stock: int,
    ) -> Product:
        """Execute update product use case."""
        logger.info("update_product_started", product_id=product_id)

        # 1. Must exist
        product = self._products.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        # 2. Deleted products are read-only until restored
        if product.is_deleted:
            raise ProductDeletedError(product_id)

        # 3. Name must not belong to another product
        clash = self._products.find_by_name(name.strip())
        if clash is not None and clash.id != product_id:
            raise DuplicateProductError(name.strip())

        # 4. Apply and persist
        product.update_details(
            name=name,
            purchase_price=purchase_price,
            sale_price=sale_price,
            tax=tax,
            stock=stock,
        )
        self._products.update(product)

        logger.info("update_product_complete", product_id=product.id)
        return product
