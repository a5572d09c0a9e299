"""Read-only product use cases."""

from bodega.core.entities.product import Product
from bodega.core.exceptions import ProductNotFoundError
from bodega.core.interfaces.product_repository import IProductRepository


class ListProductsUseCase:
    """List the catalog, optionally hiding soft-deleted products."""

    def __init__(self, product_repository: IProductRepository):
        self._products = product_repository

    def execute(self, include_deleted: bool = True) -> list[Product]:
        products = self._products.list_all() or []
        if include_deleted:
            return products
        return [p for p in products if not p.is_deleted]


class GetProductUseCase:
    """Return a product by ID."""

    def __init__(self, product_repository: IProductRepository):
        self._products = product_repository

    def execute(self, product_id: int) -> Product:
        product = self._products.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
