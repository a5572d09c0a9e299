"""Register Product Use Case: adds a product to the catalog."""

from bodega.config import get_logger
from bodega.core.entities.product import Product
from bodega.core.exceptions import DuplicateProductError
from bodega.core.interfaces.product_repository import IProductRepository

logger = get_logger(__name__)


class RegisterProductUseCase:
    """Register a new product with a unique name."""

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
        supplier_id: int | None = None,
    ) -> Product:
        """Execute register product use case."""
        logger.info("register_product_started", product_id=product_id, name=name)

        # 1. Name must be free
        if self._products.find_by_name(name.strip()) is not None:
            raise DuplicateProductError(name.strip())

        # 2. Build (validates every field)
        product = Product(
            id=product_id,
            name=name,
            purchase_price=purchase_price,
            sale_price=sale_price,
            tax=tax,
            stock=stock,
            supplier_id=supplier_id,
        )

        # 3. Persist
        self._products.save(product)

        logger.info(
            "register_product_complete",
            product_id=product.id,
            sale_price=product.sale_price,
            stock=product.stock,
        )
        return product
