"""Delete Sale Use Case."""

from bodega.config import get_logger
from bodega.core.exceptions import SaleNotFoundError
from bodega.core.interfaces.sale_repository import ISaleRepository

logger = get_logger(__name__)


class DeleteSaleUseCase:
    """Remove a recorded sale."""

    def __init__(self, sale_repository: ISaleRepository):
        self._sales = sale_repository

    def execute(self, sale_id: int) -> None:
        """Execute delete sale use case."""
        logger.info("delete_sale_started", sale_id=sale_id)

        if self._sales.find_by_id(sale_id) is None:
            raise SaleNotFoundError(sale_id)
        self._sales.delete(sale_id)

        logger.info("delete_sale_complete", sale_id=sale_id)
