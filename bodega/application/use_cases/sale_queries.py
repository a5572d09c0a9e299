"""Read-only sale use cases."""

from datetime import date

from bodega.core.entities.sale import Sale
from bodega.core.exceptions import SaleNotFoundError
from bodega.core.interfaces.sale_repository import ISaleRepository


class ListSalesUseCase:
    def __init__(self, sale_repository: ISaleRepository):
        self._sales = sale_repository

    def execute(self) -> list[Sale]:
        return self._sales.list_all() or []


class FindSalesByDateUseCase:
    """Sales made on a given day."""

    def __init__(self, sale_repository: ISaleRepository):
        self._sales = sale_repository

    def execute(self, day: date) -> list[Sale]:
        return self._sales.find_by_date(day) or []


class GetSaleUseCase:
    """Return a sale by ID."""

    def __init__(self, sale_repository: ISaleRepository):
        self._sales = sale_repository

    def execute(self, sale_id: int) -> Sale:
        sale = self._sales.find_by_id(sale_id)
        if sale is None:
            raise SaleNotFoundError(sale_id)
        return sale
