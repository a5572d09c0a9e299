"""Abstract interface for sale storage."""

from abc import ABC, abstractmethod
from datetime import date

from bodega.core.entities.sale import Sale


class ISaleRepository(ABC):
    """Interface for sale persistence."""

    @abstractmethod
    def add(self, sale: Sale) -> None:
        """Store a sale with its items."""
        pass

    @abstractmethod
    def delete(self, sale_id: int) -> None:
        """Remove a sale."""
        pass

    @abstractmethod
    def list_all(self) -> list[Sale]:
        """List all sales."""
        pass

    @abstractmethod
    def find_by_id(self, sale_id: int) -> Sale | None:
        """Get sale by ID."""
        pass

    @abstractmethod
    def find_by_date(self, day: date) -> list[Sale]:
        """List sales made on the given day."""
        pass

    @abstractmethod
    def is_product_referenced(self, product_id: int) -> bool:
        """Whether any recorded sale includes the product."""
        pass
