"""Abstract interface for product storage."""

from abc import ABC, abstractmethod

from bodega.core.entities.product import Product


class IProductRepository(ABC):
    """Interface for product persistence."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Store a new product."""
        pass

    @abstractmethod
    def update(self, product: Product) -> None:
        """Replace the stored copy of an existing product."""
        pass

    @abstractmethod
    def find_by_id(self, product_id: int) -> Product | None:
        """Get product by ID, deleted or not."""
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> Product | None:
        """Get product by exact name."""
        pass

    @abstractmethod
    def list_all(self) -> list[Product]:
        """List every product, including soft-deleted ones."""
        pass

    @abstractmethod
    def soft_delete(self, product: Product) -> None:
        """Persist a product that has been marked deleted."""
        pass

    @abstractmethod
    def restore(self, product: Product) -> None:
        """Persist a product that has been restored."""
        pass
