"""Abstract interface for supplier storage."""

from abc import ABC, abstractmethod

from bodega.core.entities.supplier import Supplier


class ISupplierRepository(ABC):
    """Interface for supplier persistence."""

    @abstractmethod
    def save(self, supplier: Supplier) -> None:
        """Store a new supplier."""
        pass

    @abstractmethod
    def update(self, supplier: Supplier) -> None:
        """Replace the stored copy of a supplier."""
        pass

    @abstractmethod
    def delete(self, supplier_id: int) -> None:
        """Physically remove a supplier."""
        pass

    @abstractmethod
    def list_all(self) -> list[Supplier]:
        """List all suppliers."""
        pass

    @abstractmethod
    def find_by_id(self, supplier_id: int) -> Supplier | None:
        """Get supplier by ID."""
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> Supplier | None:
        """Get supplier by exact name."""
        pass

    @abstractmethod
    def find_by_ruc(self, ruc: int) -> Supplier | None:
        """Get supplier by RUC."""
        pass

    @abstractmethod
    def has_products(self, supplier_id: int) -> bool:
        """Whether any product is linked to the supplier."""
        pass
