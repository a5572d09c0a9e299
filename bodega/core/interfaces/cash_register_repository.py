"""Abstract interface for cash register storage."""

from abc import ABC, abstractmethod
from datetime import date

from bodega.core.entities.cash_register import CashRegister


class ICashRegisterRepository(ABC):
    """Interface for cash register persistence."""

    @abstractmethod
    def save(self, register: CashRegister) -> None:
        """Insert or replace a register, including its sales."""
        pass

    @abstractmethod
    def get_active(self) -> CashRegister | None:
        """Get the register that is not closed, if any."""
        pass

    @abstractmethod
    def close(self, register: CashRegister) -> None:
        """Persist a register that has just been closed."""
        pass

    @abstractmethod
    def list_closed(self) -> list[CashRegister]:
        """List closed registers (history)."""
        pass

    @abstractmethod
    def find_by_id(self, register_id: int) -> CashRegister | None:
        """Get register by ID."""
        pass

    @abstractmethod
    def find_by_date(self, day: date) -> CashRegister | None:
        """Get the register opened on the given day."""
        pass
