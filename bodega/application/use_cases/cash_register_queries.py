"""Read-only cash register use cases."""

from datetime import date

from bodega.core.entities.cash_register import CashRegister
from bodega.core.exceptions import CashRegisterNotFoundError
from bodega.core.interfaces.cash_register_repository import ICashRegisterRepository


class ShowActiveCashRegisterUseCase:
    """Return the open register, or None."""

    def __init__(self, cash_register_repository: ICashRegisterRepository):
        self._registers = cash_register_repository

    def execute(self) -> CashRegister | None:
        return self._registers.get_active()


class ListClosedCashRegistersUseCase:
    """Return the history of closed registers."""

    def __init__(self, cash_register_repository: ICashRegisterRepository):
        self._registers = cash_register_repository

    def execute(self) -> list[CashRegister]:
        return self._registers.list_closed()


class FindCashRegisterByDateUseCase:
    """Return the register opened on a given day, or None."""

    def __init__(self, cash_register_repository: ICashRegisterRepository):
        self._registers = cash_register_repository

    def execute(self, day: date) -> CashRegister | None:
        return self._registers.find_by_date(day)


class GetCashRegisterUseCase:
    """Return a register by ID."""

    def __init__(self, cash_register_repository: ICashRegisterRepository):
        self._registers = cash_register_repository

    def execute(self, register_id: int) -> CashRegister:
        register = self._registers.find_by_id(register_id)
        if register is None:
            raise CashRegisterNotFoundError(register_id)
        return register
