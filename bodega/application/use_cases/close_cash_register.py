"""Close Cash Register Use Case: ends the active till session."""

from bodega.config import get_logger
from bodega.core.entities.cash_register import CashRegister
from bodega.core.exceptions import CashRegisterClosedError, NoActiveCashRegisterError
from bodega.core.interfaces.cash_register_repository import ICashRegisterRepository

logger = get_logger(__name__)


class CloseCashRegisterUseCase:
    """Close the active cash register."""

    def __init__(self, cash_register_repository: ICashRegisterRepository):
        self._registers = cash_register_repository

    def execute(self) -> CashRegister:
        """Execute close cash register use case."""
        logger.info("close_cash_register_started")

        register = self._registers.get_active()
        if register is None:
            raise NoActiveCashRegisterError()
        if register.closed:
            raise CashRegisterClosedError()

        register.close()
        self._registers.close(register)

        logger.info(
            "close_cash_register_complete",
            register_id=register.id,
            sales=register.sale_count,
            subtotal=register.subtotal,
            tax=register.tax,
            total=register.total,
        )
        return register
