"""Register Sale Use Case: appends a sale to the active register."""

from bodega.config import get_logger
from bodega.core.entities.cash_register import CashRegister
from bodega.core.entities.sale import Sale
from bodega.core.exceptions import CashRegisterClosedError, NoActiveCashRegisterError
from bodega.core.interfaces.cash_register_repository import ICashRegisterRepository

logger = get_logger(__name__)


class RegisterSaleUseCase:
    """Record a sale in the currently open cash register."""

    def __init__(self, cash_register_repository: ICashRegisterRepository):
        self._registers = cash_register_repository

    def execute(self, sale: Sale) -> CashRegister:
        """Execute register sale use case."""
        logger.info(
            "register_sale_started",
            sale_id=sale.id,
            items=len(sale.items),
        )

        register = self._registers.get_active()
        if register is None:
            raise NoActiveCashRegisterError()
        if register.closed:
            raise CashRegisterClosedError()

        register.register_sale(sale)
        self._registers.save(register)

        logger.info(
            "register_sale_complete",
            sale_id=sale.id,
            register_id=register.id,
            sale_total=sale.total,
            register_total=register.total,
        )
        return register
