"""Open Cash Register Use Case: starts a new till session."""

from bodega.config import get_logger
from bodega.core.entities.cash_register import CashRegister
from bodega.core.exceptions import ActiveCashRegisterExistsError
from bodega.core.interfaces.cash_register_repository import ICashRegisterRepository

logger = get_logger(__name__)


class OpenCashRegisterUseCase:
    """Open a cash register, provided none is active."""

    def __init__(self, cash_register_repository: ICashRegisterRepository):
        self._registers = cash_register_repository

    def execute(self, register_id: int | None = None) -> CashRegister:
        """Execute open cash register use case."""
        logger.info("open_cash_register_started", register_id=register_id)

        # Read-then-write check; the store should also enforce a single open row
        if self._registers.get_active() is not None:
            raise ActiveCashRegisterExistsError()

        register = CashRegister(id=register_id)
        self._registers.save(register)

        logger.info(
            "open_cash_register_complete",
            register_id=register.id,
            opened_at=register.opened_at.isoformat(),
        )
        return register
