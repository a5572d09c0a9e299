"""Generate Register Report Use Case: report for one closed till session."""

from bodega.config import get_logger
from bodega.core.exceptions import CashRegisterNotFoundError, CashRegisterOpenError
from bodega.core.interfaces.cash_register_repository import ICashRegisterRepository
from bodega.core.interfaces.report_repository import IReportRepository

logger = get_logger(__name__)


class GenerateRegisterReportUseCase:
    """Generate the report of a closed cash register."""

    def __init__(
        self,
        report_repository: IReportRepository,
        cash_register_repository: ICashRegisterRepository,
    ):
        self._reports = report_repository
        self._registers = cash_register_repository

    def execute(self, register_id: int) -> None:
        """Execute generate register report use case."""
        logger.info("generate_register_report_started", register_id=register_id)

        register = self._registers.find_by_id(register_id)
        if register is None:
            raise CashRegisterNotFoundError(register_id)
        # An open session has no final figures yet
        if register.is_active:
            raise CashRegisterOpenError(register_id)

        self._reports.generate_for_register(register_id)

        logger.info(
            "generate_register_report_complete",
            register_id=register_id,
            sales=register.sale_count,
            total=register.total,
        )
