"""Login Use Case: authenticates the system user."""

from bodega.config import get_logger
from bodega.core.entities.user import User
from bodega.core.exceptions import (
    InvalidPasswordError,
    NoUserRegisteredError,
    UserNotFoundError,
)
from bodega.core.interfaces.user_repository import IUserRepository

logger = get_logger(__name__)


class LoginUseCase:
    """Check credentials and return the authenticated user."""

    def __init__(self, user_repository: IUserRepository):
        self._users = user_repository

    def execute(self, username: str, password: str) -> User:
        """Execute login use case."""
        logger.info("login_started", username=username)

        if self._users.get() is None:
            raise NoUserRegisteredError()

        user = self._users.find_by_name(username)
        if user is None:
            logger.warning("login_failed", username=username, reason="unknown_user")
            raise UserNotFoundError(username)

        if not user.verify_password(password):
            logger.warning("login_failed", username=username, reason="invalid_password")
            raise InvalidPasswordError()

        logger.info("login_complete", username=user.username)
        return user
