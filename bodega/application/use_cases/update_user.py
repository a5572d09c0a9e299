"""Update User Use Case: username and optional password change."""

from bodega.config import get_logger
from bodega.core.entities.user import User
from bodega.core.exceptions import (
    CurrentPasswordRequiredError,
    InvalidPasswordError,
    NoUserRegisteredError,
)
from bodega.core.interfaces.user_repository import IUserRepository

logger = get_logger(__name__)


class UpdateUserUseCase:
    """
    Update the system user.

    The username is always replaced. The password changes only when a new
    one is given, and then only after the current one checks out. Nothing is
    persisted unless every check passes.
    """

    def __init__(self, user_repository: IUserRepository):
        self._users = user_repository

    def execute(
        self,
        new_username: str,
        current_password: str | None = None,
        new_password: str | None = None,
    ) -> User:
        """Execute update user use case."""
        logger.info(
            "update_user_started",
            password_change=bool(new_password and new_password.strip()),
        )

        user = self._users.get()
        if user is None:
            raise NoUserRegisteredError()

        user.change_username(new_username)

        if new_password is not None and new_password.strip():
            if current_password is None or not current_password.strip():
                raise CurrentPasswordRequiredError()
            if not user.verify_password(current_password):
                logger.warning("update_user_rejected", reason="invalid_current_password")
                raise InvalidPasswordError()
            user.change_password(new_password)

        self._users.update(user)

        logger.info("update_user_complete", username=user.username)
        return user
