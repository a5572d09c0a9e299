"""Create User Use Case: registers the single system user."""

from bodega.config import get_logger
from bodega.core.entities.user import User
from bodega.core.exceptions import UserAlreadyExistsError
from bodega.core.interfaces.user_repository import IUserRepository

logger = get_logger(__name__)


class CreateUserUseCase:
    """Create the system user. Only one may ever exist."""

    def __init__(self, user_repository: IUserRepository):
        self._users = user_repository

    def execute(self, username: str, password: str) -> User:
        """Execute create user use case."""
        logger.info("create_user_started")

        if self._users.exists():
            raise UserAlreadyExistsError()

        # Applies the username and password policies, then hashes
        user = User.register(username, password)
        self._users.create(user)

        logger.info("create_user_complete", username=user.username)
        return user
