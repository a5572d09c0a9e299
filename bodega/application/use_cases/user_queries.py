"""Read-only user use cases."""

from bodega.core.entities.user import User
from bodega.core.interfaces.user_repository import IUserRepository


class CheckUserExistsUseCase:
    """Whether the system user has been created. No side effects."""

    def __init__(self, user_repository: IUserRepository):
        self._users = user_repository

    def execute(self) -> bool:
        return self._users.exists()


class ShowUserUseCase:
    def __init__(self, user_repository: IUserRepository):
        self._users = user_repository

    def execute(self) -> User | None:
        return self._users.get()
