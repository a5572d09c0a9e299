"""Abstract interface for the single-user credential store."""

from abc import ABC, abstractmethod

from bodega.core.entities.user import User


class IUserRepository(ABC):
    """Interface for user persistence. At most one user is ever stored."""

    @abstractmethod
    def create(self, user: User) -> None:
        pass

    @abstractmethod
    def update(self, user: User) -> None:
        pass

    @abstractmethod
    def get(self) -> User | None:
        """Get the registered user, if any."""
        pass

    @abstractmethod
    def find_by_name(self, username: str) -> User | None:
        pass

    @abstractmethod
    def exists(self) -> bool:
        pass
