"""Abstract repository interface (port) for User persistence."""

from abc import ABC, abstractmethod

from blog.domain.entities import User


class UserRepository(ABC):

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """Case-insensitive lookup by email address."""
        ...

    @abstractmethod
    async def get_all(self) -> list[User]:
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        ...
