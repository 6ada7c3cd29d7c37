from abc import ABC, abstractmethod

from src.service.cinema.domain.entity.user_entity import UserEntity


class IUserRepo(ABC):
    @abstractmethod
    async def get_by_email(self, *, email: str) -> UserEntity | None:
        pass

    @abstractmethod
    async def create(self, *, user: UserEntity) -> UserEntity:
        """
        Persist a new user

        Raises:
            ConflictError: When the email is already registered
        """
        pass
