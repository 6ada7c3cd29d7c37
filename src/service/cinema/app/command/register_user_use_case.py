from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_password_hasher import IPasswordHasher
from src.service.cinema.domain.entity.user_entity import UserEntity


class RegisterUserUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork, password_hasher: IPasswordHasher) -> None:
        self.uow = uow
        self.password_hasher = password_hasher

    @Logger.io
    async def execute(self, *, email: str, name: str, password: str, phone: str = '') -> UserEntity:
        user = UserEntity.create(email=email, name=name, phone=phone)
        user.set_password(password, self.password_hasher)

        async with self.uow:
            if await self.uow.user_repo.get_by_email(email=user.email):
                raise ConflictError(f'User {user.email} already exists')

            created_user = await self.uow.user_repo.create(user=user)
            await self.uow.commit()

        Logger.base.info(f'👤 [REGISTER] User {created_user.email} registered')
        return created_user
