from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_user_repo import IUserRepo
from src.service.cinema.domain.entity.user_entity import UserEntity
from src.service.cinema.driven_adapter.model.user_model import UserModel


class UserRepoImpl(IUserRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_user: UserModel) -> UserEntity:
        return UserEntity(
            email=db_user.email,
            name=db_user.name,
            phone=db_user.phone,
            hashed_password=db_user.hashed_password,
            created_at=db_user.created_at,
        )

    @Logger.io
    async def get_by_email(self, *, email: str) -> UserEntity | None:
        result = await self.session.execute(select(UserModel).where(UserModel.email == email))
        db_user = result.scalar_one_or_none()
        return self._to_entity(db_user) if db_user else None

    @Logger.io
    async def create(self, *, user: UserEntity) -> UserEntity:
        db_user = UserModel(
            email=user.email,
            name=user.name,
            phone=user.phone,
            hashed_password=user.hashed_password,
            created_at=user.created_at,
        )
        try:
            async with self.session.begin_nested():
                self.session.add(db_user)
                await self.session.flush()
        except IntegrityError as e:
            raise ConflictError(f'User {user.email} already exists') from e
        return self._to_entity(db_user)
