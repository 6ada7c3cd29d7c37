from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ConflictError, InvalidInputError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.domain.entity.theater_entity import Cinema


class AddCinemaUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @Logger.io
    async def execute(self, *, name: str) -> Cinema:
        if not name or not name.strip():
            raise InvalidInputError('Cinema name is required')
        name = name.strip()

        async with self.uow:
            if await self.uow.catalog_query_repo.get_cinema_by_name(name=name):
                raise ConflictError(f'Cinema {name!r} already exists')

            cinema = await self.uow.catalog_command_repo.create_cinema(cinema=Cinema(name=name))
            await self.uow.commit()

        Logger.base.info(f'🏢 [ADD-CINEMA] Cinema {cinema.id} {cinema.name!r} added')
        return cinema
