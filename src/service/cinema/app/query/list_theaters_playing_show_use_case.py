from typing import List

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto.report_dto import TheaterPlayingShow


class ListTheatersPlayingShowUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @Logger.io
    async def execute(self, *, cinema_id: int, show_id: int) -> List[TheaterPlayingShow]:
        async with self.uow:
            return await self.uow.report_query_repo.list_theaters_playing_show(
                cinema_id=cinema_id, show_id=show_id
            )
