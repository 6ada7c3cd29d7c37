from datetime import date, time
from typing import List

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto.report_dto import ShowStartingAt


class ListShowsStartingAtUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @Logger.io
    async def execute(self, *, show_date: date, start_time: time) -> List[ShowStartingAt]:
        """Shows that begin exactly at the given date and time"""
        async with self.uow:
            return await self.uow.report_query_repo.list_shows_starting_at(
                show_date=show_date, start_time=start_time
            )
