from datetime import date
from typing import List

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import InvalidInputError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto.report_dto import MovieShowAtCinema


class ListMovieShowsAtCinemaUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @Logger.io
    async def execute(
        self, *, movie_title: str, cinema_name: str, start_date: date, end_date: date
    ) -> List[MovieShowAtCinema]:
        """Shows of a movie at a cinema between two dates, both inclusive"""
        if not movie_title or not movie_title.strip():
            raise InvalidInputError('Movie title is required')
        if not cinema_name or not cinema_name.strip():
            raise InvalidInputError('Cinema name is required')
        if start_date > end_date:
            raise InvalidInputError('Start date must not be after end date')

        async with self.uow:
            return await self.uow.report_query_repo.list_movie_shows_at_cinema(
                movie_title=movie_title.strip(),
                cinema_name=cinema_name.strip(),
                start_date=start_date,
                end_date=end_date,
            )
