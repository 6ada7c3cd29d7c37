from typing import List

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import InvalidInputError
from src.platform.logging.loguru_io import Logger


class ListMovieTitlesUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @Logger.io
    async def execute(self, *, title_filter: str, released_after_year: int) -> List[str]:
        """
        Titles containing ``title_filter`` (case-insensitive) released after the given year

        A movie released on January 1st of ``released_after_year + 1`` is included.
        """
        if not title_filter or not title_filter.strip():
            raise InvalidInputError('Title filter is required')
        if not 1 <= released_after_year < 9999:
            raise InvalidInputError(f'Invalid year: {released_after_year}')

        async with self.uow:
            return await self.uow.report_query_repo.list_movie_titles(
                title_filter=title_filter.strip(), released_after_year=released_after_year
            )
