from datetime import date, time

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto.catalog_dto import MovieShowing
from src.service.cinema.domain.entity.movie_entity import Movie, Show


class AddMovieShowingUseCase:
    """
    Add a movie and schedule one show of it in a theater

    Movie, Show and Play are written in one transaction.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @Logger.io
    async def execute(
        self,
        *,
        title: str,
        release_date: date,
        duration: int,
        language: str,
        genre: str,
        show_date: date,
        start_time: time,
        end_time: time,
        theater_id: int,
        country: str = '',
        description: str = '',
    ) -> MovieShowing:
        movie = Movie.create(
            title=title,
            release_date=release_date,
            duration=duration,
            language=language,
            genre=genre,
            country=country,
            description=description,
        )
        # Validate the show times before anything is written
        Show.create(movie_id=0, show_date=show_date, start_time=start_time, end_time=end_time)

        async with self.uow:
            if not await self.uow.catalog_query_repo.get_theater(theater_id=theater_id):
                raise NotFoundError(f'Theater {theater_id} not found')

            movie = await self.uow.catalog_command_repo.create_movie(movie=movie)
            show = await self.uow.catalog_command_repo.create_show(
                show=Show.create(
                    movie_id=movie.id,
                    show_date=show_date,
                    start_time=start_time,
                    end_time=end_time,
                )
            )
            await self.uow.catalog_command_repo.create_play(show_id=show.id, theater_id=theater_id)
            await self.uow.commit()

        Logger.base.info(
            f'🎞️ [ADD-SHOWING] {movie.title!r} show {show.id} on {show_date} {start_time} '
            f'in theater {theater_id}'
        )
        return MovieShowing(movie=movie, show=show, theater_id=theater_id)
