from typing import List, Sequence

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_catalog_command_repo import ICatalogCommandRepo
from src.service.cinema.domain.entity.cinema_seat_entity import CinemaSeat
from src.service.cinema.domain.entity.movie_entity import Movie, Show
from src.service.cinema.domain.entity.theater_entity import Cinema, Theater
from src.service.cinema.driven_adapter.model.movie_model import MovieModel, PlayModel, ShowModel
from src.service.cinema.driven_adapter.model.theater_model import (
    CinemaModel,
    CinemaSeatModel,
    TheaterModel,
)


class CatalogCommandRepoImpl(ICatalogCommandRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def create_cinema(self, *, cinema: Cinema) -> Cinema:
        db_cinema = CinemaModel(name=cinema.name)
        self.session.add(db_cinema)
        await self.session.flush()
        return Cinema(id=db_cinema.id, name=db_cinema.name)

    @Logger.io
    async def create_theater(self, *, theater: Theater) -> Theater:
        db_theater = TheaterModel(cinema_id=theater.cinema_id, name=theater.name)
        self.session.add(db_theater)
        await self.session.flush()
        return Theater(id=db_theater.id, cinema_id=db_theater.cinema_id, name=db_theater.name)

    @Logger.io
    async def create_cinema_seats(self, *, seats: Sequence[CinemaSeat]) -> List[CinemaSeat]:
        db_seats = [
            CinemaSeatModel(
                theater_id=seat.theater_id,
                seat_number=seat.seat_number,
                seat_class=seat.seat_class,
            )
            for seat in seats
        ]
        self.session.add_all(db_seats)
        await self.session.flush()
        return [
            CinemaSeat(
                id=db_seat.id,
                theater_id=db_seat.theater_id,
                seat_number=db_seat.seat_number,
                seat_class=db_seat.seat_class,
            )
            for db_seat in db_seats
        ]

    @Logger.io
    async def create_movie(self, *, movie: Movie) -> Movie:
        db_movie = MovieModel(
            title=movie.title,
            release_date=movie.release_date,
            country=movie.country,
            description=movie.description,
            duration=movie.duration,
            language=movie.language,
            genre=movie.genre,
        )
        self.session.add(db_movie)
        await self.session.flush()
        movie.id = db_movie.id
        return movie

    @Logger.io
    async def create_show(self, *, show: Show) -> Show:
        db_show = ShowModel(
            movie_id=show.movie_id,
            show_date=show.show_date,
            start_time=show.start_time,
            end_time=show.end_time,
        )
        self.session.add(db_show)
        await self.session.flush()
        show.id = db_show.id
        return show

    @Logger.io
    async def create_play(self, *, show_id: int, theater_id: int) -> None:
        self.session.add(PlayModel(show_id=show_id, theater_id=theater_id))
        await self.session.flush()

    @Logger.io
    async def delete_plays_by_show_ids(self, *, show_ids: Sequence[int]) -> int:
        if not show_ids:
            return 0
        result = await self.session.execute(
            delete(PlayModel).where(PlayModel.show_id.in_(show_ids))
        )
        return result.rowcount  # type: ignore[attr-defined]

    @Logger.io
    async def delete_shows_by_ids(self, *, show_ids: Sequence[int]) -> int:
        if not show_ids:
            return 0
        result = await self.session.execute(delete(ShowModel).where(ShowModel.id.in_(show_ids)))
        return result.rowcount  # type: ignore[attr-defined]
