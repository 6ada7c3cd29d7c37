from datetime import date
from typing import List

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from src.service.cinema.domain.entity.cinema_seat_entity import CinemaSeat
from src.service.cinema.domain.entity.movie_entity import Show
from src.service.cinema.domain.entity.theater_entity import Cinema, Theater
from src.service.cinema.driven_adapter.model.movie_model import PlayModel, ShowModel
from src.service.cinema.driven_adapter.model.theater_model import (
    CinemaModel,
    CinemaSeatModel,
    TheaterModel,
)


class CatalogQueryRepoImpl(ICatalogQueryRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _seat_to_entity(db_seat: CinemaSeatModel) -> CinemaSeat:
        return CinemaSeat(
            id=db_seat.id,
            theater_id=db_seat.theater_id,
            seat_number=db_seat.seat_number,
            seat_class=db_seat.seat_class,
        )

    @staticmethod
    def _theater_to_entity(db_theater: TheaterModel) -> Theater:
        return Theater(id=db_theater.id, cinema_id=db_theater.cinema_id, name=db_theater.name)

    @staticmethod
    def show_by_id_stmt(show_id: int, *, for_share: bool = False) -> Select:
        stmt = (
            select(ShowModel)
            .where(ShowModel.id == show_id)
            .execution_options(populate_existing=True)
        )
        if for_share:
            # Blocks removal of the show until this transaction ends
            stmt = stmt.with_for_update(read=True)
        return stmt

    @staticmethod
    def show_ids_on_date_at_cinema_stmt(show_date: date, cinema_name: str) -> Select:
        return (
            select(ShowModel.id)
            .join(PlayModel, PlayModel.show_id == ShowModel.id)
            .join(TheaterModel, TheaterModel.id == PlayModel.theater_id)
            .join(CinemaModel, CinemaModel.id == TheaterModel.cinema_id)
            .where(ShowModel.show_date == show_date, CinemaModel.name == cinema_name)
            .order_by(ShowModel.id)
            .with_for_update(of=ShowModel)
        )

    @Logger.io
    async def get_show(self, *, show_id: int, for_share: bool = False) -> Show | None:
        result = await self.session.execute(self.show_by_id_stmt(show_id, for_share=for_share))
        db_show = result.scalar_one_or_none()
        if not db_show:
            return None
        return Show(
            id=db_show.id,
            movie_id=db_show.movie_id,
            show_date=db_show.show_date,
            start_time=db_show.start_time,
            end_time=db_show.end_time,
        )

    @Logger.io
    async def get_theater(self, *, theater_id: int) -> Theater | None:
        db_theater = await self.session.get(TheaterModel, theater_id)
        return self._theater_to_entity(db_theater) if db_theater else None

    @Logger.io
    async def get_theater_for_show(self, *, show_id: int) -> Theater | None:
        result = await self.session.execute(
            select(TheaterModel)
            .join(PlayModel, PlayModel.theater_id == TheaterModel.id)
            .where(PlayModel.show_id == show_id)
        )
        db_theater = result.scalar_one_or_none()
        return self._theater_to_entity(db_theater) if db_theater else None

    @Logger.io
    async def get_cinema(self, *, cinema_id: int) -> Cinema | None:
        db_cinema = await self.session.get(CinemaModel, cinema_id)
        return Cinema(id=db_cinema.id, name=db_cinema.name) if db_cinema else None

    @Logger.io
    async def get_cinema_by_name(self, *, name: str) -> Cinema | None:
        result = await self.session.execute(select(CinemaModel).where(CinemaModel.name == name))
        db_cinema = result.scalar_one_or_none()
        return Cinema(id=db_cinema.id, name=db_cinema.name) if db_cinema else None

    @Logger.io
    async def get_cinema_seat(self, *, cinema_seat_id: int) -> CinemaSeat | None:
        db_seat = await self.session.get(CinemaSeatModel, cinema_seat_id)
        return self._seat_to_entity(db_seat) if db_seat else None

    @Logger.io
    async def list_theater_seats(self, *, theater_id: int) -> List[CinemaSeat]:
        result = await self.session.execute(
            select(CinemaSeatModel)
            .where(CinemaSeatModel.theater_id == theater_id)
            .order_by(CinemaSeatModel.id)
        )
        return [self._seat_to_entity(row) for row in result.scalars()]

    @Logger.io
    async def list_show_ids_on_date_at_cinema(
        self, *, show_date: date, cinema_name: str
    ) -> List[int]:
        result = await self.session.execute(
            self.show_ids_on_date_at_cinema_stmt(show_date, cinema_name)
        )
        return list(result.scalars())
