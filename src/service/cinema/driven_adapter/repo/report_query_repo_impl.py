from datetime import date, time
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto.report_dto import (
    MovieShowAtCinema,
    ShowStartingAt,
    TheaterPlayingShow,
    UserBookingDetail,
    UserWithPendingBooking,
)
from src.service.cinema.app.interface.i_report_query_repo import IReportQueryRepo
from src.service.cinema.domain.enum.booking_status import BookingStatus
from src.service.cinema.driven_adapter.model.booking_model import BookingModel, ShowSeatModel
from src.service.cinema.driven_adapter.model.movie_model import MovieModel, PlayModel, ShowModel
from src.service.cinema.driven_adapter.model.theater_model import (
    CinemaModel,
    CinemaSeatModel,
    TheaterModel,
)
from src.service.cinema.driven_adapter.model.user_model import UserModel


class ReportQueryRepoImpl(IReportQueryRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def list_theaters_playing_show(
        self, *, cinema_id: int, show_id: int
    ) -> List[TheaterPlayingShow]:
        result = await self.session.execute(
            select(TheaterModel.id, TheaterModel.name, CinemaModel.name)
            .join(PlayModel, PlayModel.theater_id == TheaterModel.id)
            .join(CinemaModel, CinemaModel.id == TheaterModel.cinema_id)
            .where(PlayModel.show_id == show_id, TheaterModel.cinema_id == cinema_id)
            .order_by(TheaterModel.id)
        )
        return [
            TheaterPlayingShow(theater_id=row[0], theater_name=row[1], cinema_name=row[2])
            for row in result.all()
        ]

    @Logger.io
    async def list_shows_starting_at(
        self, *, show_date: date, start_time: time
    ) -> List[ShowStartingAt]:
        result = await self.session.execute(
            select(
                ShowModel.id,
                MovieModel.title,
                ShowModel.show_date,
                ShowModel.start_time,
                ShowModel.end_time,
                TheaterModel.name,
            )
            .join(MovieModel, MovieModel.id == ShowModel.movie_id)
            .join(PlayModel, PlayModel.show_id == ShowModel.id)
            .join(TheaterModel, TheaterModel.id == PlayModel.theater_id)
            .where(ShowModel.show_date == show_date, ShowModel.start_time == start_time)
            .order_by(ShowModel.id)
        )
        return [
            ShowStartingAt(
                show_id=row[0],
                movie_title=row[1],
                show_date=row[2],
                start_time=row[3],
                end_time=row[4],
                theater_name=row[5],
            )
            for row in result.all()
        ]

    @Logger.io
    async def list_movie_titles(self, *, title_filter: str, released_after_year: int) -> List[str]:
        result = await self.session.execute(
            select(MovieModel.title)
            .where(
                MovieModel.title.icontains(title_filter, autoescape=True),
                MovieModel.release_date >= date(released_after_year + 1, 1, 1),
            )
            .distinct()
            .order_by(MovieModel.title)
        )
        return list(result.scalars())

    @Logger.io
    async def list_users_with_pending_booking(self) -> List[UserWithPendingBooking]:
        result = await self.session.execute(
            select(UserModel.email, UserModel.name, UserModel.phone)
            .where(
                UserModel.email.in_(
                    select(BookingModel.user_email).where(
                        BookingModel.status == BookingStatus.PENDING.value
                    )
                )
            )
            .order_by(UserModel.email)
        )
        return [
            UserWithPendingBooking(email=email, name=name, phone=phone)
            for email, name, phone in result.all()
        ]

    @Logger.io
    async def list_movie_shows_at_cinema(
        self, *, movie_title: str, cinema_name: str, start_date: date, end_date: date
    ) -> List[MovieShowAtCinema]:
        result = await self.session.execute(
            select(
                ShowModel.id,
                MovieModel.title,
                MovieModel.duration,
                ShowModel.show_date,
                ShowModel.start_time,
                TheaterModel.name,
            )
            .join(MovieModel, MovieModel.id == ShowModel.movie_id)
            .join(PlayModel, PlayModel.show_id == ShowModel.id)
            .join(TheaterModel, TheaterModel.id == PlayModel.theater_id)
            .join(CinemaModel, CinemaModel.id == TheaterModel.cinema_id)
            .where(
                MovieModel.title == movie_title,
                CinemaModel.name == cinema_name,
                ShowModel.show_date.between(start_date, end_date),
            )
            .order_by(ShowModel.show_date, ShowModel.start_time, ShowModel.id)
        )
        return [
            MovieShowAtCinema(
                show_id=row[0],
                title=row[1],
                duration=row[2],
                show_date=row[3],
                start_time=row[4],
                theater_name=row[5],
            )
            for row in result.all()
        ]

    @Logger.io
    async def list_user_booking_details(self, *, user_email: str) -> List[UserBookingDetail]:
        result = await self.session.execute(
            select(
                BookingModel.id,
                BookingModel.status,
                MovieModel.title,
                ShowModel.show_date,
                ShowModel.start_time,
                TheaterModel.name,
                CinemaSeatModel.seat_number,
            )
            .join(ShowSeatModel, ShowSeatModel.booking_id == BookingModel.id)
            .join(CinemaSeatModel, CinemaSeatModel.id == ShowSeatModel.cinema_seat_id)
            .join(ShowModel, ShowModel.id == ShowSeatModel.show_id)
            .join(MovieModel, MovieModel.id == ShowModel.movie_id)
            .join(PlayModel, PlayModel.show_id == ShowModel.id)
            .join(TheaterModel, TheaterModel.id == PlayModel.theater_id)
            .where(BookingModel.user_email == user_email)
            .order_by(BookingModel.id, CinemaSeatModel.seat_number)
        )
        return [
            UserBookingDetail(
                booking_id=row[0],
                status=BookingStatus(row[1]),
                movie_title=row[2],
                show_date=row[3],
                start_time=row[4],
                theater_name=row[5],
                seat_number=row[6],
            )
            for row in result.all()
        ]
