from abc import ABC, abstractmethod
from datetime import date, time
from typing import List

from src.service.cinema.app.dto.report_dto import (
    MovieShowAtCinema,
    ShowStartingAt,
    TheaterPlayingShow,
    UserBookingDetail,
    UserWithPendingBooking,
)


class IReportQueryRepo(ABC):
    """Read-only projections over catalog and booking data."""

    @abstractmethod
    async def list_theaters_playing_show(
        self, *, cinema_id: int, show_id: int
    ) -> List[TheaterPlayingShow]:
        pass

    @abstractmethod
    async def list_shows_starting_at(
        self, *, show_date: date, start_time: time
    ) -> List[ShowStartingAt]:
        pass

    @abstractmethod
    async def list_movie_titles(self, *, title_filter: str, released_after_year: int) -> List[str]:
        pass

    @abstractmethod
    async def list_users_with_pending_booking(self) -> List[UserWithPendingBooking]:
        pass

    @abstractmethod
    async def list_movie_shows_at_cinema(
        self, *, movie_title: str, cinema_name: str, start_date: date, end_date: date
    ) -> List[MovieShowAtCinema]:
        pass

    @abstractmethod
    async def list_user_booking_details(self, *, user_email: str) -> List[UserBookingDetail]:
        pass
