from src.service.cinema.app.dto.catalog_dto import MovieShowing, TheaterLayout
from src.service.cinema.app.dto.report_dto import (
    MovieShowAtCinema,
    ShowStartingAt,
    TheaterPlayingShow,
    UserBookingDetail,
    UserWithPendingBooking,
)

__all__ = [
    'MovieShowAtCinema',
    'MovieShowing',
    'ShowStartingAt',
    'TheaterLayout',
    'TheaterPlayingShow',
    'UserBookingDetail',
    'UserWithPendingBooking',
]
