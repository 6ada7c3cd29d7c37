"""Read-only projections returned by the reporting queries."""

from datetime import date, time

import attrs

from src.service.cinema.domain.enum.booking_status import BookingStatus


@attrs.define(frozen=True)
class TheaterPlayingShow:
    theater_id: int
    theater_name: str
    cinema_name: str


@attrs.define(frozen=True)
class ShowStartingAt:
    show_id: int
    movie_title: str
    show_date: date
    start_time: time
    end_time: time
    theater_name: str


@attrs.define(frozen=True)
class UserWithPendingBooking:
    email: str
    name: str
    phone: str


@attrs.define(frozen=True)
class MovieShowAtCinema:
    show_id: int
    title: str
    duration: int
    show_date: date
    start_time: time
    theater_name: str


@attrs.define(frozen=True)
class UserBookingDetail:
    booking_id: int
    status: BookingStatus
    movie_title: str
    show_date: date
    start_time: time
    theater_name: str
    seat_number: int
