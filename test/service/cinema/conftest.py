"""
Cinema fixtures

Seeded layout used across integration tests:
- Cinema "Downtown" with theater "T" (seats 1, 2 Standard and 3 Premium)
  and theater "T2" (seat 1 Standard)
- Movie "Dune" with show X on 2024-05-01 19:00-21:30 playing in T
- Users ann@example.com and bob@example.com
"""

from collections.abc import Callable
from datetime import date, time
from typing import Dict, NamedTuple

import pytest

from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.cinema.app.command.add_cinema_use_case import AddCinemaUseCase
from src.service.cinema.app.command.add_movie_showing_use_case import AddMovieShowingUseCase
from src.service.cinema.app.command.add_theater_use_case import AddTheaterUseCase
from src.service.cinema.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.cinema.app.command.register_user_use_case import RegisterUserUseCase
from src.service.cinema.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


SEAT_PRICES = {'Standard': 1000, 'Premium': 1500, 'VIP': 2500}

ANN_EMAIL = 'ann@example.com'
BOB_EMAIL = 'bob@example.com'
DEFAULT_PASSWORD = 'P@ssw0rd'

CINEMA_NAME = 'Downtown'
SHOW_DATE = date(2024, 5, 1)
SHOW_START = time(19, 0)
SHOW_END = time(21, 30)


class SeededCinema(NamedTuple):
    cinema_id: int
    theater_id: int
    other_theater_id: int
    show_id: int
    seat_ids: Dict[int, int]  # seat number in T -> cinema_seat id
    other_theater_seat_id: int


@pytest.fixture
def create_booking_use_case(
    uow_factory: Callable[[], SqlAlchemyUnitOfWork],
) -> Callable[..., CreateBookingUseCase]:
    def _build(default_status: str = 'paid') -> CreateBookingUseCase:
        return CreateBookingUseCase(
            uow=uow_factory(), seat_prices=SEAT_PRICES, default_status=default_status
        )

    return _build


@pytest.fixture
async def seeded_cinema(uow_factory: Callable[[], SqlAlchemyUnitOfWork]) -> SeededCinema:
    register_user = RegisterUserUseCase(uow=uow_factory(), password_hasher=BcryptPasswordHasher())
    await register_user.execute(email=ANN_EMAIL, name='Ann', password=DEFAULT_PASSWORD, phone='111')
    await register_user.execute(email=BOB_EMAIL, name='Bob', password=DEFAULT_PASSWORD, phone='222')

    cinema = await AddCinemaUseCase(uow=uow_factory()).execute(name=CINEMA_NAME)
    add_theater = AddTheaterUseCase(uow=uow_factory(), seat_prices=SEAT_PRICES)
    theater = await add_theater.execute(
        cinema_id=cinema.id,
        name='T',
        seats=[(1, 'Standard'), (2, 'Standard'), (3, 'Premium')],
    )
    other_theater = await add_theater.execute(
        cinema_id=cinema.id, name='T2', seats=[(1, 'Standard')]
    )

    showing = await AddMovieShowingUseCase(uow=uow_factory()).execute(
        title='Dune',
        release_date=date(2021, 10, 22),
        duration=155 * 60,
        language='en',
        genre='Sci-Fi',
        show_date=SHOW_DATE,
        start_time=SHOW_START,
        end_time=SHOW_END,
        theater_id=theater.theater.id,
    )

    return SeededCinema(
        cinema_id=cinema.id,
        theater_id=theater.theater.id,
        other_theater_id=other_theater.theater.id,
        show_id=showing.show.id,
        seat_ids={seat.seat_number: seat.id for seat in theater.seats},
        other_theater_seat_id=other_theater.seats[0].id,
    )
