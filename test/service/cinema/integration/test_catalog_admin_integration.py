"""
Integration tests for users, cinemas, theaters and movie showings
"""

from datetime import date, time

from pydantic import SecretStr
import pytest

from src.platform.exception.exceptions import ConflictError, InvalidInputError, NotFoundError
from src.service.cinema.app.command.add_cinema_use_case import AddCinemaUseCase
from src.service.cinema.app.command.add_movie_showing_use_case import AddMovieShowingUseCase
from src.service.cinema.app.command.add_theater_use_case import AddTheaterUseCase
from src.service.cinema.app.command.register_user_use_case import RegisterUserUseCase
from src.service.cinema.app.query.list_movie_titles_use_case import ListMovieTitlesUseCase
from src.service.cinema.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


SHOWING = {
    'title': 'Arrival',
    'release_date': date(2016, 11, 11),
    'duration': 116 * 60,
    'language': 'en',
    'genre': 'Sci-Fi',
    'show_date': date(2024, 6, 1),
    'start_time': time(18, 0),
    'end_time': time(20, 0),
}


class TestRegisterUser:
    async def test_password_is_stored_hashed(self, uow_factory):
        hasher = BcryptPasswordHasher()

        user = await RegisterUserUseCase(uow=uow_factory(), password_hasher=hasher).execute(
            email=' Carol@Example.com ', name='Carol', password='s3cret!'
        )

        assert user.email == 'carol@example.com'
        async with uow_factory() as uow:
            stored = await uow.user_repo.get_by_email(email='carol@example.com')
        assert stored.hashed_password != 's3cret!'
        assert hasher.verify_password(
            plain_password=SecretStr('s3cret!'), hashed_password=stored.hashed_password
        )

    async def test_duplicate_email_conflicts(self, uow_factory):
        use_case = RegisterUserUseCase(uow=uow_factory(), password_hasher=BcryptPasswordHasher())
        await use_case.execute(email='carol@example.com', name='Carol', password='s3cret!')

        with pytest.raises(ConflictError):
            await use_case.execute(email='CAROL@example.com', name='Carol 2', password='other')

    @pytest.mark.parametrize(
        'email, name',
        [
            pytest.param('not-an-email', 'Carol', id='malformed_email'),
            pytest.param('carol@example.com', '   ', id='empty_name'),
        ],
    )
    async def test_invalid_input(self, uow_factory, email, name):
        with pytest.raises(InvalidInputError):
            await RegisterUserUseCase(
                uow=uow_factory(), password_hasher=BcryptPasswordHasher()
            ).execute(email=email, name=name, password='s3cret!')


class TestCinemaLayout:
    async def test_duplicate_cinema_conflicts(self, seeded_cinema, uow_factory):
        with pytest.raises(ConflictError):
            await AddCinemaUseCase(uow=uow_factory()).execute(name='Downtown')

    async def test_theater_seats_are_created(self, seeded_cinema, uow_factory):
        layout = await AddTheaterUseCase(
            uow=uow_factory(), seat_prices={'Standard': 1000, 'VIP': 2500}
        ).execute(
            cinema_id=seeded_cinema.cinema_id,
            name='IMAX',
            seats=[(1, 'VIP'), (2, 'Standard')],
        )

        async with uow_factory() as uow:
            seats = await uow.catalog_query_repo.list_theater_seats(theater_id=layout.theater.id)
        assert [(s.seat_number, s.seat_class) for s in seats] == [(1, 'VIP'), (2, 'Standard')]

    @pytest.mark.parametrize(
        'seats',
        [
            pytest.param([], id='no_seats'),
            pytest.param([(1, 'Standard'), (1, 'Standard')], id='duplicate_seat_number'),
            pytest.param([(0, 'Standard')], id='non_positive_seat_number'),
            pytest.param([(1, 'Balcony')], id='unpriced_seat_class'),
            pytest.param([(1, 'Standard', 'extra')], id='seat_not_a_pair'),
            pytest.param([1, 2], id='bare_seat_numbers'),
            pytest.param([('1', 'Standard')], id='seat_number_not_an_integer'),
            pytest.param([(1, None)], id='seat_class_not_a_string'),
        ],
    )
    async def test_invalid_seats(self, seeded_cinema, uow_factory, seats):
        with pytest.raises(InvalidInputError):
            await AddTheaterUseCase(uow=uow_factory(), seat_prices={'Standard': 1000}).execute(
                cinema_id=seeded_cinema.cinema_id, name='Broken', seats=seats
            )

    async def test_unknown_cinema_is_not_found(self, uow_factory):
        with pytest.raises(NotFoundError):
            await AddTheaterUseCase(uow=uow_factory(), seat_prices={'Standard': 1000}).execute(
                cinema_id=999, name='Ghost', seats=[(1, 'Standard')]
            )


class TestAddMovieShowing:
    async def test_movie_show_and_play_are_created(self, seeded_cinema, uow_factory):
        showing = await AddMovieShowingUseCase(uow=uow_factory()).execute(
            **SHOWING, theater_id=seeded_cinema.theater_id
        )

        async with uow_factory() as uow:
            theater = await uow.catalog_query_repo.get_theater_for_show(show_id=showing.show.id)
        assert theater.id == seeded_cinema.theater_id
        assert showing.movie.title == 'Arrival'

    async def test_unknown_theater_writes_nothing(self, uow_factory):
        with pytest.raises(NotFoundError):
            await AddMovieShowingUseCase(uow=uow_factory()).execute(**SHOWING, theater_id=999)

        titles = await ListMovieTitlesUseCase(uow_factory()).execute(
            title_filter='Arrival', released_after_year=1900
        )
        assert titles == []

    async def test_end_not_after_start_is_invalid(self, seeded_cinema, uow_factory):
        with pytest.raises(InvalidInputError):
            await AddMovieShowingUseCase(uow=uow_factory()).execute(
                **{**SHOWING, 'end_time': SHOWING['start_time']},
                theater_id=seeded_cinema.theater_id,
            )
