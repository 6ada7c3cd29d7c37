"""
Integration tests for the read-only report queries
"""

from datetime import date, time

import pytest

from src.platform.exception.exceptions import InvalidInputError
from src.service.cinema.app.dto.report_dto import (
    MovieShowAtCinema,
    ShowStartingAt,
    TheaterPlayingShow,
    UserBookingDetail,
    UserWithPendingBooking,
)
from src.service.cinema.app.query.list_movie_shows_at_cinema_use_case import (
    ListMovieShowsAtCinemaUseCase,
)
from src.service.cinema.app.query.list_movie_titles_use_case import ListMovieTitlesUseCase
from src.service.cinema.app.query.list_shows_starting_at_use_case import (
    ListShowsStartingAtUseCase,
)
from src.service.cinema.app.query.list_theaters_playing_show_use_case import (
    ListTheatersPlayingShowUseCase,
)
from src.service.cinema.app.query.list_user_booking_details_use_case import (
    ListUserBookingDetailsUseCase,
)
from src.service.cinema.app.query.list_users_with_pending_booking_use_case import (
    ListUsersWithPendingBookingUseCase,
)
from src.service.cinema.domain.enum.booking_status import BookingStatus


SHOW_DATE = date(2024, 5, 1)


class TestTheatersAndShows:
    async def test_theaters_playing_show(self, seeded_cinema, uow_factory):
        result = await ListTheatersPlayingShowUseCase(uow_factory()).execute(
            cinema_id=seeded_cinema.cinema_id, show_id=seeded_cinema.show_id
        )

        assert result == [
            TheaterPlayingShow(
                theater_id=seeded_cinema.theater_id, theater_name='T', cinema_name='Downtown'
            )
        ]

    async def test_shows_starting_at(self, seeded_cinema, uow_factory):
        use_case = ListShowsStartingAtUseCase(uow_factory())

        assert await use_case.execute(show_date=SHOW_DATE, start_time=time(19, 0)) == [
            ShowStartingAt(
                show_id=seeded_cinema.show_id,
                movie_title='Dune',
                show_date=SHOW_DATE,
                start_time=time(19, 0),
                end_time=time(21, 30),
                theater_name='T',
            )
        ]
        assert await use_case.execute(show_date=SHOW_DATE, start_time=time(20, 0)) == []

    async def test_movie_shows_at_cinema_within_inclusive_range(
        self, seeded_cinema, uow_factory
    ):
        use_case = ListMovieShowsAtCinemaUseCase(uow_factory())

        result = await use_case.execute(
            movie_title='Dune', cinema_name='Downtown', start_date=SHOW_DATE, end_date=SHOW_DATE
        )

        assert result == [
            MovieShowAtCinema(
                show_id=seeded_cinema.show_id,
                title='Dune',
                duration=155 * 60,
                show_date=SHOW_DATE,
                start_time=time(19, 0),
                theater_name='T',
            )
        ]
        assert (
            await use_case.execute(
                movie_title='Dune',
                cinema_name='Downtown',
                start_date=date(2024, 5, 2),
                end_date=date(2024, 5, 31),
            )
            == []
        )

    async def test_movie_shows_at_cinema_rejects_reversed_range(self, uow_factory):
        with pytest.raises(InvalidInputError):
            await ListMovieShowsAtCinemaUseCase(uow_factory()).execute(
                movie_title='Dune',
                cinema_name='Downtown',
                start_date=date(2024, 5, 2),
                end_date=date(2024, 5, 1),
            )


class TestMovieTitles:
    @pytest.mark.parametrize(
        'title_filter, released_after_year, expected',
        [
            pytest.param('DU', 2020, ['Dune'], id='case_insensitive_match'),
            pytest.param('une', 2020, ['Dune'], id='substring_match'),
            pytest.param('du', 2021, [], id='released_in_lower_bound_year'),
            pytest.param('Matrix', 1990, [], id='no_title_match'),
        ],
    )
    async def test_titles_by_substring_and_year(
        self, seeded_cinema, uow_factory, title_filter, released_after_year, expected
    ):
        result = await ListMovieTitlesUseCase(uow_factory()).execute(
            title_filter=title_filter, released_after_year=released_after_year
        )

        assert result == expected

    async def test_like_wildcards_are_matched_literally(self, seeded_cinema, uow_factory):
        result = await ListMovieTitlesUseCase(uow_factory()).execute(
            title_filter='%', released_after_year=1900
        )

        assert result == []

    async def test_empty_filter_is_invalid(self, uow_factory):
        with pytest.raises(InvalidInputError):
            await ListMovieTitlesUseCase(uow_factory()).execute(
                title_filter='', released_after_year=2020
            )


class TestUserReports:
    @pytest.fixture
    async def bookings(self, seeded_cinema, create_booking_use_case):
        await create_booking_use_case().execute(
            user_email='ann@example.com',
            show_id=seeded_cinema.show_id,
            cinema_seat_ids=[seeded_cinema.seat_ids[2], seeded_cinema.seat_ids[1]],
        )
        await create_booking_use_case().execute(
            user_email='bob@example.com',
            show_id=seeded_cinema.show_id,
            cinema_seat_ids=[seeded_cinema.seat_ids[3]],
            status='pending',
        )

    async def test_users_with_pending_booking(self, bookings, uow_factory):
        result = await ListUsersWithPendingBookingUseCase(uow_factory()).execute()

        assert result == [UserWithPendingBooking(email='bob@example.com', name='Bob', phone='222')]

    async def test_user_booking_details_one_row_per_seat(self, bookings, uow_factory):
        result = await ListUserBookingDetailsUseCase(uow_factory()).execute(
            user_email='Ann@Example.com'
        )

        assert [detail.seat_number for detail in result] == [1, 2]
        assert result[0] == UserBookingDetail(
            booking_id=result[0].booking_id,
            status=BookingStatus.PAID,
            movie_title='Dune',
            show_date=SHOW_DATE,
            start_time=time(19, 0),
            theater_name='T',
            seat_number=1,
        )
