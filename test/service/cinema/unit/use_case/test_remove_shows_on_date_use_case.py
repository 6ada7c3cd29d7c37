"""
Unit tests for RemoveShowsOnDateUseCase

Focus: cascade order inside one transaction
(payments → booking status → detach → ShowSeat → Play → Show)
"""

from datetime import date
from unittest.mock import AsyncMock, call

import pytest

from src.platform.exception.exceptions import NotFoundError
from src.service.cinema.app.command.remove_shows_on_date_use_case import (
    RemoveShowsOnDateUseCase,
)
from src.service.cinema.domain.entity.booking_entity import Booking
from src.service.cinema.domain.entity.theater_entity import Cinema
from src.service.cinema.domain.enum.booking_status import BookingStatus


@pytest.mark.unit
class TestRemoveShowsOnDate:
    async def test_cascade_runs_in_order_and_commits_once(self, uow_mock):
        calls = AsyncMock()
        uow_mock.catalog_query_repo.get_cinema_by_name.return_value = Cinema(id=1, name='Downtown')
        uow_mock.catalog_query_repo.list_show_ids_on_date_at_cinema.return_value = [5, 6]
        uow_mock.booking_command_repo.list_by_show_ids.return_value = [
            Booking(
                id=11,
                user_email='a@example.com',
                show_id=5,
                seat_count=1,
                status=BookingStatus.PAID,
            ),
            Booking(
                id=12,
                user_email='b@example.com',
                show_id=6,
                seat_count=1,
                status=BookingStatus.PENDING,
            ),
        ]
        uow_mock.payment_repo.delete_by_booking_ids = calls.delete_payments
        uow_mock.booking_command_repo.cancel_by_ids = calls.cancel_bookings
        uow_mock.booking_command_repo.detach_from_shows = calls.detach_bookings
        uow_mock.seat_inventory_repo.delete_by_show_ids = calls.delete_show_seats
        uow_mock.catalog_command_repo.delete_plays_by_show_ids = calls.delete_plays
        uow_mock.catalog_command_repo.delete_shows_by_ids = calls.delete_shows
        uow_mock.commit = calls.commit

        removed = await RemoveShowsOnDateUseCase(uow=uow_mock).execute(
            show_date=date(2024, 5, 1), cinema_name='Downtown'
        )

        assert removed == [5, 6]
        assert calls.mock_calls == [
            call.delete_payments(booking_ids=[11, 12]),
            call.cancel_bookings(booking_ids=[11, 12]),
            call.detach_bookings(show_ids=[5, 6]),
            call.delete_show_seats(show_ids=[5, 6]),
            call.delete_plays(show_ids=[5, 6]),
            call.delete_shows(show_ids=[5, 6]),
            call.commit(),
        ]

    async def test_unknown_cinema(self, uow_mock):
        uow_mock.catalog_query_repo.get_cinema_by_name.return_value = None

        with pytest.raises(NotFoundError):
            await RemoveShowsOnDateUseCase(uow=uow_mock).execute(
                show_date=date(2024, 5, 1), cinema_name='Nowhere'
            )
        uow_mock.catalog_command_repo.delete_shows_by_ids.assert_not_awaited()
