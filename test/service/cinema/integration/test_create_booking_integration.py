"""
Integration tests for seat allocation and booking creation

Real SQLAlchemy repositories against a per-test SQLite database.
"""

import asyncio

import pytest

from src.platform.exception.exceptions import (
    ConflictError,
    InvalidInputError,
    NotFoundError,
    SeatConflictError,
)
from src.service.cinema.domain.entity.booking_entity import Booking
from src.service.cinema.domain.enum.booking_status import BookingStatus


class TestCreateBooking:
    async def test_paid_booking_allocates_seats_and_records_payment(
        self, seeded_cinema, create_booking_use_case, uow_factory
    ):
        seat_1, seat_2 = seeded_cinema.seat_ids[1], seeded_cinema.seat_ids[2]

        booking = await create_booking_use_case().execute(
            user_email='ann@example.com',
            show_id=seeded_cinema.show_id,
            cinema_seat_ids=[seat_2, seat_1],
        )

        assert booking.status == BookingStatus.PAID
        assert booking.seat_count == 2
        async with uow_factory() as uow:
            show_seats = await uow.seat_inventory_repo.list_by_booking(booking_id=booking.id)
            payment = await uow.payment_repo.get_by_booking_id(booking_id=booking.id)
        assert [s.cinema_seat_id for s in show_seats] == [seat_1, seat_2]
        assert [s.price for s in show_seats] == [1000, 1000]
        assert payment is not None
        assert payment.amount == 2000

    async def test_pending_booking_has_no_payment(
        self, seeded_cinema, create_booking_use_case, uow_factory
    ):
        booking = await create_booking_use_case().execute(
            user_email='ann@example.com',
            show_id=seeded_cinema.show_id,
            cinema_seat_ids=[seeded_cinema.seat_ids[3]],
            status='pending',
        )

        assert booking.status == BookingStatus.PENDING
        async with uow_factory() as uow:
            assert await uow.payment_repo.get_by_booking_id(booking_id=booking.id) is None

    async def test_default_status_comes_from_policy(self, seeded_cinema, create_booking_use_case):
        booking = await create_booking_use_case(default_status='pending').execute(
            user_email='ann@example.com',
            show_id=seeded_cinema.show_id,
            cinema_seat_ids=[seeded_cinema.seat_ids[1]],
        )

        assert booking.status == BookingStatus.PENDING

    async def test_taken_seat_conflicts_and_reports_free_seats(
        self, seeded_cinema, create_booking_use_case, uow_factory
    ):
        seat_1, seat_3 = seeded_cinema.seat_ids[1], seeded_cinema.seat_ids[3]
        await create_booking_use_case().execute(
            user_email='ann@example.com',
            show_id=seeded_cinema.show_id,
            cinema_seat_ids=[seat_1, seeded_cinema.seat_ids[2]],
        )

        with pytest.raises(SeatConflictError) as exc_info:
            await create_booking_use_case().execute(
                user_email='bob@example.com',
                show_id=seeded_cinema.show_id,
                cinema_seat_ids=[seat_1],
            )

        assert exc_info.value.status_code == 409
        assert exc_info.value.cinema_seat_id == seat_1
        assert [seat.id for seat in exc_info.value.free_seats] == [seat_3]
        # The losing booking left nothing behind
        async with uow_factory() as uow:
            paid_ids = await uow.booking_command_repo.list_ids_by_status(status=BookingStatus.PAID)
            taken = await uow.seat_inventory_repo.list_taken_seat_ids(show_id=seeded_cinema.show_id)
        assert len(paid_ids) == 1
        assert sorted(taken) == [seat_1, seeded_cinema.seat_ids[2]]

    async def test_draft_can_retry_with_a_free_seat_after_conflict(
        self, seeded_cinema, create_booking_use_case, uow_factory
    ):
        seat_1, seat_3 = seeded_cinema.seat_ids[1], seeded_cinema.seat_ids[3]
        await create_booking_use_case().execute(
            user_email='ann@example.com',
            show_id=seeded_cinema.show_id,
            cinema_seat_ids=[seat_1],
        )

        async with create_booking_use_case().begin(
            user_email='bob@example.com', show_id=seeded_cinema.show_id, seat_count=1
        ) as draft:
            with pytest.raises(SeatConflictError) as exc_info:
                await draft.allocate(cinema_seat_id=seat_1)
            retry_seat = exc_info.value.free_seats[-1]
            assert retry_seat.id == seat_3

            await draft.allocate(cinema_seat_id=retry_seat.id)
            booking = await draft.commit()

        async with uow_factory() as uow:
            payment = await uow.payment_repo.get_by_booking_id(booking_id=booking.id)
        assert payment.amount == 1500

    async def test_leaving_draft_without_commit_rolls_everything_back(
        self, seeded_cinema, create_booking_use_case, uow_factory
    ):
        async with create_booking_use_case().begin(
            user_email='ann@example.com', show_id=seeded_cinema.show_id, seat_count=2
        ) as draft:
            await draft.allocate(cinema_seat_id=seeded_cinema.seat_ids[1])
            assert [s.id for s in await draft.free_seats()] == [
                seeded_cinema.seat_ids[2],
                seeded_cinema.seat_ids[3],
            ]

        async with uow_factory() as uow:
            assert await uow.seat_inventory_repo.list_taken_seat_ids(
                show_id=seeded_cinema.show_id
            ) == []
            assert await uow.booking_command_repo.list_by_show_ids(
                show_ids=[seeded_cinema.show_id]
            ) == []

    async def test_commit_requires_every_seat(self, seeded_cinema, create_booking_use_case):
        with pytest.raises(InvalidInputError):
            async with create_booking_use_case().begin(
                user_email='ann@example.com', show_id=seeded_cinema.show_id, seat_count=2
            ) as draft:
                await draft.allocate(cinema_seat_id=seeded_cinema.seat_ids[1])
                await draft.commit()

    async def test_cannot_allocate_more_than_seat_count(
        self, seeded_cinema, create_booking_use_case
    ):
        async with create_booking_use_case().begin(
            user_email='ann@example.com', show_id=seeded_cinema.show_id, seat_count=1
        ) as draft:
            await draft.allocate(cinema_seat_id=seeded_cinema.seat_ids[1])
            with pytest.raises(InvalidInputError):
                await draft.allocate(cinema_seat_id=seeded_cinema.seat_ids[2])

    async def test_more_seats_than_left_is_a_conflict(
        self, seeded_cinema, create_booking_use_case
    ):
        await create_booking_use_case().execute(
            user_email='ann@example.com',
            show_id=seeded_cinema.show_id,
            cinema_seat_ids=[seeded_cinema.seat_ids[1], seeded_cinema.seat_ids[2]],
        )

        with pytest.raises(ConflictError):
            async with create_booking_use_case().begin(
                user_email='bob@example.com', show_id=seeded_cinema.show_id, seat_count=2
            ):
                pass

    async def test_seat_of_another_theater_is_not_found(
        self, seeded_cinema, create_booking_use_case
    ):
        with pytest.raises(NotFoundError):
            await create_booking_use_case().execute(
                user_email='ann@example.com',
                show_id=seeded_cinema.show_id,
                cinema_seat_ids=[seeded_cinema.other_theater_seat_id],
            )

    @pytest.mark.parametrize(
        'user_email, show_id',
        [
            pytest.param('nobody@example.com', None, id='unknown_user'),
            pytest.param('ann@example.com', 999, id='unknown_show'),
        ],
    )
    async def test_unknown_user_or_show_is_not_found(
        self, seeded_cinema, create_booking_use_case, user_email, show_id
    ):
        with pytest.raises(NotFoundError):
            await create_booking_use_case().execute(
                user_email=user_email,
                show_id=show_id or seeded_cinema.show_id,
                cinema_seat_ids=[seeded_cinema.seat_ids[1]],
            )

    async def test_same_seat_twice_is_invalid(self, seeded_cinema, create_booking_use_case):
        seat_1 = seeded_cinema.seat_ids[1]

        with pytest.raises(InvalidInputError):
            await create_booking_use_case().execute(
                user_email='ann@example.com',
                show_id=seeded_cinema.show_id,
                cinema_seat_ids=[seat_1, seat_1],
            )


class TestConcurrentAllocation:
    async def test_competing_bookings_have_one_winner_and_one_conflict(
        self, seeded_cinema, create_booking_use_case, uow_factory
    ):
        seat_1 = seeded_cinema.seat_ids[1]

        results = await asyncio.gather(
            *(
                create_booking_use_case().execute(
                    user_email=email, show_id=seeded_cinema.show_id, cinema_seat_ids=[seat_1]
                )
                for email in ('ann@example.com', 'bob@example.com')
            ),
            return_exceptions=True,
        )

        bookings = [r for r in results if isinstance(r, Booking)]
        conflicts = [r for r in results if isinstance(r, SeatConflictError)]
        assert len(bookings) == 1
        assert len(conflicts) == 1
        assert [s.id for s in conflicts[0].free_seats] == [
            seeded_cinema.seat_ids[2],
            seeded_cinema.seat_ids[3],
        ]
        async with uow_factory() as uow:
            assert await uow.seat_inventory_repo.list_taken_seat_ids(
                show_id=seeded_cinema.show_id
            ) == [seat_1]
            assert len(
                await uow.booking_command_repo.list_by_show_ids(show_ids=[seeded_cinema.show_id])
            ) == 1
