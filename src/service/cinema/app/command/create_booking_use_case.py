from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Mapping, Optional, Sequence

from opentelemetry import trace

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import (
    ConflictError,
    InvalidInputError,
    NotFoundError,
    SeatConflictError,
)
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.service.seat_inventory_service import SeatInventoryService
from src.service.cinema.domain.entity.booking_entity import Booking
from src.service.cinema.domain.entity.cinema_seat_entity import CinemaSeat
from src.service.cinema.domain.entity.payment_entity import Payment
from src.service.cinema.domain.entity.show_seat_entity import ShowSeat
from src.service.cinema.domain.entity.user_entity import UserEntity
from src.service.cinema.domain.enum.booking_status import BookingStatus
from src.service.cinema.domain.seat_allocation_domain import (
    ensure_seat_in_theater,
    lock_ordered_seat_ids,
    price_for_seat_class,
)


class BookingDraft:
    """
    A booking whose seats are being allocated inside one open unit of work

    The booking row already exists in the transaction. Each allocate() call
    claims one seat; a SeatConflictError carries the updated free seats so the
    caller can pick another one. Nothing is visible to other transactions until
    commit(); leaving the draft's block without committing rolls everything back.
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        booking: Booking,
        theater_id: int,
        seat_prices: Mapping[str, int],
    ) -> None:
        self.uow = uow
        self.booking = booking
        self.theater_id = theater_id
        self._seat_prices = seat_prices
        self.show_seats: List[ShowSeat] = []
        self.committed = False

    def __repr__(self) -> str:
        return (
            f'BookingDraft(booking_id={self.booking.id}, show_id={self.booking.show_id}, '
            f'allocated={len(self.show_seats)}/{self.booking.seat_count})'
        )

    @property
    def remaining(self) -> int:
        return self.booking.seat_count - len(self.show_seats)

    @property
    def total_price(self) -> int:
        return sum(show_seat.price for show_seat in self.show_seats)

    async def free_seats(self) -> List[CinemaSeat]:
        return await SeatInventoryService.free_seats(
            self.uow, show_id=self.booking.show_id, theater_id=self.theater_id
        )

    @Logger.io
    async def allocate(self, *, cinema_seat_id: int) -> ShowSeat:
        if self.committed:
            raise InvalidInputError('Booking has already been committed')
        if self.remaining <= 0:
            raise InvalidInputError(f'All {self.booking.seat_count} seat(s) are already allocated')

        seat = await self.uow.catalog_query_repo.get_cinema_seat(cinema_seat_id=cinema_seat_id)
        if not seat:
            raise NotFoundError(f'Seat {cinema_seat_id} not found')
        ensure_seat_in_theater(seat, self.theater_id)

        try:
            show_seat = await self.uow.seat_inventory_repo.allocate(
                show_id=self.booking.show_id,
                cinema_seat_id=cinema_seat_id,
                booking_id=self.booking.id,
                price=price_for_seat_class(seat.seat_class, self._seat_prices),
            )
        except SeatConflictError as e:
            e.free_seats = await self.free_seats()
            raise

        self.show_seats.append(show_seat)
        return show_seat

    @Logger.io
    async def commit(self) -> Booking:
        if self.committed:
            return self.booking
        if self.remaining:
            raise InvalidInputError(f'{self.remaining} seat(s) still need to be allocated')

        if self.booking.is_paid:
            await self.uow.payment_repo.create(
                payment=Payment(booking_id=self.booking.id, amount=self.total_price)
            )
        await self.uow.commit()
        self.committed = True

        Logger.base.info(
            f'🎟️ [CREATE-BOOKING] Booking {self.booking.id} ({self.booking.status}) '
            f'for {self.booking.user_email}: seats {[s.cinema_seat_id for s in self.show_seats]}'
        )
        return self.booking


class CreateBookingUseCase:
    """
    Create booking use case

    Flow:
    1. Validate user and show, resolve the show's theater via Play (Fail Fast)
    2. Insert the booking row (paid or pending) with no seats
    3. Allocate the requested seats one at a time
    4. Commit booking + seats (+ payment when paid) together, or roll back all of it
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        seat_prices: Mapping[str, int],
        default_status: str,
    ) -> None:
        self.uow = uow
        self.seat_prices = seat_prices
        self.default_status = default_status
        self.tracer = trace.get_tracer(__name__)

    def _resolve_status(self, status: Optional[str]) -> BookingStatus:
        try:
            return BookingStatus(status or self.default_status)
        except ValueError:
            raise InvalidInputError(f'Invalid booking status: {status!r}')

    @asynccontextmanager
    async def begin(
        self,
        *,
        user_email: str,
        show_id: int,
        seat_count: int,
        status: Optional[str] = None,
    ) -> AsyncIterator[BookingDraft]:
        """
        Open a booking draft

        Usage:
            async with use_case.begin(user_email=..., show_id=..., seat_count=2) as draft:
                await draft.allocate(cinema_seat_id=1)
                await draft.allocate(cinema_seat_id=2)
                booking = await draft.commit()
        """
        booking_status = self._resolve_status(status)
        if seat_count <= 0:
            raise InvalidInputError('seat_count must be a positive integer')
        email = UserEntity.normalize_email(user_email)

        async with self.uow:
            if not await self.uow.user_repo.get_by_email(email=email):
                raise NotFoundError(f'User {email} not found')

            theater = await SeatInventoryService.resolve_theater(
                self.uow, show_id=show_id, for_share=True
            )
            free_seats = await SeatInventoryService.free_seats(
                self.uow, show_id=show_id, theater_id=theater.id
            )
            if seat_count > len(free_seats):
                raise ConflictError(
                    f'Only {len(free_seats)} seat(s) left for show {show_id}, '
                    f'{seat_count} requested'
                )

            booking = await self.uow.booking_command_repo.create(
                booking=Booking.create(
                    user_email=email,
                    show_id=show_id,
                    seat_count=seat_count,
                    status=booking_status,
                )
            )
            draft = BookingDraft(
                uow=self.uow,
                booking=booking,
                theater_id=theater.id,
                seat_prices=self.seat_prices,
            )
            yield draft

            if not draft.committed:
                Logger.base.info(
                    f'↩️ [CREATE-BOOKING] Draft booking for show {show_id} aborted '
                    f'with {draft.remaining} seat(s) unallocated, rolling back'
                )

    @Logger.io
    async def execute(
        self,
        *,
        user_email: str,
        show_id: int,
        cinema_seat_ids: Sequence[int],
        status: Optional[str] = None,
    ) -> Booking:
        """
        Book the given seats in one go

        Seats are claimed in increasing id order; the first conflict aborts the
        whole booking and the SeatConflictError reaches the caller.
        """
        seat_ids = lock_ordered_seat_ids(list(cinema_seat_ids))

        with self.tracer.start_as_current_span(
            'use_case.create_booking',
            attributes={'show.id': show_id, 'booking.seat_count': len(seat_ids)},
        ):
            async with self.begin(
                user_email=user_email,
                show_id=show_id,
                seat_count=len(seat_ids),
                status=status,
            ) as draft:
                for seat_id in seat_ids:
                    await draft.allocate(cinema_seat_id=seat_id)
                return await draft.commit()
