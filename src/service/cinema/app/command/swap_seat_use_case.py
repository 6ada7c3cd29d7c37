from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.domain.entity.show_seat_entity import ShowSeat
from src.service.cinema.domain.seat_allocation_domain import (
    ensure_same_seat_class,
    ensure_seat_in_theater,
)


class SwapSeatUseCase:
    """
    Exchange one seat of a booking for another seat of the same class.

    Flow:
    1. Lock the booking and its ShowSeat for the old seat
    2. Validate booking is not cancelled and both seats exist in the show's theater
    3. Enforce same seat class (PolicyViolationError otherwise)
    4. Point the ShowSeat at the new seat; SeatConflictError if it is taken

    The ShowSeat keeps its price since the seat class is unchanged.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @Logger.io
    async def execute(
        self, *, booking_id: int, old_cinema_seat_id: int, new_cinema_seat_id: int
    ) -> ShowSeat:
        async with self.uow:
            booking = await self.uow.booking_command_repo.get_by_id(
                booking_id=booking_id, for_update=True
            )
            if not booking:
                raise NotFoundError(f'Booking {booking_id} not found')
            booking.validate_can_change_seats()

            show_seat = await self.uow.seat_inventory_repo.get_by_booking_and_seat(
                booking_id=booking_id, cinema_seat_id=old_cinema_seat_id
            )
            if not show_seat:
                raise NotFoundError(
                    f'Booking {booking_id} does not hold seat {old_cinema_seat_id}'
                )

            old_seat = await self.uow.catalog_query_repo.get_cinema_seat(
                cinema_seat_id=old_cinema_seat_id
            )
            new_seat = await self.uow.catalog_query_repo.get_cinema_seat(
                cinema_seat_id=new_cinema_seat_id
            )
            if not old_seat:
                raise NotFoundError(f'Seat {old_cinema_seat_id} not found')
            if not new_seat:
                raise NotFoundError(f'Seat {new_cinema_seat_id} not found')

            ensure_seat_in_theater(new_seat, old_seat.theater_id)
            ensure_same_seat_class(old_seat, new_seat)

            if old_cinema_seat_id == new_cinema_seat_id:
                return show_seat

            swapped = await self.uow.seat_inventory_repo.reassign_seat(
                show_seat=show_seat, new_cinema_seat_id=new_cinema_seat_id
            )
            await self.uow.commit()

        Logger.base.info(
            f'🔁 [SWAP-SEAT] Booking {booking_id}: seat {old_cinema_seat_id} → {new_cinema_seat_id}'
        )
        return swapped
