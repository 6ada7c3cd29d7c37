from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.cinema.domain.enum.booking_status import BookingStatus


class PurgeCancelledBookingsUseCase:
    """
    Hard-delete cancelled bookings.

    Their ShowSeat rows go first, which returns the seats to the free pool,
    then any leftover Payment rows, then the bookings themselves.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @Logger.io
    async def execute(self) -> int:
        async with self.uow:
            booking_ids = await self.uow.booking_command_repo.list_ids_by_status(
                status=BookingStatus.CANCELLED
            )
            if not booking_ids:
                return 0

            freed_seats = await self.uow.seat_inventory_repo.delete_by_booking_ids(
                booking_ids=booking_ids
            )
            await self.uow.payment_repo.delete_by_booking_ids(booking_ids=booking_ids)
            purged_count = await self.uow.booking_command_repo.delete_by_ids(
                booking_ids=booking_ids
            )
            await self.uow.commit()

        Logger.base.info(
            f'🧹 [PURGE] {purged_count} cancelled booking(s) purged, {freed_seats} seat(s) freed'
        )
        return purged_count
