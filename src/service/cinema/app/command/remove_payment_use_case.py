from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.domain.entity.booking_entity import Booking


class RemovePaymentUseCase:
    """Delete the payment of a booking and cancel the booking."""

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @Logger.io
    async def execute(self, *, booking_id: int) -> Booking:
        async with self.uow:
            booking = await self.uow.booking_command_repo.get_by_id(
                booking_id=booking_id, for_update=True
            )
            if not booking:
                raise NotFoundError(f'Booking {booking_id} not found')

            payment = await self.uow.payment_repo.get_by_booking_id(booking_id=booking_id)
            if not payment:
                raise NotFoundError(f'Booking {booking_id} has no payment')

            await self.uow.payment_repo.delete_by_booking_ids(booking_ids=[booking_id])
            cancelled = await self.uow.booking_command_repo.update_status(booking=booking.cancel())
            await self.uow.commit()

        Logger.base.info(
            f'💸 [REMOVE-PAYMENT] Payment of {payment.amount} removed, booking {booking_id} cancelled'
        )
        return cancelled
