from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger


class CancelAllPendingBookingsUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @Logger.io
    async def execute(self) -> int:
        """Cancel every pending booking; returns how many were cancelled"""
        async with self.uow:
            cancelled_count = await self.uow.booking_command_repo.cancel_all_pending()
            await self.uow.commit()

        Logger.base.info(f'🚫 [CANCEL-PENDING] {cancelled_count} pending booking(s) cancelled')
        return cancelled_count
