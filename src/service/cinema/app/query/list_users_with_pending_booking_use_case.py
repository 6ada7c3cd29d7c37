from typing import List

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto.report_dto import UserWithPendingBooking


class ListUsersWithPendingBookingUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @Logger.io
    async def execute(self) -> List[UserWithPendingBooking]:
        async with self.uow:
            return await self.uow.report_query_repo.list_users_with_pending_booking()
