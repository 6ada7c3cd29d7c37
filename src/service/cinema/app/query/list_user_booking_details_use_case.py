from typing import List

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto.report_dto import UserBookingDetail
from src.service.cinema.domain.entity.user_entity import UserEntity


class ListUserBookingDetailsUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @Logger.io
    async def execute(self, *, user_email: str) -> List[UserBookingDetail]:
        """One row per booked seat; bookings whose show was removed are left out"""
        email = UserEntity.normalize_email(user_email)
        async with self.uow:
            return await self.uow.report_query_repo.list_user_booking_details(user_email=email)
