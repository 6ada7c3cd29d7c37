from typing import List

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.service.seat_inventory_service import SeatInventoryService
from src.service.cinema.domain.entity.cinema_seat_entity import CinemaSeat


class ListFreeSeatsUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @Logger.io
    async def execute(self, *, show_id: int) -> List[CinemaSeat]:
        async with self.uow:
            return await SeatInventoryService.free_seats(self.uow, show_id=show_id)
