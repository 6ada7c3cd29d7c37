from typing import List, Optional

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.domain.entity.cinema_seat_entity import CinemaSeat
from src.service.cinema.domain.entity.theater_entity import Theater
from src.service.cinema.domain.seat_allocation_domain import compute_free_seats


class SeatInventoryService:
    """Seat inventory reads shared by the booking and lifecycle use cases (inside an open UoW)."""

    @staticmethod
    @Logger.io
    async def resolve_theater(
        uow: AbstractUnitOfWork, *, show_id: int, for_share: bool = False
    ) -> Theater:
        show = await uow.catalog_query_repo.get_show(show_id=show_id, for_share=for_share)
        if not show:
            raise NotFoundError(f'Show {show_id} not found')

        theater = await uow.catalog_query_repo.get_theater_for_show(show_id=show_id)
        if not theater:
            raise NotFoundError(f'Show {show_id} is not playing in any theater')
        return theater

    @staticmethod
    @Logger.io
    async def free_seats(
        uow: AbstractUnitOfWork, *, show_id: int, theater_id: Optional[int] = None
    ) -> List[CinemaSeat]:
        if theater_id is None:
            theater = await SeatInventoryService.resolve_theater(uow, show_id=show_id)
            theater_id = theater.id

        theater_seats = await uow.catalog_query_repo.list_theater_seats(theater_id=theater_id)
        taken_seat_ids = await uow.seat_inventory_repo.list_taken_seat_ids(show_id=show_id)
        return compute_free_seats(theater_seats, taken_seat_ids)
