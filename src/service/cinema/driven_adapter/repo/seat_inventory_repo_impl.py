"""
Seat Inventory Repository Implementation

ShowSeat rows are the unit of inventory consumption. Double-booking is prevented by
the ``uq_show_seat`` unique constraint on (show_id, cinema_seat_id): every write runs
inside a SAVEPOINT so a losing insert/update only rolls back itself and the caller's
unit of work stays usable (e.g. to offer the updated free-seat set and retry).
"""

from typing import List, Sequence

from sqlalchemy import delete, exists, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import SeatConflictError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_seat_inventory_repo import ISeatInventoryRepo
from src.service.cinema.domain.entity.show_seat_entity import ShowSeat
from src.service.cinema.driven_adapter.model.booking_model import ShowSeatModel


class SeatInventoryRepoImpl(ISeatInventoryRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_show_seat: ShowSeatModel) -> ShowSeat:
        return ShowSeat(
            id=db_show_seat.id,
            show_id=db_show_seat.show_id,
            cinema_seat_id=db_show_seat.cinema_seat_id,
            booking_id=db_show_seat.booking_id,
            price=db_show_seat.price,
        )

    async def _is_taken(self, *, show_id: int, cinema_seat_id: int) -> bool:
        result = await self.session.execute(
            select(
                exists().where(
                    ShowSeatModel.show_id == show_id,
                    ShowSeatModel.cinema_seat_id == cinema_seat_id,
                )
            )
        )
        return bool(result.scalar())

    @Logger.io
    async def list_taken_seat_ids(self, *, show_id: int) -> List[int]:
        result = await self.session.execute(
            select(ShowSeatModel.cinema_seat_id).where(ShowSeatModel.show_id == show_id)
        )
        return list(result.scalars())

    @Logger.io
    async def allocate(
        self, *, show_id: int, cinema_seat_id: int, booking_id: int, price: int
    ) -> ShowSeat:
        if await self._is_taken(show_id=show_id, cinema_seat_id=cinema_seat_id):
            raise SeatConflictError(show_id=show_id, cinema_seat_id=cinema_seat_id)

        db_show_seat = ShowSeatModel(
            show_id=show_id,
            cinema_seat_id=cinema_seat_id,
            booking_id=booking_id,
            price=price,
        )
        try:
            async with self.session.begin_nested():
                self.session.add(db_show_seat)
                await self.session.flush()
        except IntegrityError:
            # Lost the race against a concurrent transaction that committed first
            if await self._is_taken(show_id=show_id, cinema_seat_id=cinema_seat_id):
                raise SeatConflictError(show_id=show_id, cinema_seat_id=cinema_seat_id)
            raise

        Logger.base.info(
            f'💺 [ALLOCATE] seat {cinema_seat_id} → booking {booking_id} for show {show_id}'
        )
        return self._to_entity(db_show_seat)

    @Logger.io
    async def get_by_booking_and_seat(
        self, *, booking_id: int, cinema_seat_id: int
    ) -> ShowSeat | None:
        result = await self.session.execute(
            select(ShowSeatModel)
            .where(
                ShowSeatModel.booking_id == booking_id,
                ShowSeatModel.cinema_seat_id == cinema_seat_id,
            )
            .with_for_update()
        )
        db_show_seat = result.scalar_one_or_none()
        return self._to_entity(db_show_seat) if db_show_seat else None

    @Logger.io
    async def reassign_seat(self, *, show_seat: ShowSeat, new_cinema_seat_id: int) -> ShowSeat:
        if await self._is_taken(show_id=show_seat.show_id, cinema_seat_id=new_cinema_seat_id):
            raise SeatConflictError(show_id=show_seat.show_id, cinema_seat_id=new_cinema_seat_id)

        try:
            async with self.session.begin_nested():
                await self.session.execute(
                    update(ShowSeatModel)
                    .where(ShowSeatModel.id == show_seat.id)
                    .values(cinema_seat_id=new_cinema_seat_id)
                    .execution_options(synchronize_session=False)
                )
        except IntegrityError:
            if await self._is_taken(show_id=show_seat.show_id, cinema_seat_id=new_cinema_seat_id):
                raise SeatConflictError(
                    show_id=show_seat.show_id, cinema_seat_id=new_cinema_seat_id
                )
            raise

        return ShowSeat(
            id=show_seat.id,
            show_id=show_seat.show_id,
            cinema_seat_id=new_cinema_seat_id,
            booking_id=show_seat.booking_id,
            price=show_seat.price,
        )

    @Logger.io
    async def list_by_booking(self, *, booking_id: int) -> List[ShowSeat]:
        result = await self.session.execute(
            select(ShowSeatModel)
            .where(ShowSeatModel.booking_id == booking_id)
            .order_by(ShowSeatModel.cinema_seat_id)
            .execution_options(populate_existing=True)
        )
        return [self._to_entity(row) for row in result.scalars()]

    @Logger.io
    async def delete_by_booking_ids(self, *, booking_ids: Sequence[int]) -> int:
        if not booking_ids:
            return 0
        result = await self.session.execute(
            delete(ShowSeatModel)
            .where(ShowSeatModel.booking_id.in_(booking_ids))
            .execution_options(synchronize_session=False)
        )
        return result.rowcount  # type: ignore[attr-defined]

    @Logger.io
    async def delete_by_show_ids(self, *, show_ids: Sequence[int]) -> int:
        if not show_ids:
            return 0
        result = await self.session.execute(
            delete(ShowSeatModel)
            .where(ShowSeatModel.show_id.in_(show_ids))
            .execution_options(synchronize_session=False)
        )
        return result.rowcount  # type: ignore[attr-defined]
