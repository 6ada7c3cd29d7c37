"""
Booking Command Repository Implementation

Status changes are written with UPDATE statements; reads use populate_existing
so an entity loaded earlier in the same unit of work never shadows them.
"""

from datetime import datetime, timezone
from typing import List, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.cinema.domain.entity.booking_entity import Booking
from src.service.cinema.domain.enum.booking_status import BookingStatus
from src.service.cinema.driven_adapter.model.booking_model import BookingModel


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_booking: BookingModel) -> Booking:
        return Booking(
            id=db_booking.id,
            user_email=db_booking.user_email,
            show_id=db_booking.show_id,
            seat_count=db_booking.seat_count,
            status=BookingStatus(db_booking.status),
            created_at=db_booking.created_at,
            updated_at=db_booking.updated_at,
        )

    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        db_booking = BookingModel(
            user_email=booking.user_email,
            show_id=booking.show_id,
            seat_count=booking.seat_count,
            status=booking.status.value,
            created_at=booking.created_at,
            updated_at=booking.updated_at,
        )
        self.session.add(db_booking)
        await self.session.flush()
        return self._to_entity(db_booking)

    @Logger.io
    async def get_by_id(self, *, booking_id: int, for_update: bool = False) -> Booking | None:
        stmt = (
            select(BookingModel)
            .where(BookingModel.id == booking_id)
            .execution_options(populate_existing=True)
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        db_booking = result.scalar_one_or_none()
        return self._to_entity(db_booking) if db_booking else None

    @Logger.io
    async def update_status(self, *, booking: Booking) -> Booking:
        await self.session.execute(
            update(BookingModel)
            .where(BookingModel.id == booking.id)
            .values(status=booking.status.value, updated_at=booking.updated_at)
            .execution_options(synchronize_session=False)
        )
        return booking

    @Logger.io
    async def cancel_all_pending(self) -> int:
        result = await self.session.execute(
            update(BookingModel)
            .where(BookingModel.status == BookingStatus.PENDING.value)
            .values(status=BookingStatus.CANCELLED.value, updated_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False)
        )
        return result.rowcount  # type: ignore[attr-defined]

    @Logger.io
    async def cancel_by_ids(self, *, booking_ids: Sequence[int]) -> int:
        if not booking_ids:
            return 0
        result = await self.session.execute(
            update(BookingModel)
            .where(
                BookingModel.id.in_(booking_ids),
                BookingModel.status != BookingStatus.CANCELLED.value,
            )
            .values(status=BookingStatus.CANCELLED.value, updated_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False)
        )
        return result.rowcount  # type: ignore[attr-defined]

    @Logger.io
    async def list_ids_by_status(self, *, status: BookingStatus) -> List[int]:
        result = await self.session.execute(
            select(BookingModel.id)
            .where(BookingModel.status == status.value)
            .order_by(BookingModel.id)
        )
        return list(result.scalars())

    @Logger.io
    async def list_by_show_ids(self, *, show_ids: Sequence[int]) -> List[Booking]:
        if not show_ids:
            return []
        result = await self.session.execute(
            select(BookingModel)
            .where(BookingModel.show_id.in_(show_ids))
            .order_by(BookingModel.id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return [self._to_entity(row) for row in result.scalars()]

    @Logger.io
    async def detach_from_shows(self, *, show_ids: Sequence[int]) -> int:
        if not show_ids:
            return 0
        result = await self.session.execute(
            update(BookingModel)
            .where(BookingModel.show_id.in_(show_ids))
            .values(show_id=None)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount  # type: ignore[attr-defined]

    @Logger.io
    async def delete_by_ids(self, *, booking_ids: Sequence[int]) -> int:
        if not booking_ids:
            return 0
        result = await self.session.execute(
            delete(BookingModel)
            .where(BookingModel.id.in_(booking_ids))
            .execution_options(synchronize_session=False)
        )
        return result.rowcount  # type: ignore[attr-defined]
