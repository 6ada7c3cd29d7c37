from datetime import datetime, timezone
from typing import Optional

import attrs

from src.platform.exception.exceptions import InvalidInputError, PolicyViolationError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.domain.enum.booking_status import BookingStatus


@attrs.define
class Booking:
    user_email: str
    show_id: Optional[int]  # None once the show has been removed
    seat_count: int
    status: BookingStatus = BookingStatus.PENDING
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        user_email: str,
        show_id: int,
        seat_count: int,
        status: BookingStatus,
    ) -> 'Booking':
        if seat_count <= 0:
            raise InvalidInputError('seat_count must be a positive integer')
        if status == BookingStatus.CANCELLED:
            raise InvalidInputError('A booking cannot be created as cancelled')

        now = datetime.now(timezone.utc)
        return cls(
            user_email=user_email,
            show_id=show_id,
            seat_count=seat_count,
            status=status,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_cancelled(self) -> bool:
        return self.status == BookingStatus.CANCELLED

    @property
    def is_paid(self) -> bool:
        return self.status == BookingStatus.PAID

    @Logger.io
    def cancel(self) -> 'Booking':
        """
        Cancel booking

        Cancelling an already cancelled booking returns it unchanged.
        """
        if self.is_cancelled:
            return self
        now = datetime.now(timezone.utc)
        return attrs.evolve(self, status=BookingStatus.CANCELLED, updated_at=now)

    @Logger.io
    def validate_can_change_seats(self) -> None:
        if self.is_cancelled:
            raise PolicyViolationError('Cannot change seats of a cancelled booking')
