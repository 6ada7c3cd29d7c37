from abc import ABC, abstractmethod
from typing import List, Sequence

from src.service.cinema.domain.entity.booking_entity import Booking
from src.service.cinema.domain.enum.booking_status import BookingStatus


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, booking: Booking) -> Booking:
        pass

    @abstractmethod
    async def get_by_id(self, *, booking_id: int, for_update: bool = False) -> Booking | None:
        """
        Get single booking by ID

        Args:
            booking_id: Booking ID
            for_update: Lock the row until the unit of work ends
        """
        pass

    @abstractmethod
    async def update_status(self, *, booking: Booking) -> Booking:
        pass

    @abstractmethod
    async def cancel_all_pending(self) -> int:
        """Set every pending booking to cancelled; returns the number of rows changed"""
        pass

    @abstractmethod
    async def cancel_by_ids(self, *, booking_ids: Sequence[int]) -> int:
        pass

    @abstractmethod
    async def list_ids_by_status(self, *, status: BookingStatus) -> List[int]:
        pass

    @abstractmethod
    async def list_by_show_ids(self, *, show_ids: Sequence[int]) -> List[Booking]:
        pass

    @abstractmethod
    async def detach_from_shows(self, *, show_ids: Sequence[int]) -> int:
        """Clear the show reference of bookings whose show is about to be deleted"""
        pass

    @abstractmethod
    async def delete_by_ids(self, *, booking_ids: Sequence[int]) -> int:
        pass
