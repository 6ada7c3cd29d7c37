from abc import ABC, abstractmethod
from typing import List, Sequence

from src.service.cinema.domain.entity.show_seat_entity import ShowSeat


class ISeatInventoryRepo(ABC):
    """
    Repository for ShowSeat rows (per-show seat occupancy)

    Uniqueness of (show_id, cinema_seat_id) is enforced by the storage layer.
    """

    @abstractmethod
    async def list_taken_seat_ids(self, *, show_id: int) -> List[int]:
        pass

    @abstractmethod
    async def allocate(
        self, *, show_id: int, cinema_seat_id: int, booking_id: int, price: int
    ) -> ShowSeat:
        """
        Atomically assign a seat for a show

        Raises:
            SeatConflictError: When the seat is already assigned for the show
        """
        pass

    @abstractmethod
    async def get_by_booking_and_seat(
        self, *, booking_id: int, cinema_seat_id: int
    ) -> ShowSeat | None:
        pass

    @abstractmethod
    async def reassign_seat(self, *, show_seat: ShowSeat, new_cinema_seat_id: int) -> ShowSeat:
        """
        Point an existing ShowSeat at another seat of the same show

        Raises:
            SeatConflictError: When the new seat is already assigned for the show
        """
        pass

    @abstractmethod
    async def list_by_booking(self, *, booking_id: int) -> List[ShowSeat]:
        pass

    @abstractmethod
    async def delete_by_booking_ids(self, *, booking_ids: Sequence[int]) -> int:
        pass

    @abstractmethod
    async def delete_by_show_ids(self, *, show_ids: Sequence[int]) -> int:
        pass
