from abc import ABC, abstractmethod
from datetime import date
from typing import List

from src.service.cinema.domain.entity.cinema_seat_entity import CinemaSeat
from src.service.cinema.domain.entity.movie_entity import Show
from src.service.cinema.domain.entity.theater_entity import Cinema, Theater


class ICatalogQueryRepo(ABC):
    """Read access to movies, shows, theaters, cinemas and their seats."""

    @abstractmethod
    async def get_show(self, *, show_id: int, for_share: bool = False) -> Show | None:
        """With for_share the show row stays locked against removal until the UoW ends"""
        pass

    @abstractmethod
    async def get_theater(self, *, theater_id: int) -> Theater | None:
        pass

    @abstractmethod
    async def get_theater_for_show(self, *, show_id: int) -> Theater | None:
        """Theater the show plays in, resolved through Play"""
        pass

    @abstractmethod
    async def get_cinema(self, *, cinema_id: int) -> Cinema | None:
        pass

    @abstractmethod
    async def get_cinema_by_name(self, *, name: str) -> Cinema | None:
        pass

    @abstractmethod
    async def get_cinema_seat(self, *, cinema_seat_id: int) -> CinemaSeat | None:
        pass

    @abstractmethod
    async def list_theater_seats(self, *, theater_id: int) -> List[CinemaSeat]:
        pass

    @abstractmethod
    async def list_show_ids_on_date_at_cinema(
        self, *, show_date: date, cinema_name: str
    ) -> List[int]:
        """Ids of the matching shows, locked for update until the UoW ends"""
        pass
