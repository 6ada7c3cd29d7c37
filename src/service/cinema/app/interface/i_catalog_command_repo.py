from abc import ABC, abstractmethod
from typing import List, Sequence

from src.service.cinema.domain.entity.cinema_seat_entity import CinemaSeat
from src.service.cinema.domain.entity.movie_entity import Movie, Show
from src.service.cinema.domain.entity.theater_entity import Cinema, Theater


class ICatalogCommandRepo(ABC):
    @abstractmethod
    async def create_cinema(self, *, cinema: Cinema) -> Cinema:
        pass

    @abstractmethod
    async def create_theater(self, *, theater: Theater) -> Theater:
        pass

    @abstractmethod
    async def create_cinema_seats(self, *, seats: Sequence[CinemaSeat]) -> List[CinemaSeat]:
        pass

    @abstractmethod
    async def create_movie(self, *, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def create_show(self, *, show: Show) -> Show:
        pass

    @abstractmethod
    async def create_play(self, *, show_id: int, theater_id: int) -> None:
        pass

    @abstractmethod
    async def delete_plays_by_show_ids(self, *, show_ids: Sequence[int]) -> int:
        pass

    @abstractmethod
    async def delete_shows_by_ids(self, *, show_ids: Sequence[int]) -> int:
        pass
