from typing import Mapping, Sequence, Tuple

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import InvalidInputError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto.catalog_dto import TheaterLayout
from src.service.cinema.domain.entity.cinema_seat_entity import CinemaSeat
from src.service.cinema.domain.entity.theater_entity import Theater


class AddTheaterUseCase:
    """
    Add a theater to a cinema together with its physical seats

    Seats are given as (seat_number, seat_class) pairs. Every seat class must
    have a configured price, otherwise the seat could never be booked.
    """

    def __init__(self, *, uow: AbstractUnitOfWork, seat_prices: Mapping[str, int]) -> None:
        self.uow = uow
        self.seat_prices = seat_prices

    def _validate_seats(self, seats: Sequence[Tuple[int, str]]) -> None:
        if not seats:
            raise InvalidInputError('A theater needs at least one seat')
        for seat in seats:
            if not isinstance(seat, (tuple, list)) or len(seat) != 2:
                raise InvalidInputError(f'Seat {seat!r} is not a (seat_number, seat_class) pair')
            seat_number, seat_class = seat
            if isinstance(seat_number, bool) or not isinstance(seat_number, int):
                raise InvalidInputError(f'Seat number {seat_number!r} must be an integer')
            if not isinstance(seat_class, str):
                raise InvalidInputError(f'Seat class {seat_class!r} must be a string')

        seat_numbers = [seat_number for seat_number, _ in seats]
        if any(seat_number <= 0 for seat_number in seat_numbers):
            raise InvalidInputError('Seat numbers must be positive')
        if len(set(seat_numbers)) != len(seat_numbers):
            raise InvalidInputError('Seat numbers must be unique within a theater')

        unknown_classes = sorted({c for _, c in seats if c not in self.seat_prices})
        if unknown_classes:
            raise InvalidInputError(f'Unknown seat class(es): {", ".join(unknown_classes)}')

    @Logger.io
    async def execute(
        self, *, cinema_id: int, name: str, seats: Sequence[Tuple[int, str]]
    ) -> TheaterLayout:
        if not name or not name.strip():
            raise InvalidInputError('Theater name is required')
        self._validate_seats(seats)

        async with self.uow:
            if not await self.uow.catalog_query_repo.get_cinema(cinema_id=cinema_id):
                raise NotFoundError(f'Cinema {cinema_id} not found')

            theater = await self.uow.catalog_command_repo.create_theater(
                theater=Theater(cinema_id=cinema_id, name=name.strip())
            )
            cinema_seats = await self.uow.catalog_command_repo.create_cinema_seats(
                seats=[
                    CinemaSeat(theater_id=theater.id, seat_number=seat_number, seat_class=seat_class)
                    for seat_number, seat_class in seats
                ]
            )
            await self.uow.commit()

        Logger.base.info(
            f'🎬 [ADD-THEATER] Theater {theater.id} {theater.name!r} with {len(cinema_seats)} seats'
        )
        return TheaterLayout(theater=theater, seats=cinema_seats)
