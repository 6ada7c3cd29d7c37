"""
Seat Allocation Domain

Pure seat inventory rules - no database access.
"""

from typing import Iterable, List, Mapping, Sequence

from src.platform.exception.exceptions import (
    DomainError,
    InvalidInputError,
    NotFoundError,
    PolicyViolationError,
)
from src.service.cinema.domain.entity.cinema_seat_entity import CinemaSeat


def compute_free_seats(
    theater_seats: Iterable[CinemaSeat], taken_seat_ids: Iterable[int]
) -> List[CinemaSeat]:
    """All seats of the hosting theater minus the ones already assigned for the show."""
    taken = set(taken_seat_ids)
    return sorted((s for s in theater_seats if s.id not in taken), key=lambda s: s.id or 0)


def price_for_seat_class(seat_class: str, price_table: Mapping[str, int]) -> int:
    try:
        return price_table[seat_class]
    except KeyError:
        raise DomainError(f'No price configured for seat class {seat_class!r}', 500)


def lock_ordered_seat_ids(seat_ids: Sequence[int]) -> List[int]:
    """
    Seat ids in increasing order

    Allocating in a fixed order keeps two bookings that want overlapping
    seats of the same show from deadlocking on each other.
    """
    if not seat_ids:
        raise InvalidInputError('At least one seat must be requested')
    if len(set(seat_ids)) != len(seat_ids):
        raise InvalidInputError('The same seat was requested more than once')
    return sorted(seat_ids)


def ensure_seat_in_theater(seat: CinemaSeat, theater_id: int) -> None:
    if seat.theater_id != theater_id:
        raise NotFoundError(f'Seat {seat.id} does not exist in theater {theater_id}')


def ensure_same_seat_class(old_seat: CinemaSeat, new_seat: CinemaSeat) -> None:
    if old_seat.seat_class != new_seat.seat_class:
        raise PolicyViolationError(
            f'Seat exchange requires the same seat class '
            f'({old_seat.seat_class} -> {new_seat.seat_class})'
        )
