from typing import TYPE_CHECKING, List, Optional


if TYPE_CHECKING:
    from src.service.cinema.domain.entity.cinema_seat_entity import CinemaSeat


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class InvalidInputError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class PolicyViolationError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 422)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class SeatConflictError(ConflictError):
    """Seat already assigned for the show. ``free_seats`` is the inventory seen after the clash."""

    def __init__(
        self,
        *,
        show_id: int,
        cinema_seat_id: int,
        free_seats: Optional[List['CinemaSeat']] = None,
    ) -> None:
        self.show_id = show_id
        self.cinema_seat_id = cinema_seat_id
        self.free_seats: List['CinemaSeat'] = free_seats or []
        super().__init__(f'Seat {cinema_seat_id} is already booked for show {show_id}')


class StorageFailureError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 503)
