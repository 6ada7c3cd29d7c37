from src.service.cinema.domain.entity.booking_entity import Booking
from src.service.cinema.domain.entity.cinema_seat_entity import CinemaSeat
from src.service.cinema.domain.entity.movie_entity import Movie, Show
from src.service.cinema.domain.entity.payment_entity import Payment
from src.service.cinema.domain.entity.show_seat_entity import ShowSeat
from src.service.cinema.domain.entity.theater_entity import Cinema, Theater
from src.service.cinema.domain.entity.user_entity import UserEntity

__all__ = [
    'Booking',
    'Cinema',
    'CinemaSeat',
    'Movie',
    'Payment',
    'Show',
    'ShowSeat',
    'Theater',
    'UserEntity',
]
