"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.cinema.driven_adapter.model.booking_model import (
    BookingModel,
    PaymentModel,
    ShowSeatModel,
)
from src.service.cinema.driven_adapter.model.movie_model import MovieModel, PlayModel, ShowModel
from src.service.cinema.driven_adapter.model.theater_model import (
    CinemaModel,
    CinemaSeatModel,
    TheaterModel,
)
from src.service.cinema.driven_adapter.model.user_model import UserModel

__all__ = [
    'BookingModel',
    'CinemaModel',
    'CinemaSeatModel',
    'MovieModel',
    'PaymentModel',
    'PlayModel',
    'ShowModel',
    'ShowSeatModel',
    'TheaterModel',
    'UserModel',
]
