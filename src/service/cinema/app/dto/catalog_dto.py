from typing import List

import attrs

from src.service.cinema.domain.entity.cinema_seat_entity import CinemaSeat
from src.service.cinema.domain.entity.movie_entity import Movie, Show
from src.service.cinema.domain.entity.theater_entity import Theater


@attrs.define(frozen=True)
class TheaterLayout:
    theater: Theater
    seats: List[CinemaSeat]


@attrs.define(frozen=True)
class MovieShowing:
    movie: Movie
    show: Show
    theater_id: int
