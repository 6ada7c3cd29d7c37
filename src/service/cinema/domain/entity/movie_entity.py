from datetime import date, datetime, time
from typing import Optional

import attrs

from src.platform.exception.exceptions import InvalidInputError
from src.platform.logging.loguru_io import Logger


@attrs.define
class Movie:
    title: str
    release_date: date
    duration: int  # seconds
    language: str
    genre: str
    country: str = ''
    description: str = ''
    id: Optional[int] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        title: str,
        release_date: date,
        duration: int,
        language: str,
        genre: str,
        country: str = '',
        description: str = '',
    ) -> 'Movie':
        if not title or not title.strip():
            raise InvalidInputError('Movie title is required')
        if duration <= 0:
            raise InvalidInputError('Movie duration must be positive')
        if not language or len(language.strip()) != 2:
            raise InvalidInputError('Language must be a 2 letter abbreviation')
        return cls(
            title=title.strip(),
            release_date=release_date,
            duration=duration,
            language=language.strip().lower(),
            genre=genre.strip(),
            country=country.strip(),
            description=description.strip(),
        )


@attrs.define
class Show:
    movie_id: int
    show_date: date
    start_time: time
    end_time: time
    id: Optional[int] = None

    @classmethod
    @Logger.io
    def create(cls, *, movie_id: int, show_date: date, start_time: time, end_time: time) -> 'Show':
        if end_time <= start_time:
            raise InvalidInputError('Show end time must be after its start time')
        return cls(movie_id=movie_id, show_date=show_date, start_time=start_time, end_time=end_time)

    @property
    def starts_at(self) -> datetime:
        return datetime.combine(self.show_date, self.start_time)
