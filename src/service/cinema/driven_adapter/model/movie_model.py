from datetime import date, time

from sqlalchemy import Date, ForeignKey, Integer, String, Text, Time
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.db_setting import Base


class MovieModel(Base):
    __tablename__ = 'movie'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    release_date: Mapped[date] = mapped_column(Date, nullable=False)
    country: Mapped[str] = mapped_column(String(64), nullable=False, default='')
    description: Mapped[str] = mapped_column(Text, nullable=False, default='')
    duration: Mapped[int] = mapped_column(Integer, nullable=False)  # seconds
    language: Mapped[str] = mapped_column(String(2), nullable=False)
    genre: Mapped[str] = mapped_column(String(32), nullable=False)


class ShowModel(Base):
    __tablename__ = 'show'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    movie_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('movie.id'), nullable=False, index=True
    )
    show_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    end_time: Mapped[time] = mapped_column(Time, nullable=False)


class PlayModel(Base):
    """One row per show: the theater the show screens in."""

    __tablename__ = 'play'

    show_id: Mapped[int] = mapped_column(Integer, ForeignKey('show.id'), primary_key=True)
    theater_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('theater.id'), nullable=False, index=True
    )
