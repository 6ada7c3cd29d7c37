from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.db_setting import Base


class CinemaModel(Base):
    __tablename__ = 'cinema'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)


class TheaterModel(Base):
    __tablename__ = 'theater'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cinema_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('cinema.id'), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)


class CinemaSeatModel(Base):
    __tablename__ = 'cinema_seat'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    theater_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('theater.id'), nullable=False, index=True
    )
    seat_number: Mapped[int] = mapped_column(Integer, nullable=False)
    seat_class: Mapped[str] = mapped_column(String(20), nullable=False)

    __table_args__ = (
        UniqueConstraint('theater_id', 'seat_number', name='uq_cinema_seat_number'),
    )
