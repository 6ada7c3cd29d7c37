from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.db_setting import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BookingModel(Base):
    __tablename__ = 'booking'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_email: Mapped[str] = mapped_column(
        String(255), ForeignKey('user.email'), nullable=False, index=True
    )
    show_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey('show.id', ondelete='SET NULL'), nullable=True, index=True
    )
    seat_count: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )


class ShowSeatModel(Base):
    __tablename__ = 'show_seat'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    show_id: Mapped[int] = mapped_column(Integer, ForeignKey('show.id'), nullable=False)
    cinema_seat_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('cinema_seat.id'), nullable=False
    )
    booking_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('booking.id'), nullable=False, index=True
    )
    price: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint('show_id', 'cinema_seat_id', name='uq_show_seat'),
    )


class PaymentModel(Base):
    __tablename__ = 'payment'

    booking_id: Mapped[int] = mapped_column(Integer, ForeignKey('booking.id'), primary_key=True)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    paid_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
