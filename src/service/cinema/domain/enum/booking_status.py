from enum import StrEnum


class BookingStatus(StrEnum):
    PENDING = 'pending'
    PAID = 'paid'
    CANCELLED = 'cancelled'
