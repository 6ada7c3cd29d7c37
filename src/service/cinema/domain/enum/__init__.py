from src.service.cinema.domain.enum.booking_status import BookingStatus

__all__ = ['BookingStatus']
