from typing import Optional

import attrs


@attrs.define
class ShowSeat:
    """Assignment of one CinemaSeat to one Booking for one Show."""

    show_id: int
    cinema_seat_id: int
    booking_id: int
    price: int
    id: Optional[int] = None
