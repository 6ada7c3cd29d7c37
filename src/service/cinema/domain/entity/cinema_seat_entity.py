from typing import Optional

import attrs


@attrs.define(frozen=True)
class CinemaSeat:
    """Physical seat of a theater. Immutable once created."""

    theater_id: int
    seat_number: int
    seat_class: str
    id: Optional[int] = None
