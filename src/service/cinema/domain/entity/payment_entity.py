from datetime import datetime
from typing import Optional

import attrs


@attrs.define
class Payment:
    booking_id: int
    amount: int  # cents
    paid_at: Optional[datetime] = None
