from typing import Optional

import attrs


@attrs.define
class Cinema:
    name: str
    id: Optional[int] = None


@attrs.define
class Theater:
    cinema_id: int
    name: str
    id: Optional[int] = None
