"""
Operation Table

Single entry point for driving the cinema core by operation name. Each name
maps to a use-case provider of the dependency-injector Container; ``run``
builds a fresh use case (and with it a fresh unit of work) and awaits its
``execute`` with the given keyword arguments.

Usage:
    table = OperationTable()
    booking = await table.run(
        'create_booking', user_email='ann@example.com', show_id=1, cinema_seat_ids=[1, 2]
    )
"""

import inspect
from typing import Any, Dict, List, Optional

from src.platform.config.di import Container, container as default_container
from src.platform.exception.exceptions import InvalidInputError
from src.platform.logging.loguru_io import Logger


# operation name -> Container provider
OPERATIONS: Dict[str, str] = {
    # Catalog administration
    'register_user': 'register_user_use_case',
    'add_cinema': 'add_cinema_use_case',
    'add_theater': 'add_theater_use_case',
    'add_movie_showing': 'add_movie_showing_use_case',
    # Booking
    'create_booking': 'create_booking_use_case',
    # Lifecycle
    'swap_seat': 'swap_seat_use_case',
    'cancel_booking': 'cancel_booking_use_case',
    'cancel_all_pending': 'cancel_all_pending_bookings_use_case',
    'purge_cancelled': 'purge_cancelled_bookings_use_case',
    'remove_payment': 'remove_payment_use_case',
    'remove_shows_on_date_and_cinema': 'remove_shows_on_date_use_case',
    # Queries
    'list_free_seats': 'list_free_seats_use_case',
    'list_theaters_playing_show': 'list_theaters_playing_show_use_case',
    'list_shows_starting_at': 'list_shows_starting_at_use_case',
    'list_movie_titles': 'list_movie_titles_use_case',
    'list_users_with_pending_booking': 'list_users_with_pending_booking_use_case',
    'list_movie_shows_at_cinema': 'list_movie_shows_at_cinema_use_case',
    'list_user_booking_details': 'list_user_booking_details_use_case',
}


class OperationTable:
    def __init__(self, container: Optional[Container] = None) -> None:
        self.container = container or default_container

    def names(self) -> List[str]:
        return list(OPERATIONS)

    def _build_use_case(self, name: str) -> Any:
        provider_name = OPERATIONS.get(name)
        if provider_name is None:
            raise InvalidInputError(f'Unknown operation: {name!r}')
        return getattr(self.container, provider_name)()

    @Logger.io
    async def run(self, name: str, **kwargs: Any) -> Any:
        use_case = self._build_use_case(name)

        try:
            inspect.signature(use_case.execute).bind(**kwargs)
        except TypeError as e:
            raise InvalidInputError(f'Invalid arguments for {name}: {e}') from e

        Logger.base.info(f'▶️ [OPERATION] {name}')
        return await use_case.execute(**kwargs)
