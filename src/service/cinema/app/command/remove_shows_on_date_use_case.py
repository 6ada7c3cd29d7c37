from datetime import date
from typing import List

from opentelemetry import trace

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import InvalidInputError, NotFoundError
from src.platform.logging.loguru_io import Logger


class RemoveShowsOnDateUseCase:
    """
    Remove every show on a date in the theaters of one cinema

    Flow (single transaction for the whole batch):
    1. Resolve the cinema and lock the shows it plays on that date
    2. Cancel bookings referencing those shows and delete their payments
    3. Detach those bookings from the shows (the cancelled rows survive until purge)
    4. Delete ShowSeat rows, then Play rows, then the Show rows
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def execute(self, *, show_date: date, cinema_name: str) -> List[int]:
        if not cinema_name or not cinema_name.strip():
            raise InvalidInputError('Cinema name is required')

        with self.tracer.start_as_current_span(
            'use_case.remove_shows_on_date',
            attributes={'cinema.name': cinema_name, 'show.date': show_date.isoformat()},
        ) as span:
            async with self.uow:
                cinema = await self.uow.catalog_query_repo.get_cinema_by_name(name=cinema_name)
                if not cinema:
                    raise NotFoundError(f'Cinema {cinema_name!r} not found')

                show_ids = await self.uow.catalog_query_repo.list_show_ids_on_date_at_cinema(
                    show_date=show_date, cinema_name=cinema_name
                )
                span.set_attribute('show.count', len(show_ids))
                if not show_ids:
                    return []

                bookings = await self.uow.booking_command_repo.list_by_show_ids(show_ids=show_ids)
                booking_ids = [booking.id for booking in bookings]
                await self.uow.payment_repo.delete_by_booking_ids(booking_ids=booking_ids)
                cancelled_count = await self.uow.booking_command_repo.cancel_by_ids(
                    booking_ids=booking_ids
                )
                await self.uow.booking_command_repo.detach_from_shows(show_ids=show_ids)

                await self.uow.seat_inventory_repo.delete_by_show_ids(show_ids=show_ids)
                await self.uow.catalog_command_repo.delete_plays_by_show_ids(show_ids=show_ids)
                await self.uow.catalog_command_repo.delete_shows_by_ids(show_ids=show_ids)
                await self.uow.commit()

        Logger.base.info(
            f'🗑️ [REMOVE-SHOWS] {cinema_name} on {show_date}: removed shows {show_ids}, '
            f'{cancelled_count} booking(s) cancelled'
        )
        return show_ids
