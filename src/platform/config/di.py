"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.cinema.app.command.add_cinema_use_case import AddCinemaUseCase
from src.service.cinema.app.command.add_movie_showing_use_case import AddMovieShowingUseCase
from src.service.cinema.app.command.add_theater_use_case import AddTheaterUseCase
from src.service.cinema.app.command.cancel_all_pending_bookings_use_case import (
    CancelAllPendingBookingsUseCase,
)
from src.service.cinema.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.cinema.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.cinema.app.command.purge_cancelled_bookings_use_case import (
    PurgeCancelledBookingsUseCase,
)
from src.service.cinema.app.command.register_user_use_case import RegisterUserUseCase
from src.service.cinema.app.command.remove_payment_use_case import RemovePaymentUseCase
from src.service.cinema.app.command.remove_shows_on_date_use_case import (
    RemoveShowsOnDateUseCase,
)
from src.service.cinema.app.command.swap_seat_use_case import SwapSeatUseCase
from src.service.cinema.app.query.list_free_seats_use_case import ListFreeSeatsUseCase
from src.service.cinema.app.query.list_movie_shows_at_cinema_use_case import (
    ListMovieShowsAtCinemaUseCase,
)
from src.service.cinema.app.query.list_movie_titles_use_case import ListMovieTitlesUseCase
from src.service.cinema.app.query.list_shows_starting_at_use_case import (
    ListShowsStartingAtUseCase,
)
from src.service.cinema.app.query.list_theaters_playing_show_use_case import (
    ListTheatersPlayingShowUseCase,
)
from src.service.cinema.app.query.list_user_booking_details_use_case import (
    ListUserBookingDetailsUseCase,
)
from src.service.cinema.app.query.list_users_with_pending_booking_use_case import (
    ListUsersWithPendingBookingUseCase,
)
from src.service.cinema.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (uses AsyncEngineManager bound to the configured URL)
    database = providers.Singleton(Database, url=config_service.provided.DATABASE_URL_ASYNC)

    # Unit of Work (new instance per use case, new session per transaction)
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_factory=database.provided.session_maker
    )

    # Security
    password_hasher = providers.Singleton(BcryptPasswordHasher)

    # Catalog administration
    register_user_use_case = providers.Factory(
        RegisterUserUseCase, uow=unit_of_work, password_hasher=password_hasher
    )
    add_cinema_use_case = providers.Factory(AddCinemaUseCase, uow=unit_of_work)
    add_theater_use_case = providers.Factory(
        AddTheaterUseCase,
        uow=unit_of_work,
        seat_prices=config_service.provided.SEAT_CLASS_PRICES,
    )
    add_movie_showing_use_case = providers.Factory(AddMovieShowingUseCase, uow=unit_of_work)

    # Booking
    create_booking_use_case = providers.Factory(
        CreateBookingUseCase,
        uow=unit_of_work,
        seat_prices=config_service.provided.SEAT_CLASS_PRICES,
        default_status=config_service.provided.DEFAULT_BOOKING_STATUS,
    )

    # Lifecycle
    swap_seat_use_case = providers.Factory(SwapSeatUseCase, uow=unit_of_work)
    cancel_booking_use_case = providers.Factory(CancelBookingUseCase, uow=unit_of_work)
    cancel_all_pending_bookings_use_case = providers.Factory(
        CancelAllPendingBookingsUseCase, uow=unit_of_work
    )
    purge_cancelled_bookings_use_case = providers.Factory(
        PurgeCancelledBookingsUseCase, uow=unit_of_work
    )
    remove_payment_use_case = providers.Factory(RemovePaymentUseCase, uow=unit_of_work)
    remove_shows_on_date_use_case = providers.Factory(RemoveShowsOnDateUseCase, uow=unit_of_work)

    # Queries
    list_free_seats_use_case = providers.Factory(ListFreeSeatsUseCase, uow=unit_of_work)
    list_theaters_playing_show_use_case = providers.Factory(
        ListTheatersPlayingShowUseCase, uow=unit_of_work
    )
    list_shows_starting_at_use_case = providers.Factory(
        ListShowsStartingAtUseCase, uow=unit_of_work
    )
    list_movie_titles_use_case = providers.Factory(ListMovieTitlesUseCase, uow=unit_of_work)
    list_users_with_pending_booking_use_case = providers.Factory(
        ListUsersWithPendingBookingUseCase, uow=unit_of_work
    )
    list_movie_shows_at_cinema_use_case = providers.Factory(
        ListMovieShowsAtCinemaUseCase, uow=unit_of_work
    )
    list_user_booking_details_use_case = providers.Factory(
        ListUserBookingDetailsUseCase, uow=unit_of_work
    )


container = Container()


def setup() -> None:
    container.config_service()


async def cleanup() -> None:
    await container.database().dispose()
    container.reset_singletons()
