"""
Unit of Work Pattern - one database transaction shared by every repository

Architecture:
- UoW owns the session lifecycle (opened on enter, closed on exit)
- UoW owns commit/rollback; leaving the block without commit rolls back
- Repositories receive the UoW's session
- Use cases receive a UoW and coordinate repositories inside it
- SQLAlchemy failures (deadlock, serialization failure, lost connection) surface
  as StorageFailureError after the transaction has been rolled back
"""

from __future__ import annotations

import abc
from types import TracebackType
from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.platform.exception.exceptions import StorageFailureError
from src.platform.logging.loguru_io import Logger


if TYPE_CHECKING:
    from src.service.cinema.app.interface.i_booking_command_repo import IBookingCommandRepo
    from src.service.cinema.app.interface.i_catalog_command_repo import ICatalogCommandRepo
    from src.service.cinema.app.interface.i_catalog_query_repo import ICatalogQueryRepo
    from src.service.cinema.app.interface.i_payment_repo import IPaymentRepo
    from src.service.cinema.app.interface.i_report_query_repo import IReportQueryRepo
    from src.service.cinema.app.interface.i_seat_inventory_repo import ISeatInventoryRepo
    from src.service.cinema.app.interface.i_user_repo import IUserRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the cinema booking core

    Usage:
        async with uow:
            booking = await uow.booking_command_repo.create(...)
            await uow.commit()
    """

    user_repo: IUserRepo
    catalog_query_repo: ICatalogQueryRepo
    catalog_command_repo: ICatalogCommandRepo
    seat_inventory_repo: ISeatInventoryRepo
    booking_command_repo: IBookingCommandRepo
    payment_repo: IPaymentRepo
    report_query_repo: IReportQueryRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    A fresh session is opened every time the UoW is entered, so one instance can
    run several consecutive transactions (never two at once).
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        from src.service.cinema.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
        )
        from src.service.cinema.driven_adapter.repo.catalog_command_repo_impl import (
            CatalogCommandRepoImpl,
        )
        from src.service.cinema.driven_adapter.repo.catalog_query_repo_impl import (
            CatalogQueryRepoImpl,
        )
        from src.service.cinema.driven_adapter.repo.payment_repo_impl import PaymentRepoImpl
        from src.service.cinema.driven_adapter.repo.report_query_repo_impl import (
            ReportQueryRepoImpl,
        )
        from src.service.cinema.driven_adapter.repo.seat_inventory_repo_impl import (
            SeatInventoryRepoImpl,
        )
        from src.service.cinema.driven_adapter.repo.user_repo_impl import UserRepoImpl

        if self.session is not None:
            raise RuntimeError('Unit of work is already active')

        self.session = self.session_factory()

        # Create repositories with shared session
        self.user_repo = UserRepoImpl(self.session)
        self.catalog_query_repo = CatalogQueryRepoImpl(self.session)
        self.catalog_command_repo = CatalogCommandRepoImpl(self.session)
        self.seat_inventory_repo = SeatInventoryRepoImpl(self.session)
        self.booking_command_repo = BookingCommandRepoImpl(self.session)
        self.payment_repo = PaymentRepoImpl(self.session)
        self.report_query_repo = ReportQueryRepoImpl(self.session)

        await super().__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            await super().__aexit__(exc_type, exc, tb)
        finally:
            if self.session is not None:
                await self.session.close()
            self.session = None

        if isinstance(exc, SQLAlchemyError):
            Logger.base.error(f'🧯 [UOW] Transaction rolled back: {type(exc).__name__}')
            raise StorageFailureError(f'Storage failure: {exc}') from exc

    async def _commit(self) -> None:
        assert self.session is not None, 'commit() called outside of the unit of work'
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StorageFailureError(f'Commit failed: {e}') from e

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
