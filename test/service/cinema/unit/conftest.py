"""
Unit test configuration for the cinema service.

Provides a Unit of Work double with AsyncMock repositories so use cases can be
tested without a database.
"""

from typing import Any
from unittest.mock import AsyncMock

import pytest


class UnitOfWorkMock:
    """
    Unit of Work test double

    Each repository is an AsyncMock; configure return values per test.
    This is NOT a fake database - nothing is stored.

    Example:
        ```python
        uow_mock.booking_command_repo.get_by_id.return_value = booking
        use_case = CancelBookingUseCase(uow=uow_mock)
        await use_case.execute(booking_id=1)
        uow_mock.commit.assert_awaited_once()
        ```
    """

    def __init__(self) -> None:
        self.user_repo = AsyncMock()
        self.catalog_query_repo = AsyncMock()
        self.catalog_command_repo = AsyncMock()
        self.seat_inventory_repo = AsyncMock()
        self.booking_command_repo = AsyncMock()
        self.payment_repo = AsyncMock()
        self.report_query_repo = AsyncMock()
        self.commit = AsyncMock()
        self.exited_with: list[Any] = []

    async def __aenter__(self) -> 'UnitOfWorkMock':
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.exited_with.append(exc_type)


@pytest.fixture
def uow_mock() -> UnitOfWorkMock:
    return UnitOfWorkMock()
