"""
Test Configuration and Fixtures

This module provides:
- Early environment setup (log directory, booking policy) before app modules import settings
- A fresh SQLite database per test (aiosqlite, foreign keys on) with all tables created
- Unit of Work factory and a dependency-injector Container bound to that database

Architecture:
- Unit tests (test/**/unit/): AsyncMock repositories, no database
- Integration tests: real SQLAlchemy repositories against the per-test database
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks are built at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('DEPLOY_ENV', 'test')
    os.environ['DEFAULT_BOOKING_STATUS'] = 'paid'
    os.environ['DATABASE_URL_ASYNC'] = 'sqlite+aiosqlite:///:memory:'


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncGenerator, Callable, Generator  # noqa: E402

from dependency_injector import providers  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import Container  # noqa: E402
from src.platform.database.db_setting import Database  # noqa: E402
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork  # noqa: E402


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    # File database: every session of the test sees the same data
    return f'sqlite+aiosqlite:///{tmp_path / "cinema_test.db"}'


@pytest.fixture
async def database(database_url: str) -> AsyncGenerator[Database, None]:
    db = Database(url=database_url)
    await db.create_tables()
    yield db
    await db.dispose()


@pytest.fixture
def uow_factory(database: Database) -> Callable[[], SqlAlchemyUnitOfWork]:
    return lambda: SqlAlchemyUnitOfWork(database.session_maker)


@pytest.fixture
def test_container(database: Database) -> Generator[Container, None, None]:
    container = Container()
    container.database.override(providers.Object(database))
    yield container
    container.database.reset_override()
