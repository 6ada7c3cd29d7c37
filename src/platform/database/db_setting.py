"""
Database configuration

Re-exports the SQLAlchemy engine/session helpers from orm_db_setting.py.
"""

from src.platform.database.orm_db_setting import (
    AsyncEngineManager,
    Base,
    Database,
    build_async_engine,
    build_session_maker,
    create_db_and_tables,
    drop_db_and_tables,
)

__all__ = [
    'AsyncEngineManager',
    'Base',
    'Database',
    'build_async_engine',
    'build_session_maker',
    'create_db_and_tables',
    'drop_db_and_tables',
]
