"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for the in-memory database, seeded
sample data and mocked query executors.
"""

import os
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

# Set environment for testing before importing roster modules
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FILE_PATH", os.devnull)
os.environ.setdefault("LOG_LEVEL", "DEBUG")


@pytest_asyncio.fixture
async def db_engine():
    """
    Provides an in-memory SQLite engine with the tables created.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.

    Yields:
        AsyncEngine: Engine bound to a fresh database
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool

    from roster.storage.db import init_db

    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    """
    Provides a session factory bound to the test engine.

    Returns:
        sessionmaker: Factory producing AsyncSession instances
    """
    from roster.storage.db import create_session_factory

    return create_session_factory(db_engine)


@pytest_asyncio.fixture
async def seeded_session_factory(session_factory):
    """
    Provides a session factory over a database holding the sample data.

    teamA: member1 (10), member2 (20); teamB: member3 (30), member4 (40).
    """
    from roster.storage.seed import seed_sample_data

    async with session_factory() as session:
        await seed_sample_data(session)
        await session.commit()
    return session_factory


@pytest.fixture
def statement_log(db_engine):
    """
    Records every SQL statement sent through the test engine.

    Returns:
        list[str]: Lower-cased statements in execution order
    """
    from sqlalchemy import event

    statements: list[str] = []

    def before_cursor_execute(conn, cursor, statement, *args):
        statements.append(statement.lower())

    event.listen(
        db_engine.sync_engine, "before_cursor_execute", before_cursor_execute
    )
    yield statements
    event.remove(
        db_engine.sync_engine, "before_cursor_execute", before_cursor_execute
    )


@pytest.fixture
def mock_db_session():
    """
    Provides a mock database session for testing.

    Returns:
        AsyncMock: Mock AsyncSession instance
    """
    from sqlmodel.ext.asyncio.session import AsyncSession

    session = AsyncMock(spec=AsyncSession)
    session.exec = AsyncMock()
    return session


@pytest.fixture
def mock_executor():
    """
    Provides a mock MemberQueryExecutor.

    Returns:
        AsyncMock: Executor with fetch_window/fetch_count/fetch_results stubs
    """
    from roster.storage.executor import MemberQueryExecutor

    executor = AsyncMock(spec=MemberQueryExecutor)
    executor.fetch_all = AsyncMock(return_value=[])
    executor.fetch_window = AsyncMock(return_value=[])
    executor.fetch_count = AsyncMock(return_value=0)
    executor.fetch_results = AsyncMock(return_value=([], 0))
    return executor
