from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import roster.models  # noqa: F401  (registers tables on SQLModel.metadata)
from roster.logging import logger
from roster.settings import app_settings


def create_engine(url: str | None = None) -> AsyncEngine:
    """
    Create the async engine for the configured database.

    Args:
        url: Database URL. Defaults to app_settings.DATABASE_URL.
    """
    return create_async_engine(
        url or app_settings.DATABASE_URL,
        echo=app_settings.DB_ECHO,
        pool_pre_ping=app_settings.DB_POOL_PRE_PING,
    )


def create_session_factory(bind: AsyncEngine) -> sessionmaker:
    return sessionmaker(bind, expire_on_commit=False, class_=AsyncSession)


engine: AsyncEngine = create_engine()
async_session = create_session_factory(engine)


async def init_db(bind: AsyncEngine | None = None) -> None:
    """
    Create the member and team tables if they do not exist.

    Production schemas are expected to be managed outside the application;
    this keeps local runs and tests self-contained.
    """
    async with (bind or engine).begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Initialized database and tables")

