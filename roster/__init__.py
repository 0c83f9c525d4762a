# Uvicorn application factory <https://www.uvicorn.org/#application-factories>
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from roster.logging import logger
from roster.middlewares.correlation_id import CorrelationIDMiddleware
from roster.routing import collect_subrouters


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application startup and shutdown.

    Creates the tables on startup and disposes of the engine's connection
    pool on shutdown.
    """
    from roster.storage.db import engine, init_db

    logger.info("Application startup initiated")
    await init_db()
    yield
    logger.info("Application shutdown initiated")
    await engine.dispose()
    logger.info("Application shutdown complete")


def application() -> FastAPI:
    """
    Initializes and configures the FastAPI application.

    Routers are collected from ``roster/api/http`` and every request gets a
    correlation ID for log tracing.
    """
    app = FastAPI(
        title="Roster member search",
        description="Filtered, paginated member/team lookups",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(collect_subrouters())
    app.add_middleware(CorrelationIDMiddleware)

    return app
