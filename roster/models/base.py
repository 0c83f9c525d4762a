"""
Base model for all database tables with async relationship support.

Combines SQLModel with SQLAlchemy's AsyncAttrs mixin so lazy-loaded
attributes can be awaited instead of raising MissingGreenlet in async
sessions.
"""

from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlmodel import SQLModel


class BaseModel(SQLModel, AsyncAttrs):  # type: ignore[misc]
    """
    Base model for all database tables with async relationship support.

    Example:
        class Team(BaseModel, table=True):
            id: int | None = Field(default=None, primary_key=True)
            name: str
    """

    pass
