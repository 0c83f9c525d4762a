"""
Query executor for projected member/team lookups.

Each public coroutine sends exactly one statement to the session, except
``fetch_results`` which deliberately sends two (count, then content) behind
one call. Nothing is cached or retried: driver failures surface as
``StoreError`` with the original exception chained.
"""

from typing import Any

from sqlalchemy import Executable, Row
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from roster.exceptions import StoreError
from roster.schemas.member import MemberTeamDto
from roster.schemas.page import SortOrder
from roster.storage.predicates import CompositeFilter
from roster.storage.query_builder import build_content_query, build_count_query


def to_dto(row: Row[Any]) -> MemberTeamDto:
    return MemberTeamDto(**row._mapping)


class MemberQueryExecutor:
    """
    Runs filtered, joined, projected member statements on one session.

    The executor never opens or closes the session; its owner scopes it.

    Example:
        ```python
        async with async_session() as session:
            executor = MemberQueryExecutor(session)
            rows = await executor.fetch_window(compose(condition), 0, 20)
        ```
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _exec(self, statement: Executable) -> Any:
        try:
            return await self.session.exec(statement)
        except SQLAlchemyError as ex:
            raise StoreError(f"Member query failed: {ex}") from ex

    async def fetch_all(
        self, composite: CompositeFilter, sort: tuple[SortOrder, ...] = ()
    ) -> list[MemberTeamDto]:
        """Return every matching row, unpaged."""
        result = await self._exec(build_content_query(composite, sort))
        return [to_dto(row) for row in result.all()]

    async def fetch_window(
        self,
        composite: CompositeFilter,
        offset: int,
        limit: int,
        sort: tuple[SortOrder, ...] = (),
    ) -> list[MemberTeamDto]:
        """Return up to ``limit`` matching rows starting at ``offset``."""
        query = build_content_query(composite, sort).offset(offset).limit(limit)
        result = await self._exec(query)
        return [to_dto(row) for row in result.all()]

    async def fetch_count(self, composite: CompositeFilter) -> int:
        """Return the number of members matching the filter."""
        result = await self._exec(build_count_query(composite))
        return int(result.one())

    async def fetch_results(
        self,
        composite: CompositeFilter,
        offset: int,
        limit: int,
        sort: tuple[SortOrder, ...] = (),
    ) -> tuple[list[MemberTeamDto], int]:
        """
        Return one page together with the total match count.

        One logical call, two physical statements. An empty count skips the
        content statement.
        """
        total = await self.fetch_count(composite)
        if total == 0:
            return [], 0
        content = await self.fetch_window(composite, offset, limit, sort)
        return content, total
