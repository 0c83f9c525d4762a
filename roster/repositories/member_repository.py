"""
Query repository for member searches.

Specialised, read-only lookups live here rather than on a generic CRUD
repository. The repository holds only a session factory, so one instance can
be shared by concurrent callers; each call opens and closes its own session.

Example:
    ```python
    from roster.repositories.member_repository import MemberQueryRepository
    from roster.schemas.filters import MemberSearchCondition
    from roster.schemas.page import PageRequest

    repo = MemberQueryRepository()
    members = await repo.search(MemberSearchCondition(age_goe=25))
    page = await repo.search_page(
        MemberSearchCondition(team_name="teamB"), PageRequest.of(0, 20)
    )
    ```
"""

from sqlalchemy.orm import sessionmaker

from roster.exceptions import InvalidPageRequestError
from roster.schemas.filters import MemberSearchCondition
from roster.schemas.member import MemberTeamDto
from roster.schemas.page import PageRequest, PageResult, SortOrder
from roster.storage.executor import MemberQueryExecutor
from roster.storage.pagination import CountStrategy, select_strategy
from roster.storage.predicates import compose


class MemberQueryRepository:
    """
    Member/team search with dynamic filters and count-elided paging.

    Attributes:
        session_factory: Callable returning a new AsyncSession context.
    """

    def __init__(self, session_factory: sessionmaker | None = None):
        """
        Initialize the repository.

        Args:
            session_factory: Session factory; defaults to the application's
                ``roster.storage.db.async_session``.
        """
        if session_factory is None:
            from roster.storage.db import async_session

            session_factory = async_session
        self.session_factory = session_factory

    async def search(
        self,
        condition: MemberSearchCondition | None = None,
        sort: tuple[SortOrder, ...] = (),
    ) -> list[MemberTeamDto]:
        """
        Return every member matching the condition, unpaged.

        Args:
            condition: Optional criteria; absent fields do not filter.
            sort: Optional ordering; member id is always the tiebreaker.

        Returns:
            Projected members in a deterministic order.

        Raises:
            StoreError: If the statement fails.
        """
        composite = compose(condition)
        async with self.session_factory() as session:
            return await MemberQueryExecutor(session).fetch_all(composite, sort)

    async def search_page(
        self,
        condition: MemberSearchCondition | None,
        page_request: PageRequest,
        count_strategy: CountStrategy | str = CountStrategy.ELIDED,
    ) -> PageResult:
        """
        Return one page of matching members plus the exact total.

        Args:
            condition: Optional criteria; absent fields do not filter.
            page_request: Offset/limit window (and optional sort).
            count_strategy: How the total is obtained. ELIDED skips the count
                statement whenever the page itself determines the total.

        Returns:
            PageResult with content, total and the original page request.

        Raises:
            InvalidPageRequestError: If page_request is not a PageRequest.
            ValueError: If count_strategy is unknown.
            StoreError: If a statement fails.
        """
        if not isinstance(page_request, PageRequest):
            raise InvalidPageRequestError(
                f"Expected PageRequest, got {type(page_request).__name__}"
            )

        strategy = select_strategy(count_strategy)
        composite = compose(condition)
        async with self.session_factory() as session:
            executor = MemberQueryExecutor(session)
            return await strategy.paginate(executor, composite, page_request)
