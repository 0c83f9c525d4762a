"""
Protocol definition for pagination strategies.

Uses structural subtyping (Protocol) so any class with a matching
``paginate`` coroutine can be plugged into the repository.
"""

from typing import Protocol

from roster.schemas.page import PageRequest, PageResult
from roster.storage.executor import MemberQueryExecutor
from roster.storage.predicates import CompositeFilter


class PaginationStrategy(Protocol):
    """
    Protocol for pagination strategies.

    Strategies differ only in how they obtain the total; the content window
    is always the same filtered, joined, ordered statement.
    """

    async def paginate(
        self,
        executor: MemberQueryExecutor,
        composite: CompositeFilter,
        page_request: PageRequest,
    ) -> PageResult:
        """
        Fetch one page and its total.

        Args:
            executor: Executor bound to the caller's session.
            composite: Filter applied identically to content and count.
            page_request: Validated offset/limit window.

        Returns:
            PageResult with an exact total.

        Raises:
            StoreError: If any statement fails.
        """
        ...
