"""
Count-elided strategy (default).

Fetches the content first and sends the count statement only when the page
is full, or empty beyond the first page. Small result sets and last pages
cost a single round-trip; the total is exact in every case.
"""

from roster.logging import logger
from roster.schemas.page import PageRequest, PageResult
from roster.storage.executor import MemberQueryExecutor
from roster.storage.pagination.count_elision import Known, decide
from roster.storage.predicates import CompositeFilter


class ElidedCountStrategy:
    """
    Content-first pagination with count elision.

    Example:
        ```python
        strategy = ElidedCountStrategy()
        page = await strategy.paginate(
            executor, compose(condition), PageRequest.of(3, 3)
        )
        # 1 row on the last page -> total 4, no count statement
        ```
    """

    async def paginate(
        self,
        executor: MemberQueryExecutor,
        composite: CompositeFilter,
        page_request: PageRequest,
    ) -> PageResult:
        content = await executor.fetch_window(
            composite,
            page_request.offset,
            page_request.limit,
            page_request.sort,
        )

        decision = decide(len(content), page_request.offset, page_request.limit)
        if isinstance(decision, Known):
            logger.debug(
                f"Count elided at offset {page_request.offset}: "
                f"total={decision.total}"
            )
            total = decision.total
        else:
            total = await executor.fetch_count(composite)

        return PageResult.assemble(content, page_request, total)
