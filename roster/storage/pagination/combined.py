"""
Combined count strategy.

Asks the executor for content and total in one call. Simple, but it always
costs two statements even when the page alone would settle the total.
"""

from roster.logging import logger
from roster.schemas.page import PageRequest, PageResult
from roster.storage.executor import MemberQueryExecutor
from roster.storage.predicates import CompositeFilter


class CombinedCountStrategy:
    async def paginate(
        self,
        executor: MemberQueryExecutor,
        composite: CompositeFilter,
        page_request: PageRequest,
    ) -> PageResult:
        content, total = await executor.fetch_results(
            composite,
            page_request.offset,
            page_request.limit,
            page_request.sort,
        )
        logger.debug(f"Combined fetch returned {len(content)} of {total}")
        return PageResult.assemble(content, page_request, total)
