"""
Split count strategy.

Runs the content statement and a separate, slimmer count statement. The
count drops the projection, ordering and (unless the filter needs it) the
team join.
"""

from roster.logging import logger
from roster.schemas.page import PageRequest, PageResult
from roster.storage.executor import MemberQueryExecutor
from roster.storage.predicates import CompositeFilter


class SplitCountStrategy:
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
        total = await executor.fetch_count(composite)
        logger.debug(f"Split fetch returned {len(content)} of {total}")
        return PageResult.assemble(content, page_request, total)
