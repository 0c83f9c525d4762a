"""
Pagination strategies for member queries.

Each strategy returns the same content window and differs only in how the
total is obtained:

- ``CombinedCountStrategy``: content and count in one executor call
  (two statements).
- ``SplitCountStrategy``: content statement, then a slimmer count statement.
- ``ElidedCountStrategy``: content first; count only when the page cannot
  settle the total.

Example:
    ```python
    from roster.storage.pagination import CountStrategy, select_strategy

    strategy = select_strategy(CountStrategy.ELIDED)
    page = await strategy.paginate(executor, composite, page_request)
    ```
"""

from roster.storage.pagination.combined import CombinedCountStrategy
from roster.storage.pagination.count_elision import (
    CountDecision,
    Known,
    NeedsCountQuery,
    decide,
)
from roster.storage.pagination.elided import ElidedCountStrategy
from roster.storage.pagination.factory import CountStrategy, select_strategy
from roster.storage.pagination.protocol import PaginationStrategy
from roster.storage.pagination.split import SplitCountStrategy

__all__ = [
    "CombinedCountStrategy",
    "CountDecision",
    "CountStrategy",
    "ElidedCountStrategy",
    "Known",
    "NeedsCountQuery",
    "PaginationStrategy",
    "SplitCountStrategy",
    "decide",
    "select_strategy",
]
