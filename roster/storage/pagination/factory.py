"""
Strategy factory for selecting how a page's total is obtained.
"""

from enum import Enum

from roster.storage.pagination.combined import CombinedCountStrategy
from roster.storage.pagination.elided import ElidedCountStrategy
from roster.storage.pagination.protocol import PaginationStrategy
from roster.storage.pagination.split import SplitCountStrategy


class CountStrategy(str, Enum):
    COMBINED = "combined"
    SPLIT = "split"
    ELIDED = "elided"


_STRATEGIES: dict[CountStrategy, type] = {
    CountStrategy.COMBINED: CombinedCountStrategy,
    CountStrategy.SPLIT: SplitCountStrategy,
    CountStrategy.ELIDED: ElidedCountStrategy,
}


def select_strategy(
    count_strategy: CountStrategy | str = CountStrategy.ELIDED,
) -> PaginationStrategy:
    """
    Select the pagination strategy for a count strategy name.

    Args:
        count_strategy: Enum member or its string value.

    Returns:
        A fresh strategy instance.

    Raises:
        ValueError: If the name is not a known strategy.

    Example:
        >>> select_strategy("split")
        <...SplitCountStrategy object at ...>
    """
    return _STRATEGIES[CountStrategy(count_strategy)]()
