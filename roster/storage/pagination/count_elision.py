"""
Decide whether a page already determines the total match count.

A page shorter than its limit is the last page: every matching row up to
``offset + content_size`` has been seen and there is nothing after it. The
first-page shortcut (offset 0, short page) is the same rule with offset 0.
An empty page past the first one proves nothing: the offset may overshoot
the last match by any amount. That case and a full page both need a count
statement.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Known:
    """The total is determined by the page; no count statement needed."""

    total: int


@dataclass(frozen=True)
class NeedsCountQuery:
    """The page cannot settle the total; a count statement must."""


CountDecision = Known | NeedsCountQuery


def decide(content_size: int, offset: int, limit: int) -> CountDecision:
    """
    Derive the total from a fetched page when possible.

    Args:
        content_size: Number of rows the content statement returned.
        offset: Requested offset (>= 0).
        limit: Requested page size (>= 1).

    Returns:
        ``Known(offset + content_size)`` for a short page that is either the
        first page or holds at least one row, otherwise ``NeedsCountQuery()``.

    Example:
        >>> decide(content_size=1, offset=3, limit=3)
        Known(total=4)
        >>> decide(content_size=3, offset=0, limit=3)
        NeedsCountQuery()
        >>> decide(content_size=0, offset=9, limit=3)
        NeedsCountQuery()
    """
    if content_size < limit and (offset == 0 or content_size > 0):
        return Known(total=offset + content_size)
    return NeedsCountQuery()
