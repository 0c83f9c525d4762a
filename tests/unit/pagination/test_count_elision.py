"""
Tests for the count elision decision.

decide() is pure, so these tests need no database and no mocks.
"""

import pytest

from roster.storage.pagination.count_elision import (
    Known,
    NeedsCountQuery,
    decide,
)


class TestFirstPage:
    """Offset 0: a short page holds every match."""

    def test_short_first_page_is_known(self):
        assert decide(content_size=2, offset=0, limit=3) == Known(total=2)

    def test_empty_first_page_is_zero(self):
        assert decide(content_size=0, offset=0, limit=3) == Known(total=0)

    def test_full_first_page_needs_count(self):
        assert decide(content_size=3, offset=0, limit=3) == NeedsCountQuery()


class TestLaterPages:
    """Offset > 0: a short, non-empty page is the last page."""

    def test_short_last_page_is_offset_plus_size(self):
        assert decide(content_size=1, offset=3, limit=3) == Known(total=4)

    def test_full_middle_page_needs_count(self):
        assert decide(content_size=3, offset=3, limit=3) == NeedsCountQuery()

    def test_empty_page_past_end_needs_count(self):
        """The offset may overshoot the last match; it is not a total."""
        assert decide(content_size=0, offset=6, limit=3) == NeedsCountQuery()

    def test_empty_page_far_past_end_needs_count(self):
        assert decide(content_size=0, offset=9, limit=3) == NeedsCountQuery()


class TestBoundaries:
    """Exact page boundaries go through the same single rule."""

    @pytest.mark.parametrize(
        "content_size,offset,limit,expected",
        [
            (1, 0, 1, NeedsCountQuery()),
            (0, 0, 1, Known(total=0)),
            (4, 0, 5, Known(total=4)),
            (5, 0, 5, NeedsCountQuery()),
            (4, 5, 5, Known(total=9)),
            (5, 5, 5, NeedsCountQuery()),
            (0, 5, 5, NeedsCountQuery()),
        ],
    )
    def test_rule(self, content_size, offset, limit, expected):
        assert decide(content_size, offset, limit) == expected

    def test_first_page_is_offset_zero_case_of_last_page(self):
        """Both shortcuts reduce to total = offset + content_size."""
        for limit in range(1, 6):
            for size in range(1, limit):
                for offset in (0, limit, 3 * limit):
                    assert decide(size, offset, limit) == Known(
                        total=offset + size
                    )

    def test_decisions_are_values(self):
        assert Known(total=4) == Known(total=4)
        assert Known(total=4) != Known(total=5)
        assert NeedsCountQuery() == NeedsCountQuery()
