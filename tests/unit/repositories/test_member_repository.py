"""
Tests for MemberQueryRepository with a mocked session factory.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from roster.exceptions import InvalidPageRequestError, StoreError
from roster.repositories.member_repository import MemberQueryRepository
from roster.schemas.filters import MemberSearchCondition
from roster.schemas.page import PageRequest, PageResult
from roster.storage.pagination import CountStrategy
from tests.factories import create_member_dtos


@pytest.fixture
def session_factory(mock_db_session):
    """Session factory whose context manager yields the mock session."""
    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=mock_db_session)
    context.__aexit__ = AsyncMock(return_value=False)
    return MagicMock(return_value=context)


class TestSearch:
    @pytest.mark.asyncio
    async def test_opens_one_session_per_call(self, session_factory):
        repo = MemberQueryRepository(session_factory)

        with patch(
            "roster.repositories.member_repository.MemberQueryExecutor"
        ) as executor_class:
            executor_class.return_value.fetch_all = AsyncMock(
                return_value=create_member_dtos(4)
            )
            members = await repo.search(MemberSearchCondition())

        assert len(members) == 4
        session_factory.assert_called_once()
        session_factory.return_value.__aexit__.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_none_condition_means_no_filter(self, session_factory):
        repo = MemberQueryRepository(session_factory)

        with patch(
            "roster.repositories.member_repository.MemberQueryExecutor"
        ) as executor_class:
            executor_class.return_value.fetch_all = AsyncMock(return_value=[])
            await repo.search(None)

        composite = executor_class.return_value.fetch_all.call_args.args[0]
        assert composite.is_empty

    @pytest.mark.asyncio
    async def test_session_released_when_query_fails(self, session_factory):
        repo = MemberQueryRepository(session_factory)

        with patch(
            "roster.repositories.member_repository.MemberQueryExecutor"
        ) as executor_class:
            executor_class.return_value.fetch_all = AsyncMock(
                side_effect=StoreError("Member query failed: disk I/O error")
            )
            with pytest.raises(StoreError):
                await repo.search(MemberSearchCondition())

        context = session_factory.return_value
        context.__aexit__.assert_awaited_once()
        exc_type = context.__aexit__.call_args.args[0]
        assert exc_type is StoreError


class TestSearchPage:
    @pytest.mark.asyncio
    async def test_rejects_non_page_request(self, session_factory):
        repo = MemberQueryRepository(session_factory)

        with pytest.raises(InvalidPageRequestError):
            await repo.search_page(None, {"offset": 0, "limit": 3})

        session_factory.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_strategy_rejected_before_session(
        self, session_factory
    ):
        repo = MemberQueryRepository(session_factory)

        with pytest.raises(ValueError):
            await repo.search_page(None, PageRequest.of(0, 3), "bogus")

        session_factory.assert_not_called()

    @pytest.mark.asyncio
    async def test_delegates_to_selected_strategy(self, session_factory):
        repo = MemberQueryRepository(session_factory)
        page_request = PageRequest.of(0, 3)
        expected = PageResult.assemble(create_member_dtos(3), page_request, 4)
        strategy = MagicMock()
        strategy.paginate = AsyncMock(return_value=expected)

        with patch(
            "roster.repositories.member_repository.select_strategy",
            return_value=strategy,
        ) as select_mock:
            result = await repo.search_page(
                MemberSearchCondition(team_name="teamA"),
                page_request,
                CountStrategy.SPLIT,
            )

        assert result is expected
        select_mock.assert_called_once_with(CountStrategy.SPLIT)
        _, composite, passed_request = strategy.paginate.call_args.args
        assert composite.references_team is True
        assert passed_request is page_request

    @pytest.mark.asyncio
    async def test_session_released_when_paginate_fails(self, session_factory):
        repo = MemberQueryRepository(session_factory)
        strategy = MagicMock()
        strategy.paginate = AsyncMock(
            side_effect=StoreError("Member query failed: connection reset")
        )

        with patch(
            "roster.repositories.member_repository.select_strategy",
            return_value=strategy,
        ):
            with pytest.raises(StoreError):
                await repo.search_page(None, PageRequest.of(0, 3))

        session_factory.return_value.__aexit__.assert_awaited_once()
