"""
Tests for PageRequest, SortOrder and PageResult.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from roster.constants import MAX_PAGE_SIZE
from roster.exceptions import InvalidPageRequestError, ValidationError
from roster.schemas.page import (
    MetadataModel,
    PageRequest,
    PageResult,
    PaginatedResponseModel,
    SortOrder,
)
from tests.factories import create_member_dtos


class TestPageRequest:
    def test_of(self):
        page_request = PageRequest.of(3, 3)

        assert page_request.offset == 3
        assert page_request.limit == 3
        assert page_request.sort == ()

    @pytest.mark.parametrize("offset", [-1, -100])
    def test_negative_offset_rejected(self, offset):
        with pytest.raises(InvalidPageRequestError):
            PageRequest.of(offset, 3)

    @pytest.mark.parametrize("limit", [0, -1])
    def test_non_positive_limit_rejected(self, limit):
        with pytest.raises(InvalidPageRequestError):
            PageRequest.of(0, limit)

    def test_direct_construction_is_validated(self):
        with pytest.raises(InvalidPageRequestError):
            PageRequest(offset=-1, limit=3)

    def test_invalid_page_request_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            PageRequest.of(0, 0)

    def test_limit_is_capped(self):
        assert PageRequest.of(0, MAX_PAGE_SIZE + 1).limit == MAX_PAGE_SIZE

    def test_from_page_is_one_indexed(self):
        page_request = PageRequest.from_page(2, 3)

        assert page_request.offset == 3
        assert page_request.limit == 3

    @pytest.mark.parametrize("page,per_page", [(0, 3), (1, 0), (-1, 5)])
    def test_from_page_rejects_bad_values(self, page, per_page):
        with pytest.raises(InvalidPageRequestError):
            PageRequest.from_page(page, per_page)

    def test_unknown_sort_key_rejected(self):
        with pytest.raises(InvalidPageRequestError):
            PageRequest.of(0, 3, sort=(SortOrder(key="password"),))

    def test_is_immutable(self):
        page_request = PageRequest.of(0, 3)

        with pytest.raises(PydanticValidationError):
            page_request.offset = 5


class TestSortOrder:
    def test_parse_with_direction(self):
        assert SortOrder.parse("age,desc") == SortOrder(key="age", direction="desc")

    def test_parse_defaults_to_asc(self):
        assert SortOrder.parse("username").direction == "asc"

    def test_parse_rejects_unknown_direction(self):
        with pytest.raises(InvalidPageRequestError):
            SortOrder.parse("age,sideways")


class TestPageResult:
    def test_assemble_keeps_parts(self):
        content = create_member_dtos(3)
        page_request = PageRequest.of(0, 3)

        page = PageResult.assemble(content, page_request, 4)

        assert page.content == content
        assert page.total == 4
        assert page.page_request == page_request

    def test_first_of_two_pages(self):
        page = PageResult.assemble(create_member_dtos(3), PageRequest.of(0, 3), 4)

        assert page.page == 1
        assert page.pages == 2
        assert page.has_next is True
        assert page.has_previous is False
        assert page.is_first is True
        assert page.is_last is False

    def test_last_page(self):
        page = PageResult.assemble(
            create_member_dtos(1, start=4), PageRequest.of(3, 3), 4
        )

        assert page.page == 2
        assert page.has_next is False
        assert page.has_previous is True
        assert page.is_last is True

    def test_empty_result(self):
        page = PageResult.assemble([], PageRequest.of(0, 10), 0)

        assert page.pages == 0
        assert page.has_next is False

    def test_meta(self):
        page = PageResult.assemble(create_member_dtos(3), PageRequest.of(3, 3), 10)

        assert page.meta() == MetadataModel(
            page=2, per_page=3, total=10, pages=4, has_more=True
        )

    def test_paginated_response(self):
        page = PageResult.assemble(create_member_dtos(2), PageRequest.of(0, 5), 2)

        body = PaginatedResponseModel.from_page(page)

        assert body.items == page.content
        assert body.meta.total == 2
