"""
Member search endpoints.

- ``GET /v1/members``: every matching member, unpaged.
- ``GET /v2/members``: one page, total obtained with count elision.
- ``GET /v3/members``: one page, count strategy chosen by the caller.

Filters are passed as query parameters: ``username``, ``teamName``,
``ageGoe``, ``ageLoe``. Blank strings behave like missing parameters.

Example:
    GET /v1/members?teamName=teamB&ageGoe=35
    GET /v2/members?page=2&per_page=3&sort=age,desc
    GET /v3/members?page=1&per_page=3&strategy=split
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from roster.dependencies import MemberRepoDep
from roster.schemas.filters import MemberSearchCondition
from roster.schemas.member import MemberTeamDto
from roster.schemas.page import PageRequest, PaginatedResponseModel, SortOrder
from roster.settings import app_settings
from roster.storage.pagination import CountStrategy
from roster.utils.error_handler import handle_http_errors

router = APIRouter(tags=["members"])


def search_condition(
    username: str | None = None,
    team_name: Annotated[str | None, Query(alias="teamName")] = None,
    age_goe: Annotated[int | None, Query(alias="ageGoe")] = None,
    age_loe: Annotated[int | None, Query(alias="ageLoe")] = None,
) -> MemberSearchCondition:
    return MemberSearchCondition(
        username=username,
        team_name=team_name,
        age_goe=age_goe,
        age_loe=age_loe,
    )


ConditionDep = Annotated[MemberSearchCondition, Depends(search_condition)]


def _page_request(
    page: int, per_page: int | None, sort: list[str] | None
) -> PageRequest:
    orders = tuple(SortOrder.parse(raw) for raw in sort or ())
    return PageRequest.from_page(
        page,
        per_page if per_page is not None else app_settings.DEFAULT_PAGE_SIZE,
        sort=orders,
    )


@router.get(
    "/v1/members",
    response_model=list[MemberTeamDto],
    summary="Search members",
)
@handle_http_errors
async def search_members(
    condition: ConditionDep, repo: MemberRepoDep
) -> list[MemberTeamDto]:
    return await repo.search(condition)


@router.get(
    "/v2/members",
    response_model=PaginatedResponseModel[MemberTeamDto],
    summary="Search members, paginated",
)
@handle_http_errors
async def search_members_page(
    condition: ConditionDep,
    repo: MemberRepoDep,
    page: int = 1,
    per_page: int | None = None,
    sort: Annotated[list[str] | None, Query()] = None,
) -> PaginatedResponseModel[MemberTeamDto]:
    """
    Return one page of members. The count statement is skipped whenever
    the page itself determines the total.
    """
    page_request = _page_request(page, per_page, sort)
    result = await repo.search_page(condition, page_request)
    return PaginatedResponseModel[MemberTeamDto].from_page(result)


@router.get(
    "/v3/members",
    response_model=PaginatedResponseModel[MemberTeamDto],
    summary="Search members, paginated with an explicit count strategy",
)
@handle_http_errors
async def search_members_page_with_strategy(
    condition: ConditionDep,
    repo: MemberRepoDep,
    page: int = 1,
    per_page: int | None = None,
    sort: Annotated[list[str] | None, Query()] = None,
    strategy: CountStrategy = CountStrategy.ELIDED,
) -> PaginatedResponseModel[MemberTeamDto]:
    page_request = _page_request(page, per_page, sort)
    result = await repo.search_page(condition, page_request, strategy)
    return PaginatedResponseModel[MemberTeamDto].from_page(result)
