"""
Page request and page result values.

``PageRequest`` is validated on construction so a malformed window never
reaches the database. ``PageResult`` only assembles parts computed elsewhere;
it never queries.
"""

import math
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from typing_extensions import Annotated

from roster.constants import MAX_PAGE_SIZE, SORTABLE_FIELDS
from roster.exceptions import InvalidPageRequestError
from roster.schemas.member import MemberTeamDto

T = TypeVar("T")


class SortOrder(BaseModel):  # type: ignore[misc]
    model_config = ConfigDict(frozen=True)

    key: str
    direction: Literal["asc", "desc"] = "asc"

    @classmethod
    def parse(cls, raw: str) -> "SortOrder":
        """
        Parse a ``key[,direction]`` expression.

        Example:
            >>> SortOrder.parse("age,desc")
            SortOrder(key='age', direction='desc')
        """
        name, _, direction = raw.partition(",")
        direction = direction.strip().lower() or "asc"
        if direction not in ("asc", "desc"):
            raise InvalidPageRequestError(
                f"Invalid sort direction '{direction}' for '{name}'"
            )
        return cls(key=name.strip(), direction=direction)


class PageRequest(BaseModel):  # type: ignore[misc]
    """
    An offset/limit window over an ordered result.

    Raises:
        InvalidPageRequestError: On a negative offset, a non-positive limit
            or a sort field outside the whitelist.
    """

    model_config = ConfigDict(frozen=True)

    offset: Annotated[int, Field(ge=0)] = 0
    limit: Annotated[int, Field(ge=1)]
    sort: tuple[SortOrder, ...] = ()

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except PydanticValidationError as ex:
            raise InvalidPageRequestError(
                f"Invalid page request: {ex.errors()[0]['msg']}"
            ) from ex

    @field_validator("sort")
    @classmethod
    def validate_sort(cls, v: tuple[SortOrder, ...]) -> tuple[SortOrder, ...]:
        for order in v:
            if order.key not in SORTABLE_FIELDS:
                raise ValueError(f"cannot sort by '{order.key}'")
        return v

    @classmethod
    def of(
        cls, offset: int, limit: int, sort: tuple[SortOrder, ...] = ()
    ) -> "PageRequest":
        """
        Build a page request from a raw offset and limit.

        Limits above MAX_PAGE_SIZE are capped rather than rejected.
        """
        return cls(offset=offset, limit=min(limit, MAX_PAGE_SIZE), sort=sort)

    @classmethod
    def from_page(
        cls, page: int, per_page: int, sort: tuple[SortOrder, ...] = ()
    ) -> "PageRequest":
        """
        Build a page request from a 1-indexed page number.

        Example:
            >>> PageRequest.from_page(2, 3).offset
            3
        """
        if page < 1:
            raise InvalidPageRequestError(
                f"Invalid page request: page must be >= 1, got {page}"
            )
        if per_page < 1:
            raise InvalidPageRequestError(
                f"Invalid page request: per_page must be >= 1, got {per_page}"
            )
        per_page = min(per_page, MAX_PAGE_SIZE)
        return cls(offset=(page - 1) * per_page, limit=per_page, sort=sort)


class MetadataModel(BaseModel):  # type: ignore[misc]
    page: Annotated[int, Field(ge=1)]
    per_page: Annotated[int, Field(ge=1)]
    total: Annotated[int, Field(ge=0)]
    pages: Annotated[int, Field(ge=0)]
    has_more: bool = False


class PageResult(BaseModel):  # type: ignore[misc]
    """
    One page of projected members plus the total match count.

    The total is exact whether it came from a count statement or was derived
    from the page itself.
    """

    model_config = ConfigDict(frozen=True)

    content: list[MemberTeamDto]
    total: Annotated[int, Field(ge=0)]
    page_request: PageRequest

    @classmethod
    def assemble(
        cls,
        content: list[MemberTeamDto],
        page_request: PageRequest,
        total: int,
    ) -> "PageResult":
        return cls(content=list(content), total=total, page_request=page_request)

    @property
    def page(self) -> int:
        """1-indexed page number of this window."""
        return self.page_request.offset // self.page_request.limit + 1

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.page_request.limit)

    @property
    def has_next(self) -> bool:
        return self.page_request.offset + len(self.content) < self.total

    @property
    def has_previous(self) -> bool:
        return self.page_request.offset > 0

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next

    def meta(self) -> MetadataModel:
        return MetadataModel(
            page=self.page,
            per_page=self.page_request.limit,
            total=self.total,
            pages=self.pages,
            has_more=self.has_next,
        )


class PaginatedResponseModel(BaseModel, Generic[T]):  # type: ignore[misc]
    items: list[T]
    meta: MetadataModel

    @classmethod
    def from_page(cls, page: PageResult) -> "PaginatedResponseModel[Any]":
        return cls(items=page.content, meta=page.meta())
