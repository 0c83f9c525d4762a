"""
Type-safe search condition schemas.

Every field is optional and independently nullable. A missing field (or a
blank string) means "no constraint", never "match nothing".
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BaseFilter(BaseModel):  # type: ignore[misc]
    """
    Base class for all filter schemas.

    Filters are immutable values, accept both snake_case field names and
    camelCase aliases, and reject unexpected fields.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MemberSearchCondition(BaseFilter):
    """
    Optional criteria for member searches.

    Example:
        >>> condition = MemberSearchCondition(team_name="teamB", age_goe=35)
        >>> condition = MemberSearchCondition.model_validate({"ageGoe": 25})
    """

    username: str | None = Field(
        default=None,
        description="Exact member username; blank means unset",
    )
    team_name: str | None = Field(
        default=None,
        description="Exact team name; blank means unset",
    )
    age_goe: int | None = Field(
        default=None,
        description="Inclusive lower bound on age",
    )
    age_loe: int | None = Field(
        default=None,
        description="Inclusive upper bound on age",
    )
