"""
Statement construction shared by every pagination strategy.

Content statements always LEFT OUTER JOIN the team table so members without
a team are still returned (with NULL team columns). Count statements keep
the join only when the filter reads the team table; a many-to-one left join
never changes the member count.
"""

from typing import Any

from sqlalchemy import ColumnElement, Select
from sqlmodel import func, select

from roster.models import Member, Team
from roster.schemas.page import SortOrder
from roster.storage.predicates import CompositeFilter

SORT_COLUMNS: dict[str, Any] = {
    "member_id": Member.id,
    "username": Member.username,
    "age": Member.age,
    "team_name": Team.name,
}

_TEAM_JOIN = Member.team_id == Team.id


def order_by_clauses(sort: tuple[SortOrder, ...] = ()) -> list[ColumnElement[Any]]:
    """
    Translate sort orders into ORDER BY clauses.

    ``Member.id`` ascending is appended as a tiebreaker unless the caller
    already sorts by it, keeping every page deterministic.
    """
    clauses = []
    for order in sort:
        column = SORT_COLUMNS[order.key]
        clauses.append(column.desc() if order.direction == "desc" else column.asc())
    if not any(order.key == "member_id" for order in sort):
        clauses.append(Member.id.asc())
    return clauses


def build_content_query(
    composite: CompositeFilter, sort: tuple[SortOrder, ...] = ()
) -> Select:
    """
    Build the projected member/team statement for a composite filter.

    Example:
        >>> stmt = build_content_query(compose(condition))
        >>> stmt = stmt.offset(0).limit(20)
    """
    query: Select = (
        select(
            Member.id.label("member_id"),
            Member.username,
            Member.age,
            Team.id.label("team_id"),
            Team.name.label("team_name"),
        )
        .select_from(Member)
        .outerjoin(Team, _TEAM_JOIN)
    )

    if not composite.is_empty:
        query = query.where(composite.clause)

    return query.order_by(*order_by_clauses(sort))


def build_count_query(composite: CompositeFilter) -> Select:
    """Build ``SELECT count(member.id)`` over the same filter."""
    query = select(func.count(Member.id)).select_from(Member)

    if composite.references_team:
        query = query.outerjoin(Team, _TEAM_JOIN)

    if not composite.is_empty:
        query = query.where(composite.clause)

    return query
