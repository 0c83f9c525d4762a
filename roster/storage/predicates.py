"""
Predicate fragments and their composition into one WHERE clause.

Each fragment builder maps one optional search field to either a SQLAlchemy
boolean expression or ``None`` ("no constraint"). ``compose`` folds the
fragment table over a search condition, skipping ``None`` entries, so an
empty condition never produces a malformed statement.

Example:
    >>> from roster.schemas.filters import MemberSearchCondition
    >>> composite = compose(MemberSearchCondition(team_name="teamB"))
    >>> stmt = select(Member).where(composite.clause)
"""

from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable

from sqlalchemy import ColumnElement, and_, true

from roster.models import Member, Team
from roster.schemas.filters import MemberSearchCondition

Fragment = ColumnElement[bool]
FragmentBuilder = Callable[[Any], Fragment | None]


def has_text(value: str | None) -> bool:
    """Return True when value holds at least one non-whitespace character."""
    return value is not None and bool(value.strip())


def username_eq(username: str | None) -> Fragment | None:
    return Member.username == username if has_text(username) else None


def team_name_eq(team_name: str | None) -> Fragment | None:
    return Team.name == team_name if has_text(team_name) else None


def age_goe(age: int | None) -> Fragment | None:
    return Member.age >= age if age is not None else None


def age_loe(age: int | None) -> Fragment | None:
    return Member.age <= age if age is not None else None


# Order is irrelevant to the result set; it only fixes the SQL text.
FRAGMENT_BUILDERS: tuple[tuple[str, FragmentBuilder], ...] = (
    ("username", username_eq),
    ("team_name", team_name_eq),
    ("age_goe", age_goe),
    ("age_loe", age_loe),
)


@dataclass(frozen=True)
class CompositeFilter:
    """
    Conjunction of the active fragments for one search call.

    Attributes:
        fragments: Non-absent fragments in builder order.
        references_team: True when a fragment reads the team table, which
            forces count statements to keep the join.
    """

    fragments: tuple[Fragment, ...] = ()
    references_team: bool = False

    @property
    def clause(self) -> ColumnElement[bool]:
        """The combined WHERE clause; always-true when nothing is active."""
        if not self.fragments:
            return true()
        return and_(*self.fragments)

    @property
    def is_empty(self) -> bool:
        return not self.fragments


def _collect(
    acc: tuple[tuple[Fragment, ...], bool],
    entry: tuple[str, Fragment | None],
) -> tuple[tuple[Fragment, ...], bool]:
    fragments, references_team = acc
    field, fragment = entry
    if fragment is None:
        return acc
    return fragments + (fragment,), references_team or field == "team_name"


def compose(condition: MemberSearchCondition | None) -> CompositeFilter:
    """
    Build the composite filter for a search condition.

    Args:
        condition: Search criteria; None behaves like an empty condition.

    Returns:
        CompositeFilter holding only the fragments whose input is present.
    """
    if condition is None:
        return CompositeFilter()

    entries = (
        (field, build(getattr(condition, field)))
        for field, build in FRAGMENT_BUILDERS
    )
    fragments, references_team = reduce(_collect, entries, ((), False))
    return CompositeFilter(
        fragments=fragments, references_team=references_team
    )
