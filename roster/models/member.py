from sqlmodel import Field

from roster.models.base import BaseModel


class Member(BaseModel, table=True):
    """
    SQLModel representing a member, optionally assigned to a team.

    Members without a team keep ``team_id`` as NULL; searches reach them
    through a left outer join.

    Attributes:
        id: Primary key identifier for the member
        username: Member name, matched exactly by username searches
        age: Age used by the inclusive range filters
        team_id: Foreign key to the owning team, if any
    """

    __tablename__ = "member"
    __table_args__ = {"extend_existing": True}

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(index=True)
    age: int = Field(default=0)
    team_id: int | None = Field(
        default=None, foreign_key="team.id", index=True
    )
