from sqlmodel import Field

from roster.models.base import BaseModel


class Team(BaseModel, table=True):
    """
    SQLModel representing a team that owns zero or more members.

    Attributes:
        id: Primary key identifier for the team
        name: Team name, matched exactly by team-name searches
    """

    __tablename__ = "team"
    __table_args__ = {"extend_existing": True}

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True)
