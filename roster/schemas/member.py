from pydantic import BaseModel, ConfigDict


class MemberTeamDto(BaseModel):  # type: ignore[misc]
    """
    Flat projection of a member joined with its team.

    ``team_id`` and ``team_name`` are None for members without a team.
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    member_id: int
    username: str
    age: int
    team_id: int | None = None
    team_name: str | None = None
