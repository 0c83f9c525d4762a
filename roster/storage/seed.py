"""
Sample data: two teams with two members each.

    teamA: member1 (10), member2 (20)
    teamB: member3 (30), member4 (40)
"""

from sqlmodel.ext.asyncio.session import AsyncSession

from roster.models import Member, Team

SAMPLE_TEAMS = ("teamA", "teamB")
SAMPLE_MEMBERS = (
    ("member1", 10, "teamA"),
    ("member2", 20, "teamA"),
    ("member3", 30, "teamB"),
    ("member4", 40, "teamB"),
)


async def seed_sample_data(session: AsyncSession) -> list[Member]:
    """
    Insert the sample teams and members and flush them.

    The caller owns the transaction and decides whether to commit.

    Returns:
        The inserted members with primary keys populated.
    """
    teams = {name: Team(name=name) for name in SAMPLE_TEAMS}
    session.add_all(teams.values())
    await session.flush()

    members = [
        Member(username=username, age=age, team_id=teams[team].id)
        for username, age, team in SAMPLE_MEMBERS
    ]
    session.add_all(members)
    await session.flush()
    return members
