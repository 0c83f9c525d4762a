from roster.models.member import Member
from roster.models.team import Team

__all__ = ["Member", "Team"]
