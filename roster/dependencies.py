"""
Dependency injection configuration for FastAPI.

Using FastAPI's Depends() system with @lru_cache provides singleton-like
behavior while keeping the repository overridable in tests through
``app.dependency_overrides``.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from roster.repositories.member_repository import MemberQueryRepository


@lru_cache
def get_member_repository() -> MemberQueryRepository:
    """
    Get the shared member query repository.

    The repository carries no per-call state, so one instance serves every
    request.
    """
    return MemberQueryRepository()


MemberRepoDep = Annotated[
    MemberQueryRepository, Depends(get_member_repository)
]
