"""
Error handler decorator for HTTP endpoints.

Converts AppException instances into HTTPException responses, eliminating
duplicate try/except blocks in handlers. The query layer itself never logs
or swallows failures; this boundary is where they are logged.
"""

from functools import wraps
from typing import Any, Callable

from fastapi import HTTPException

from roster.exceptions import AppException, DatabaseError
from roster.logging import logger


def handle_http_errors(func: Callable) -> Callable:
    """
    Decorator for HTTP endpoints to convert AppException to HTTPException.

    Args:
        func: The HTTP endpoint function to wrap.

    Returns:
        Wrapped function that handles exceptions.

    Example:
        ```python
        @router.get("/v2/members")
        @handle_http_errors
        async def search_members_page(repo: MemberRepoDep) -> ...:
            return await repo.search_page(condition, page_request)
        ```
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except DatabaseError as ex:
            logger.error(
                f"Database error in {func.__name__}: {ex.message}",
                extra={"exception_type": type(ex).__name__},
                exc_info=True,
            )
            raise HTTPException(
                status_code=ex.http_status,
                detail="Database error occurred",
            ) from ex
        except AppException as ex:
            logger.warning(
                f"AppException in {func.__name__}: {ex.message}",
                extra={"exception_type": type(ex).__name__},
            )
            raise HTTPException(
                status_code=ex.http_status,
                detail=ex.message,
            ) from ex

    return wrapper
