"""FastAPI dependency injection providers."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from collab.db.models.user import UserRow
from collab.errors.exceptions import AuthenticationError
from collab.repositories.user_repo import UserRepository


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session from the app's session factory."""
    session_factory = request.app.state.db_session_factory
    async with session_factory() as session:
        yield session


def get_trace_id(request: Request) -> str:
    """Extract trace_id from request state (set by middleware)."""
    return getattr(request.state, "trace_id", "unknown")


async def get_current_user(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> UserRow:
    """Return the user named by the bearer token or raise 401."""
    claims = getattr(request.state, "user", {}) or {}
    if "_auth_error" in claims or claims.get("sub") in (None, "", "anonymous"):
        raise AuthenticationError()
    user = await UserRepository(db).get_by_user_name(claims["sub"])
    if user is None:
        raise AuthenticationError()
    return user


async def get_optional_user(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> UserRow | None:
    """Like ``get_current_user`` but anonymous callers get None.

    A token that is present but invalid is still rejected.
    """
    claims = getattr(request.state, "user", {}) or {}
    if "_auth_error" not in claims and claims.get("sub") in (None, "", "anonymous"):
        return None
    return await get_current_user(request, db)


# Type aliases for dependency injection
DBSession = Annotated[AsyncSession, Depends(get_db)]
TraceId = Annotated[str, Depends(get_trace_id)]
CurrentUser = Annotated[UserRow, Depends(get_current_user)]
OptionalUser = Annotated[UserRow | None, Depends(get_optional_user)]
