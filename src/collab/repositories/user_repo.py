"""User repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from collab.db.models.user import UserRow
from collab.repositories.base import BaseRepository


class UserRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, UserRow)

    async def get_by_user_name(self, user_name: str) -> UserRow | None:
        return await self.get_by_field("user_name", user_name)
