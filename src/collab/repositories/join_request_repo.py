"""Join request repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from collab.db.models.join_request import JoinRequestRow
from collab.repositories.base import BaseRepository


class JoinRequestRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, JoinRequestRow)

    async def get_latest(self, project_id: int, user_id: int) -> JoinRequestRow | None:
        stmt = (
            select(JoinRequestRow)
            .where(
                JoinRequestRow.project_id == project_id,
                JoinRequestRow.user_id == user_id,
            )
            .order_by(JoinRequestRow.id.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
