"""Project repository."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from collab.db.models.chat import ChatRow, MessageRow
from collab.db.models.join_request import JoinRequestRow
from collab.db.models.notification import NotificationRow
from collab.db.models.post import PostRow
from collab.db.models.project import ProjectRow
from collab.db.models.vacancy import VacancyRow
from collab.repositories.base import BaseRepository


class ProjectRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, ProjectRow)

    async def get(self, project_id: int) -> ProjectRow | None:
        return await self.get_by_field("id", project_id)

    async def get_by_handle(self, handle: str) -> ProjectRow | None:
        return await self.get_by_field("handle", handle)

    async def handle_exists(self, handle: str) -> bool:
        stmt = select(ProjectRow.id).where(ProjectRow.handle == handle)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def list_all(self) -> list[ProjectRow]:
        result = await self.session.execute(select(ProjectRow).order_by(ProjectRow.id))
        return list(result.scalars().all())

    async def list_by_creator(self, creator_id: int) -> list[ProjectRow]:
        return await self.list_by_field("creator_id", creator_id)

    async def delete_with_dependents(self, project: ProjectRow) -> None:
        """Delete the project and every row that hangs off it.

        Children go first so the statements also succeed on backends that do
        not enforce ON DELETE CASCADE (SQLite without the foreign_keys pragma).
        The caller owns the transaction.
        """
        pid = project.id
        chat_ids = select(ChatRow.id).where(ChatRow.project_id == pid)

        await self.session.execute(delete(MessageRow).where(MessageRow.chat_id.in_(chat_ids)))
        await self.session.execute(delete(NotificationRow).where(NotificationRow.project_id == pid))
        await self.session.execute(delete(ChatRow).where(ChatRow.project_id == pid))
        await self.session.execute(delete(JoinRequestRow).where(JoinRequestRow.project_id == pid))
        await self.session.execute(delete(PostRow).where(PostRow.project_id == pid))
        await self.session.execute(delete(VacancyRow).where(VacancyRow.project_id == pid))
        await self.session.delete(project)
        await self.session.flush()
