"""Vacancy repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from collab.db.models.vacancy import VacancyRow
from collab.repositories.base import BaseRepository


class VacancyRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, VacancyRow)

    async def list_for_projects(self, project_ids: list[int]) -> dict[int, list[VacancyRow]]:
        """Group vacancies by project id, each group ordered by vacancy id."""
        grouped: dict[int, list[VacancyRow]] = {pid: [] for pid in project_ids}
        if not project_ids:
            return grouped
        stmt = (
            select(VacancyRow)
            .where(VacancyRow.project_id.in_(project_ids))
            .order_by(VacancyRow.id)
        )
        result = await self.session.execute(stmt)
        for row in result.scalars().all():
            grouped[row.project_id].append(row)
        return grouped
