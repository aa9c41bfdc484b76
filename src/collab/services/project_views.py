"""Shape project rows into sanitized view models."""

from sqlalchemy.ext.asyncio import AsyncSession

from collab.db.models.project import ProjectRow
from collab.db.models.vacancy import VacancyRow
from collab.models.project import ProjectDetailView, ProjectView, VacancyView
from collab.repositories.join_request_repo import JoinRequestRepository
from collab.repositories.vacancy_repo import VacancyRepository
from collab.services.sanitizer import sanitize_text

OWNER_ROLE = "owner"


def vacancy_view(row: VacancyRow) -> VacancyView:
    view = VacancyView.model_validate(row)
    return view.model_copy(
        update={
            "title": sanitize_text(view.title),
            "description": sanitize_text(view.description),
        }
    )


def project_view(row: ProjectRow, vacancies: list[VacancyRow] | None = None) -> ProjectView:
    return ProjectView(
        id=row.id,
        name=sanitize_text(row.name),
        handle=row.handle,
        description=sanitize_text(row.description),
        creator_id=row.creator_id,
        date_created=row.date_created,
        tags=[sanitize_text(tag) for tag in row.tags or []],
        live_url=row.live_url,
        trello_url=row.trello_url,
        github_url=row.github_url,
        vacancies=[vacancy_view(v) for v in vacancies or []],
    )


async def resolve_user_role(db: AsyncSession, project: ProjectRow, user_id: int) -> str | None:
    """Classify the requester's relationship to the project.

    Creators are owners; anyone else gets the status of their latest join
    request, as recorded by the request workflow, or None.
    """
    if project.creator_id == user_id:
        return OWNER_ROLE
    latest = await JoinRequestRepository(db).get_latest(project.id, user_id)
    return latest.status if latest else None


async def build_project_list(db: AsyncSession, rows: list[ProjectRow]) -> list[dict]:
    grouped = await VacancyRepository(db).list_for_projects([row.id for row in rows])
    return [
        project_view(row, grouped.get(row.id)).model_dump(mode="json")
        for row in rows
    ]


async def build_project_detail(db: AsyncSession, row: ProjectRow, user_id: int) -> dict:
    grouped = await VacancyRepository(db).list_for_projects([row.id])
    base = project_view(row, grouped.get(row.id))
    detail = ProjectDetailView(
        **base.model_dump(),
        user_role=await resolve_user_role(db, row, user_id),
    )
    return detail.model_dump(mode="json", by_alias=True)
