"""Project CRUD API routes."""

import logging

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from collab.db.base import utcnow
from collab.dependencies import CurrentUser, DBSession, OptionalUser
from collab.errors.exceptions import AuthorizationError, InvalidInputError, NotFoundError
from collab.models.project import ProjectCreate
from collab.repositories.project_repo import ProjectRepository
from collab.services.project_validator import derive_handle, validate_project
from collab.services.project_views import build_project_detail, build_project_list, project_view

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("")
async def list_projects(db: DBSession, user: OptionalUser) -> list[dict]:
    rows = await ProjectRepository(db).list_all()
    return await build_project_list(db, rows)


# Declared before /{handle} so "user" is never looked up as a handle.
@router.get("/user")
async def list_user_projects(db: DBSession, user: CurrentUser) -> list[dict]:
    rows = await ProjectRepository(db).list_by_creator(user.id)
    return await build_project_list(db, rows)


@router.get("/{handle}")
async def get_project(handle: str, db: DBSession, user: CurrentUser) -> dict:
    row = await ProjectRepository(db).get_by_handle(handle)
    if row is None:
        raise NotFoundError("project", "handle", handle)
    return await build_project_detail(db, row, user.id)


@router.post("", status_code=201)
async def create_project(project: ProjectCreate, db: DBSession, user: CurrentUser) -> JSONResponse:
    result = validate_project(project)
    if not result.ok:
        logger.info("project_rejected", extra={"rule": result.rule, "user_id": user.id})
        raise InvalidInputError(result.message)

    repo = ProjectRepository(db)
    handle = project.handle or derive_handle(project.name)
    taken_message = f"Project handle '{handle}' is already taken"
    if await repo.handle_exists(handle):
        raise InvalidInputError(taken_message)

    try:
        row = await repo.create(
            name=project.name,
            handle=handle,
            description=project.description,
            creator_id=user.id,
            date_created=utcnow(),
            tags=list(project.tags or []),
            live_url=project.live_url or None,
            trello_url=project.trello_url or None,
            github_url=project.github_url or None,
        )
        await db.commit()
    except IntegrityError as exc:
        # Lost a race for the same handle
        await db.rollback()
        raise InvalidInputError(taken_message) from exc

    logger.info("project_created", extra={"project_id": row.id, "handle": row.handle, "user_id": user.id})

    return JSONResponse(
        status_code=201,
        content=project_view(row).model_dump(mode="json"),
        headers={"Location": f"/api/projects/{row.handle}"},
    )


@router.delete("/{project_id}", status_code=204)
async def delete_project(project_id: int, db: DBSession, user: CurrentUser) -> Response:
    repo = ProjectRepository(db)
    row = await repo.get(project_id)
    if row is None:
        raise NotFoundError("project", "id", project_id)
    if row.creator_id != user.id:
        raise AuthorizationError("Only the project creator may delete this project")

    await repo.delete_with_dependents(row)
    await db.commit()
    logger.info("project_deleted", extra={"project_id": project_id, "user_id": user.id})
    return Response(status_code=204)
